"""Root URL configuration for docsmith_tool."""

from django.urls import include, path

urlpatterns = [
    path('', include('docsmith.urls')),
]
