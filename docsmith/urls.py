"""URL configuration for the docsmith app.

This module defines the URL patterns for the app's JSON API and sets the
``app_name`` so the routes can be reversed from the project namespace.
"""

from django.urls import path

from . import views

app_name = 'docsmith'

urlpatterns = [
    path('api/linkjuice/', views.linkjuice, name='linkjuice'),
    path('api/files/translate/', views.translate, name='translate'),
    path('api/files/missing-translations/', views.missing_translations, name='missing_translations'),
]
