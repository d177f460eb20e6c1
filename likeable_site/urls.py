"""
URL configuration for likeable_site project.

Only the admin is routed; likes and counters are managed there.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path('admin/', admin.site.urls),
]
