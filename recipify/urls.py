"""
URL configuration for recipify project.

Only the admin is routed here; the recipe editor's pages live in the
application that embeds the recipes app.
"""
from django.contrib import admin
from django.urls import path

urlpatterns = [
    path('admin/', admin.site.urls),
]
