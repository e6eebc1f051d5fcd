from django.urls import path

from . import views

urlpatterns = [
    path("grid-entries", views.grid_entries, name="grid_entries"),
    path("grid-entry", views.grid_entry, name="grid_entry"),
]
