from django.urls import path

from . import views

urlpatterns = [
    path("", views.index, name="todo_index"),
    path("change", views.change, name="todo_change"),
]
