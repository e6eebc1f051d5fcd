from django.db import models

from common.serializer import SerializableModel


class Todo(SerializableModel):
    title = models.TextField(default="", blank=True)

    class Serialization:
        FIELDS = ["id", "title"]

    def __str__(self):
        return self.title
