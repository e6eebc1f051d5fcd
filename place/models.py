from django.db import models

from common.serializer import SerializableModel

from time import time


class GridEntry(SerializableModel):
    timestamp = models.FloatField(default=time)
    x = models.PositiveSmallIntegerField()
    y = models.PositiveSmallIntegerField()
    name = models.TextField()
    message = models.TextField()

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["x", "y"], name="grid_entry_cell_unique")
        ]

    class Serialization:
        FIELDS = ["id", "x", "y", "name", "message"]

    def __str__(self):
        return f"{self.name} at ({self.x}, {self.y})"
