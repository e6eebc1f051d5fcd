from django.db import models


__all__ = (
    "SerializableModel",
)


class SerializableModel(models.Model):
    class Meta:
        abstract = True

    class Serialization:
        FIELDS: list
        TRANSFORM: dict[str, str]

    def _transform(self, fields: list[str]) -> dict:
        field_transforms = getattr(self.Serialization, "TRANSFORM", {})

        data = {}
        for field in fields:
            data[field_transforms.get(field, field)] = getattr(self, field)

        return data

    def serialize(
        self,
        includes: list[str] | None = None,
        excludes: list[str] | None = None
    ) -> dict:
        fields = list(self.Serialization.FIELDS)
        for field in excludes or ():
            fields.remove(field)
        for field in includes or ():
            if field not in fields:
                fields.append(field)

        return self._transform(fields)
