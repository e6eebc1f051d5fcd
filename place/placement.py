"""Placing entries on the ASCII grid.

Validation is pure; :class:`Grid` wraps the storage alias it was built with
and owns the occupancy check, the insert and the listing.
"""

from django.db import DatabaseError, IntegrityError, DEFAULT_DB_ALIAS, transaction

from .models import GridEntry

from enum import Enum
import logging


__all__ = (
    "GRID_WIDTH",
    "GRID_HEIGHT",
    "RejectionKind",
    "PlacementRejected",
    "validate_placement",
    "parse_placement",
    "Grid",
)


_log = logging.getLogger(__name__)

GRID_WIDTH = 80
GRID_HEIGHT = 25

INVALID_JSON = "Invalid JSON data"
OUT_OF_BOUNDS = "Position out of bounds"
FIELDS_REQUIRED = "Name and message are required"
OCCUPIED = "Position already occupied"
DATABASE_ERROR = "Database error"
SAVE_FAILED = "Failed to save entry"


class RejectionKind(Enum):
    MALFORMED_INPUT = "malformed_input"
    VALIDATION = "validation"
    OCCUPIED = "occupied"
    # lost a race for the cell to a concurrent insert
    CONFLICT = "conflict"
    STORAGE = "storage"


class PlacementRejected(Exception):
    def __init__(self, reason: str, kind: RejectionKind):
        super().__init__(reason)
        self.reason = reason
        self.kind = kind


def validate_placement(x: int, y: int, name: str, message: str) -> str | None:
    """Returns the rejection reason for a candidate placement, or None if it is acceptable."""
    if not 0 <= x < GRID_WIDTH or not 0 <= y < GRID_HEIGHT:
        return OUT_OF_BOUNDS
    if name == "" or message == "":
        return FIELDS_REQUIRED
    return None


def _int_field(data, key):
    value = data.get(key)
    if value is None:
        return 0
    # bool is an int subclass but never a valid coordinate
    if isinstance(value, bool) or not isinstance(value, int):
        raise PlacementRejected(INVALID_JSON, RejectionKind.MALFORMED_INPUT)
    return value


def _str_field(data, key):
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PlacementRejected(INVALID_JSON, RejectionKind.MALFORMED_INPUT)
    return value


def parse_placement(data) -> tuple[int, int, str, str]:
    """Turns a decoded JSON body into ``(x, y, name, message)``.

    Missing keys fall back to ``0`` and ``""`` and unknown keys are ignored,
    so a well-formed but incomplete body is left for :func:`validate_placement`
    to reject. Values of the wrong type make the whole body malformed.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise PlacementRejected(INVALID_JSON, RejectionKind.MALFORMED_INPUT)

    return (
        _int_field(data, "x"),
        _int_field(data, "y"),
        _str_field(data, "name"),
        _str_field(data, "message"),
    )


class Grid:
    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    @property
    def entries(self):
        return GridEntry.objects.using(self.using)

    def is_occupied(self, x: int, y: int) -> bool:
        return self.entries.filter(x=x, y=y).exists()

    def list_entries(self) -> list[GridEntry]:
        return list(self.entries.order_by("-timestamp", "-id"))

    def place_entry(self, x: int, y: int, name: str, message: str) -> GridEntry:
        reason = validate_placement(x, y, name, message)
        if reason is not None:
            raise PlacementRejected(reason, RejectionKind.VALIDATION)

        try:
            occupied = self.is_occupied(x, y)
        except DatabaseError:
            _log.exception(f"Occupancy check failed for ({x}, {y})")
            raise PlacementRejected(DATABASE_ERROR, RejectionKind.STORAGE)
        if occupied:
            raise PlacementRejected(OCCUPIED, RejectionKind.OCCUPIED)

        try:
            with transaction.atomic(using=self.using):
                entry = self.entries.create(x=x, y=y, name=name, message=message)
        except IntegrityError:
            _log.warning(f"Lost race for ({x}, {y}), cell was taken after the occupancy check")
            raise PlacementRejected(OCCUPIED, RejectionKind.CONFLICT)
        except DatabaseError:
            _log.exception(f"Failed to save entry at ({x}, {y})")
            raise PlacementRejected(SAVE_FAILED, RejectionKind.STORAGE)

        _log.info(f"{name} placed an entry at ({x}, {y})")
        return entry
