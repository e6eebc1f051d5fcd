from django.db import DatabaseError
from django.views.decorators.csrf import csrf_exempt

from common.util import success, error, plain_error, requires_method, requires_data
from place.placement import Grid, PlacementRejected, parse_placement

import logging


_log = logging.getLogger(__name__)

grid = Grid()


@requires_method("GET")
def grid_entries(req):
    try:
        entries = grid.list_entries()
    except DatabaseError as exc:
        _log.exception("Failed to list grid entries")
        return plain_error(str(exc), status=500)

    return success([entry.serialize() for entry in entries])


@csrf_exempt
@requires_method("POST")
@requires_data
def grid_entry(req, data):
    try:
        grid.place_entry(*parse_placement(data))
    except PlacementRejected as exc:
        return error(exc.reason)

    return success()
