from django.conf import settings
from django.core.management import call_command
from django.db import connections, DEFAULT_DB_ALIAS

import logging
from pathlib import Path


__all__ = (
    "ensure_database_dir",
    "create_tables",
    "recreate_table",
    "close_databases",
)


_log = logging.getLogger(__name__)


def ensure_database_dir(using=DEFAULT_DB_ALIAS):
    path = Path(settings.DATABASES[using]["NAME"])
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_tables(using=DEFAULT_DB_ALIAS):
    """Creates every missing table. Existing rows are left alone."""
    _log.info(f"Creating tables in {settings.DATABASES[using]['NAME']}")
    call_command("migrate", database=using, interactive=False, verbosity=0)


def recreate_table(model, using=DEFAULT_DB_ALIAS):
    """Drops the model's table and creates it again, destroying every row."""
    _log.info(f"Recreating table {model._meta.db_table}")
    with connections[using].schema_editor() as editor:
        editor.delete_model(model)
        editor.create_model(model)


def close_databases():
    connections.close_all()
