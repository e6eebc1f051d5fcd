import django
import os
import sys
import logging
from dotenv import load_dotenv

load_dotenv()
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "asciiboard.settings")
django.setup()

from django.conf import settings
from django.core.servers.basehttp import run
from django.core.wsgi import get_wsgi_application
from django.db import DatabaseError
from django.template import TemplateDoesNotExist
from django.template.loader import get_template

from common.util import ensure_database_dir, create_tables, recreate_table, close_databases
from todo.models import Todo


_log = logging.getLogger(__name__)

TEMPLATES = {
    "grid": "place/index.html",
    "todo": "todo/index.html",
}


class Server:
    def __init__(self, variant=None, host=None, port=None):
        self.variant = variant or settings.BOARD_VARIANT
        self.host = host or settings.HOST
        self.port = port or settings.PORT

    def open_storage(self):
        path = ensure_database_dir()
        create_tables()
        if self.variant == "todo":
            # the todo board starts empty on every launch
            recreate_table(Todo)
        _log.info(f"Storage ready at {path}")

    def load_templates(self):
        get_template(TEMPLATES[self.variant])

    def setup(self):
        """Everything that has to succeed before serving. Any failure here is fatal."""
        try:
            self.open_storage()
            self.load_templates()
        except (OSError, DatabaseError, TemplateDoesNotExist) as exc:
            _log.critical(f"Failed to start the {self.variant} board: {exc}")
            sys.exit(1)

    def run(self):
        self.setup()
        print(f"Server is running at http://localhost:{self.port}")
        _log.info(f"Serving the {self.variant} board on {self.host}:{self.port}")
        try:
            run(self.host, self.port, get_wsgi_application(), threading=True)
        except KeyboardInterrupt:
            pass
        finally:
            close_databases()
            _log.info("Server stopped")


if __name__ == "__main__":
    Server().run()
