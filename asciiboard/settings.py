from pathlib import Path
from dotenv import load_dotenv
import os

load_dotenv()


BASE_DIR = Path(__file__).resolve().parent.parent

BOARD_VARIANT = os.getenv("BOARD_VARIANT", "grid").lower()
if BOARD_VARIANT not in ("grid", "todo"):
    raise ValueError(f"BOARD_VARIANT must be 'grid' or 'todo', not {BOARD_VARIANT!r}")

SECRET_KEY = os.getenv("SECRET_KEY", "django-insecure-asciiboard-development-key")
DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "*").split(",")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

WEBHOOK_URL = os.getenv("WEBHOOK_URL")

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "place",
    "todo",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "common.middleware.ExceptionHandlingMiddleware",
]

ROOT_URLCONF = "asciiboard.urls"
WSGI_APPLICATION = "asciiboard.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DB_PATH", str(BASE_DIR / "db" / ("app.db" if BOARD_VARIANT == "grid" else "todo.db"))),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

TIME_ZONE = "UTC"
USE_TZ = True

STATIC_URL = "/static/"

BOARD_TITLES = {
    "grid": "ASCII Grid",
    "todo": "Todo",
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s]: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO").upper(),
    },
}
