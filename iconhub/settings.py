import os
from pathlib import Path

from .env import load_env

load_env()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "False").lower() in {"1", "true", "yes"}
ALLOWED_HOSTS = [host for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost").split(",") if host]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "icons",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    }
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

USE_I18N = True
LANGUAGE_CODE = "pt-br"
TIME_ZONE = "America/Sao_Paulo"
USE_TZ = True

ICONS = {
    "class": os.getenv("ICONS_DEFAULT_CLASS", "icon"),
    "strict_cache": os.getenv("ICONS_STRICT_CACHE", "False").lower() in {"1", "true", "yes"},
    "storage": None,
    "sets": {
        "default": {
            "path": str(BASE_DIR / "resources" / "svg"),
            "prefix": "icon",
        },
    },
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {"simple": {"format": "%(levelname)s %(name)s %(message)s"}},
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "simple"}},
    "loggers": {
        "icons": {
            "handlers": ["console"],
            "level": os.getenv("ICONS_LOG_LEVEL", "INFO"),
        },
    },
}
