from __future__ import annotations

from typing import Any

from django.conf import settings
from django.core.files.storage import Storage
from django.utils.module_loading import import_string

DEFAULTS: dict[str, Any] = {
    "class": "",
    "strict_cache": False,
    "storage": None,
    "sets": {},
}


def get_config() -> dict[str, Any]:
    """Return the ``ICONS`` setting merged over the defaults."""

    config = dict(DEFAULTS)
    config.update(getattr(settings, "ICONS", None) or {})
    return config


def get_storage(config: dict[str, Any] | None = None) -> Storage | None:
    config = config if config is not None else get_config()
    storage = config.get("storage")
    if storage is None or isinstance(storage, Storage):
        return storage
    return import_string(storage)()
