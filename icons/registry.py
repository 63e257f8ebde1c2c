"""Named icon sets and their prefix index."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from .exceptions import CannotRegisterIconSet
from .storage import IconStorage, StoredFile

logger = logging.getLogger(__name__)

SVG_RENDERER = "icons.svg"

ComponentCallback = Callable[[str, str, str], None]


@dataclass(frozen=True)
class IconSet:
    name: str
    path: str
    prefix: str
    extra: Mapping[str, Any] = field(default_factory=dict)


class SetRegistry:
    def __init__(self, storage: IconStorage, register_component: ComponentCallback | None = None) -> None:
        self.storage = storage
        self.register_component = register_component
        self._sets: dict[str, IconSet] = {}

    def add(self, name: str, options: Mapping[str, Any]) -> "SetRegistry":
        """Validate and store the set ``name``.

        Raises :class:`CannotRegisterIconSet` without touching the registry
        when ``path`` or ``prefix`` are missing, the prefix already belongs to
        another set or the path does not exist.
        """
        path = options.get("path")
        prefix = options.get("prefix")

        if path is None:
            raise CannotRegisterIconSet.path_not_defined(name)
        if prefix is None:
            raise CannotRegisterIconSet.prefix_not_defined(name)

        colliding_set = self.get_by_prefix(prefix)
        if colliding_set is not None:
            raise CannotRegisterIconSet.prefix_not_unique(name, colliding_set)

        path = str(path)
        if not self.storage.exists(path):
            raise CannotRegisterIconSet.non_existing_path(name, path)

        files = list(self.storage.all_files(path))
        extra = {key: value for key, value in options.items() if key not in ("path", "prefix")}
        icon_set = IconSet(name=name, path=path, prefix=prefix, extra=extra)
        self._sets[name] = icon_set

        self._register_components(icon_set, files)
        logger.info("Conjunto de ícones registrado", extra={"set": name, "prefix": prefix, "components": len(files)})
        return self

    def _register_components(self, icon_set: IconSet, files: list[StoredFile]) -> None:
        if self.register_component is None:
            return
        for stored in files:
            try:
                self.register_component(SVG_RENDERER, stored.dotted_name, icon_set.prefix)
            except Exception:
                logger.warning(
                    "Falha ao registrar componente de ícone",
                    exc_info=True,
                    extra={"set": icon_set.name, "component": stored.dotted_name},
                )

    def all(self) -> Mapping[str, IconSet]:
        return MappingProxyType(dict(self._sets))

    def get(self, name: str) -> IconSet | None:
        return self._sets.get(name)

    def get_by_prefix(self, prefix: str) -> str | None:
        for name, icon_set in self._sets.items():
            if icon_set.prefix == prefix:
                return name
        return None
