"""Public façade combining the set registry, resolver and attribute builder."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from .attributes import AttributeBuilder
from .components import ComponentRegistry
from .conf import get_config, get_storage
from .metrics import icons_registered_sets_total
from .registry import ComponentCallback, IconSet, SetRegistry
from .resolver import ContentResolver
from .storage import DjangoStorageBackend, IconStorage
from .svg import Svg

logger = logging.getLogger(__name__)


class IconFactory:
    def __init__(
        self,
        storage: IconStorage | None = None,
        default_class: str = "",
        *,
        register_component: ComponentCallback | None = None,
        strict_cache: bool = False,
    ) -> None:
        self.storage = storage if storage is not None else DjangoStorageBackend()
        self.registry = SetRegistry(self.storage, register_component)
        self.resolver = ContentResolver(self.registry, self.storage, strict=strict_cache)
        self.attributes = AttributeBuilder(default_class)
        # Guards the set table and the content cache together.
        self._lock = threading.RLock()

    @property
    def default_class(self) -> str:
        return self.attributes.default_class

    def all(self) -> Mapping[str, IconSet]:
        return self.registry.all()

    def add(self, name: str, options: Mapping[str, Any]) -> "IconFactory":
        with self._lock:
            self.registry.add(name, options)
            self.resolver.clear()
        icons_registered_sets_total.inc()
        return self

    def svg(self, name: str, class_: Any = "", attributes: Mapping[str, Any] | None = None) -> Svg:
        """Resolve ``name`` to an :class:`Svg`.

        Raises :class:`~icons.exceptions.SvgNotFound` when the reference does
        not match a file of a registered set.
        """
        with self._lock:
            resolution = self.resolver.resolve(name)
        return Svg(resolution.name, resolution.contents, self.attributes.build(class_, attributes))


components = ComponentRegistry()

_factory: IconFactory | None = None
_factory_lock = threading.Lock()


def build_factory(config: dict[str, Any] | None = None) -> IconFactory:
    config = config if config is not None else get_config()
    factory = IconFactory(
        DjangoStorageBackend(get_storage(config)),
        config.get("class") or "",
        register_component=components,
        strict_cache=bool(config.get("strict_cache")),
    )
    for name, options in (config.get("sets") or {}).items():
        factory.add(name, options)
    logger.debug("Fábrica de ícones configurada", extra={"sets": list(factory.all())})
    return factory


def get_factory() -> IconFactory:
    global _factory
    with _factory_lock:
        if _factory is None:
            _factory = build_factory()
        return _factory


def reset_factory() -> None:
    """Discard the process factory; the next ``get_factory`` rebuilds it from settings."""
    global _factory
    with _factory_lock:
        _factory = None
        components.clear()
