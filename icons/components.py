"""In-process registry of template components backed by icon files.

Registering a set publishes one component per SVG file under the alias
``<prefix>-<dotted name>`` so templates can render it with ``{% icon %}``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Component:
    renderer: str
    name: str
    prefix: str

    @property
    def alias(self) -> str:
        return f"{self.prefix}-{self.name}"


class ComponentRegistry:
    def __init__(self) -> None:
        self._components: dict[str, Component] = {}

    def __call__(self, renderer: str, name: str, prefix: str) -> None:
        self.register(renderer, name, prefix)

    def register(self, renderer: str, name: str, prefix: str) -> Component:
        component = Component(renderer=renderer, name=name, prefix=prefix)
        self._components[component.alias] = component
        logger.debug("Componente registrado", extra={"alias": component.alias, "renderer": renderer})
        return component

    def get(self, alias: str) -> Component | None:
        return self._components.get(alias)

    def __contains__(self, alias: object) -> bool:
        return alias in self._components

    def clear(self) -> None:
        self._components.clear()
