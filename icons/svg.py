"""Resolved icon value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from django.utils.html import format_html
from django.utils.safestring import SafeString, mark_safe


@dataclass(frozen=True)
class Svg:
    name: str
    contents: str
    attributes: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def render_attributes(self) -> str:
        """Render ``attributes`` as ` key="value"` pairs, escaping the values.

        ``True`` renders the bare attribute name; ``False`` and ``None`` are skipped.
        """
        rendered = []
        for key, value in self.attributes.items():
            if value is True:
                rendered.append(format_html(" {}", key))
            elif value is not None and value is not False:
                rendered.append(format_html(' {}="{}"', key, value))
        return "".join(rendered)

    def to_html(self) -> SafeString:
        # Plain text substitution on the opening tag; the markup itself is never parsed.
        return mark_safe(self.contents.replace("<svg", f"<svg{self.render_attributes()}", 1))

    def __html__(self) -> str:
        return self.to_html()

    def __str__(self) -> str:
        return self.to_html()
