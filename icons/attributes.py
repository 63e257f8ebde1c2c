"""Merge of the class argument and explicit attributes for a resolved icon."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ClassArgument:
    """Second argument of ``svg``: either a CSS class or a full attribute override."""

    css_class: str = ""
    override: Mapping[str, Any] | None = field(default=None)

    @classmethod
    def from_value(cls, value: Any) -> "ClassArgument":
        if isinstance(value, ClassArgument):
            return value
        if isinstance(value, Mapping):
            return cls(override=dict(value))
        if isinstance(value, str):
            return cls(css_class=value)
        return cls()


class AttributeBuilder:
    def __init__(self, default_class: str = "") -> None:
        self.default_class = default_class

    def build_class(self, css_class: str) -> str:
        return f"{self.default_class} {css_class}".strip()

    def build(self, class_: Any = "", attributes: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Return the attributes of the icon.

        A non-empty class string is appended to the default class and stored
        under ``class``. A mapping replaces ``attributes`` entirely.
        """
        argument = ClassArgument.from_value(class_)
        result = dict(attributes or {})

        if argument.override is not None:
            return dict(argument.override)
        if argument.css_class:
            result["class"] = self.build_class(argument.css_class)
        return result
