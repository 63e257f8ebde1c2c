"""Exceções do registro de conjuntos de ícones."""

from __future__ import annotations

from django.utils.translation import gettext_lazy as _


class CannotRegisterIconSet(ValueError):
    """Raised when an icon set cannot be added to the registry."""

    default_message = _("The icon set could not be registered.")

    def __init__(self, message: str | None = None, *, set_name: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.set = set_name

    @classmethod
    def path_not_defined(cls, set_name: str) -> "CannotRegisterIconSet":
        return cls(
            _('Icon set "%(set)s" does not have a "path" defined.') % {"set": set_name},
            set_name=set_name,
        )

    @classmethod
    def prefix_not_defined(cls, set_name: str) -> "CannotRegisterIconSet":
        return cls(
            _('Icon set "%(set)s" does not have a "prefix" defined.') % {"set": set_name},
            set_name=set_name,
        )

    @classmethod
    def prefix_not_unique(cls, set_name: str, colliding_set: str) -> "CannotRegisterIconSet":
        exc = cls(
            _('The prefix for icon set "%(set)s" is already used by the "%(other)s" set.')
            % {"set": set_name, "other": colliding_set},
            set_name=set_name,
        )
        exc.colliding_set = colliding_set
        return exc

    @classmethod
    def non_existing_path(cls, set_name: str, path: str) -> "CannotRegisterIconSet":
        exc = cls(
            _('The path "%(path)s" for icon set "%(set)s" does not exist.')
            % {"set": set_name, "path": path},
            set_name=set_name,
        )
        exc.path = path
        return exc


class SvgNotFound(LookupError):
    """Raised when a reference cannot be resolved to an SVG file."""

    def __init__(self, message: str, *, set_name: str, name: str) -> None:
        super().__init__(message)
        self.set = set_name
        self.name = name

    @classmethod
    def missing(cls, set_name: str, name: str) -> "SvgNotFound":
        return cls(
            _('Svg by name "%(name)s" from set "%(set)s" not found.') % {"name": name, "set": set_name},
            set_name=set_name,
            name=name,
        )
