"""Icon sets resolved to inline SVG for Django templates."""

from .exceptions import CannotRegisterIconSet, SvgNotFound

__all__ = ["CannotRegisterIconSet", "SvgNotFound"]
