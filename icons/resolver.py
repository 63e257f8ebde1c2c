"""Resolution of icon references to SVG contents, with memoization."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .exceptions import SvgNotFound
from .metrics import ICON_READ_LATENCY, icons_cache_hits_total, icons_cache_misses_total, icons_not_found_total
from .registry import SetRegistry
from .storage import IconStorage

logger = logging.getLogger(__name__)

DEFAULT_SET = "default"


@dataclass(frozen=True, slots=True)
class Resolution:
    set: str
    name: str
    contents: str


def split_reference(reference: str) -> tuple[str, str]:
    """Split ``reference`` on the first ``-`` into ``(prefix, leaf)``.

    When nothing follows the ``-`` (or there is none) the whole reference is
    the leaf and the prefix is empty.
    """
    prefix, _sep, leaf = reference.partition("-")
    if not leaf:
        return "", reference
    return prefix, leaf


def svg_path(path: str, name: str) -> str:
    return "%s/%s.svg" % (path.rstrip(), name.replace(".", "/"))


class ContentResolver:
    """Map references to file contents through the set registry.

    The cache is keyed by leaf name only, so two sets holding the same leaf
    share one entry. ``strict=True`` keys it by ``(set, leaf)`` instead.
    """

    def __init__(self, registry: SetRegistry, storage: IconStorage, *, strict: bool = False) -> None:
        self.registry = registry
        self.storage = storage
        self.strict = strict
        self._cache: dict[object, str] = {}

    def clear(self) -> None:
        self._cache = {}

    def split(self, reference: str) -> tuple[str, str]:
        prefix, leaf = split_reference(reference)
        set_name = self.registry.get_by_prefix(prefix)
        return (DEFAULT_SET if set_name is None else set_name), leaf

    def resolve(self, reference: str) -> Resolution:
        set_name, name = self.split(reference)
        return Resolution(set=set_name, name=name, contents=self.contents(set_name, name))

    def contents(self, set_name: str, name: str) -> str:
        key = (set_name, name) if self.strict else name
        if key in self._cache:
            icons_cache_hits_total.inc()
            return self._cache[key]

        icon_set = self.registry.get(set_name)
        if icon_set is not None:
            icons_cache_misses_total.inc()
            try:
                with ICON_READ_LATENCY.time():
                    contents = self.storage.read(svg_path(icon_set.path, name)).strip()
            except FileNotFoundError as exc:
                raise self._not_found(set_name, name) from exc
            logger.debug("SVG lido do armazenamento", extra={"set": set_name, "icon": name})
            self._cache[key] = contents
            return contents

        raise self._not_found(set_name, name)

    def _not_found(self, set_name: str, name: str) -> SvgNotFound:
        icons_not_found_total.inc()
        logger.warning("SVG não encontrado", extra={"set": set_name, "icon": name})
        return SvgNotFound.missing(set_name, name)
