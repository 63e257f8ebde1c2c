"""Read-only access to icon files through a Django storage backend."""

from __future__ import annotations

import os
import posixpath
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol

from django.core.files.storage import FileSystemStorage, Storage


@dataclass(frozen=True, slots=True)
class StoredFile:
    relative_dir: str
    stem: str

    @property
    def dotted_name(self) -> str:
        segments = [segment for segment in self.relative_dir.split("/") if segment]
        return ".".join([*segments, self.stem])


class IconStorage(Protocol):
    def exists(self, path: str) -> bool: ...

    def all_files(self, path: str) -> Iterator[StoredFile]: ...

    def read(self, path: str) -> str: ...


class DjangoStorageBackend:
    """Adapt a :class:`~django.core.files.storage.Storage` to the icon lookups.

    Without an explicit storage, paths are local: relative ones resolve
    against the working directory. ``read`` raises ``FileNotFoundError`` for
    missing files. Other storage errors propagate unchanged.
    """

    def __init__(self, storage: Storage | None = None) -> None:
        self.local = storage is None
        self.storage = storage if storage is not None else FileSystemStorage(location="/")

    def _name(self, path: str) -> str:
        path = str(path)
        return os.path.abspath(path) if self.local else path

    def exists(self, path: str) -> bool:
        return self.storage.exists(self._name(path))

    def all_files(self, path: str) -> Iterator[StoredFile]:
        yield from self._walk(self._name(path), "")

    def _walk(self, root: str, relative_dir: str) -> Iterator[StoredFile]:
        directories, files = self.storage.listdir(posixpath.join(root, relative_dir) if relative_dir else root)
        for filename in sorted(files):
            stem, _ext = posixpath.splitext(filename)
            yield StoredFile(relative_dir=relative_dir, stem=stem)
        for directory in sorted(directories):
            yield from self._walk(root, posixpath.join(relative_dir, directory) if relative_dir else directory)

    def read(self, path: str) -> str:
        with self.storage.open(self._name(path), "rb") as handle:
            return handle.read().decode("utf-8")
