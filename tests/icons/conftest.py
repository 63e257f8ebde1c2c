from pathlib import Path

import pytest

from icons.factory import IconFactory
from icons.storage import DjangoStorageBackend


class RecordingStorage(DjangoStorageBackend):
    """Storage that counts reads and can be told to fail on the next one."""

    def __init__(self, storage=None):
        super().__init__(storage)
        self.reads: list[str] = []
        self.fail_with: Exception | None = None

    def read(self, path):
        self.reads.append(path)
        if self.fail_with is not None:
            raise self.fail_with
        return super().read(path)


def _write_svg(root: Path, relative: str, contents: str) -> Path:
    target = root / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(contents, encoding="utf-8")
    return target


@pytest.fixture
def brand_dir(tmp_path):
    root = tmp_path / "brand"
    _write_svg(root, "github.svg", "  <svg>A</svg>\n")
    _write_svg(root, "gitlab.svg", "<svg>GL</svg>")
    return root


@pytest.fixture
def solid_dir(tmp_path):
    root = tmp_path / "heroicons"
    _write_svg(root, "solid/user.svg", "<svg>user</svg>\n")
    _write_svg(root, "outline/arrows/left.svg", "<svg>left</svg>")
    _write_svg(root, "github.svg", "<svg>B</svg>")
    return root


@pytest.fixture
def write_svg():
    return _write_svg


@pytest.fixture
def storage():
    return RecordingStorage()


@pytest.fixture
def registered():
    return []


@pytest.fixture
def factory(storage, registered):
    def record(renderer, name, prefix):
        registered.append((renderer, name, prefix))

    return IconFactory(storage, "icon", register_component=record)
