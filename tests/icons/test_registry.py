from unittest import mock

import pytest

from icons.exceptions import CannotRegisterIconSet
from icons.factory import IconFactory
from icons.registry import SVG_RENDERER, IconSet


def test_add_registers_set_and_returns_factory(factory, brand_dir):
    result = factory.add("brand", {"path": str(brand_dir), "prefix": "brand"})

    assert result is factory
    assert factory.all() == {"brand": IconSet(name="brand", path=str(brand_dir), prefix="brand", extra={})}


@pytest.mark.parametrize(
    ("options", "message"),
    [
        ({"prefix": "brand"}, 'does not have a "path" defined'),
        ({"path": "/tmp"}, 'does not have a "prefix" defined'),
    ],
)
def test_add_requires_path_and_prefix(factory, options, message):
    with pytest.raises(CannotRegisterIconSet) as excinfo:
        factory.add("brand", options)

    assert message in str(excinfo.value)
    assert excinfo.value.set == "brand"
    assert factory.all() == {}


def test_path_is_checked_before_prefix(factory):
    with pytest.raises(CannotRegisterIconSet, match='"path"'):
        factory.add("brand", {})


def test_prefix_must_be_unique(factory, brand_dir, solid_dir):
    factory.add("brand", {"path": str(brand_dir), "prefix": "fa"})

    with pytest.raises(CannotRegisterIconSet) as excinfo:
        factory.add("heroicons", {"path": str(solid_dir), "prefix": "fa"})

    assert "heroicons" in str(excinfo.value)
    assert "brand" in str(excinfo.value)
    assert excinfo.value.colliding_set == "brand"
    assert list(factory.all()) == ["brand"]


def test_prefix_uniqueness_is_exact_match(factory, brand_dir, solid_dir):
    factory.add("brand", {"path": str(brand_dir), "prefix": "fa"})
    factory.add("heroicons", {"path": str(solid_dir), "prefix": "FA"})

    assert list(factory.all()) == ["brand", "heroicons"]


def test_path_must_exist(factory, tmp_path):
    missing = tmp_path / "missing"

    with pytest.raises(CannotRegisterIconSet) as excinfo:
        factory.add("brand", {"path": str(missing), "prefix": "brand"})

    assert excinfo.value.path == str(missing)
    assert factory.all() == {}


def test_extra_options_are_kept(factory, brand_dir):
    factory.add("brand", {"path": brand_dir, "prefix": "brand", "class": "w-6", "fallback": "x"})

    icon_set = factory.all()["brand"]
    assert icon_set.path == str(brand_dir)
    assert icon_set.extra == {"class": "w-6", "fallback": "x"}


def test_all_preserves_insertion_order_and_is_read_only(factory, brand_dir, solid_dir):
    factory.add("zeta", {"path": str(solid_dir), "prefix": "z"})
    factory.add("alpha", {"path": str(brand_dir), "prefix": "a"})

    sets = factory.all()
    assert list(sets) == ["zeta", "alpha"]
    with pytest.raises(TypeError):
        sets["other"] = None


def test_get_by_prefix(factory, brand_dir):
    factory.add("brand", {"path": str(brand_dir), "prefix": "b"})

    assert factory.registry.get_by_prefix("b") == "brand"
    assert factory.registry.get_by_prefix("brand") is None


def test_components_registered_for_every_file(factory, registered, solid_dir):
    factory.add("heroicons", {"path": str(solid_dir), "prefix": "hero"})

    assert sorted(registered) == [
        (SVG_RENDERER, "github", "hero"),
        (SVG_RENDERER, "outline.arrows.left", "hero"),
        (SVG_RENDERER, "solid.user", "hero"),
    ]


def test_failed_registration_emits_no_components(factory, registered, tmp_path):
    with pytest.raises(CannotRegisterIconSet):
        factory.add("brand", {"path": str(tmp_path / "nope"), "prefix": "brand"})

    assert registered == []


def test_component_callback_errors_do_not_abort_registration(storage, brand_dir, solid_dir, caplog):
    registered = []

    def record(renderer, name, prefix):
        if name == "solid.user":
            raise RuntimeError("template engine unavailable")
        registered.append(name)

    factory = IconFactory(storage, register_component=record)
    factory.add("brand", {"path": str(brand_dir), "prefix": "brand"})
    factory.svg("brand-github")
    (brand_dir / "github.svg").write_text("<svg>changed</svg>", encoding="utf-8")

    with caplog.at_level("WARNING", logger="icons"):
        factory.add("heroicons", {"path": str(solid_dir), "prefix": "hero"})

    assert list(factory.all()) == ["brand", "heroicons"]
    assert "outline.arrows.left" in registered
    assert caplog.records[-1].component == "solid.user"
    assert factory.svg("brand-github").contents == "<svg>changed</svg>"


def test_listing_errors_leave_registry_untouched(factory, storage, brand_dir, solid_dir):
    factory.add("brand", {"path": str(brand_dir), "prefix": "brand"})
    factory.svg("brand-github")

    with mock.patch.object(storage, "all_files", side_effect=PermissionError("denied")):
        with pytest.raises(PermissionError):
            factory.add("heroicons", {"path": str(solid_dir), "prefix": "hero"})

    assert list(factory.all()) == ["brand"]
    assert factory.svg("brand-github").contents == "<svg>A</svg>"
    assert len(storage.reads) == 1
