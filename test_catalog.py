"""
Region Catalog Tests
====================

YAML catalog loading, validation and the region registry built from it.

Usage:
    pytest test_catalog.py
"""

import logging

import pytest

from meridian_region import (
    CatalogConfig,
    Rect,
    Region,
    RegionConfig,
    RegionNotFoundError,
    RegionRegistry,
)
from meridian_region.logging import create_logger

CATALOG_YAML = """
orientation_tolerance: 0.25

regions:
  - region_id: "downtown"
    coord_type: "int"
    coordinates: [[0, 0], [10, 0], [10, 10], [0, 10]]

  - region_id: "harbour"
    coordinates: [[8, 8], [20, 8], [20, 20], [8, 20]]

  - region_id: "closed_pier"
    coordinates: [[30, 30], [40, 30], [40, 40]]
    enabled: false
"""


@pytest.fixture
def catalog_path(tmp_path):
    path = tmp_path / "regions.yaml"
    path.write_text(CATALOG_YAML)
    return path


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

def test_catalog_from_yaml(catalog_path):
    catalog = CatalogConfig.from_yaml(catalog_path)

    assert catalog.orientation_tolerance == 0.25
    assert [r.region_id for r in catalog.regions] == ["downtown", "harbour", "closed_pier"]
    assert [r.region_id for r in catalog.enabled_regions()] == ["downtown", "harbour"]

    downtown = catalog.regions[0]
    assert downtown.coord_type == "int"
    assert downtown.coordinates[1] == (10, 0)

    region = downtown.to_region()
    assert region.coord_type is int
    assert region.bounding_box() == Rect(0, 0, 10, 10)


def test_catalog_defaults():
    catalog = CatalogConfig.from_dict({})

    assert catalog.regions == []
    assert catalog.orientation_tolerance == 0.5
    assert CatalogConfig.from_dict(None).regions == []


def test_catalog_loaded_is_logged(catalog_path, caplog):
    with caplog.at_level("INFO", logger="meridian_region.catalog"):
        CatalogConfig.from_yaml(catalog_path)

    assert any("catalog.loaded" in record.getMessage() for record in caplog.records)


def test_catalog_missing_file(tmp_path, caplog):
    with caplog.at_level("ERROR"), pytest.raises(FileNotFoundError):
        CatalogConfig.from_yaml(tmp_path / "missing.yaml")

    errors = [r.getMessage() for r in caplog.records if r.levelname == "ERROR"]
    assert any("error.catalog_load" in msg and "missing.yaml" in msg for msg in errors)


def test_catalog_invalid_yaml(tmp_path, caplog):
    path = tmp_path / "broken.yaml"
    path.write_text("regions: [unclosed")

    with caplog.at_level("ERROR"), pytest.raises(ValueError, match="Invalid YAML"):
        CatalogConfig.from_yaml(path)

    errors = [r.getMessage() for r in caplog.records if r.levelname == "ERROR"]
    assert any("error.catalog_load" in msg and "broken.yaml" in msg for msg in errors)


def test_catalog_missing_field():
    with pytest.raises(ValueError, match="Missing required region field"):
        CatalogConfig.from_dict({"regions": [{"region_id": "a"}]})


def test_catalog_duplicate_ids():
    square = [(0, 0), (1, 0), (1, 1)]
    with pytest.raises(ValueError, match="Duplicate region_id"):
        CatalogConfig(regions=[RegionConfig("a", square), RegionConfig("a", square)])


def test_catalog_negative_tolerance():
    with pytest.raises(ValueError):
        CatalogConfig(orientation_tolerance=-1.0)


@pytest.mark.parametrize("kwargs", [
    {"region_id": "", "coordinates": [(0, 0), (1, 0), (1, 1)]},
    {"region_id": "a", "coordinates": [(0, 0), (1, 0)]},
    {"region_id": "a", "coordinates": [(0, 0), (1, 0), (1, 1, 1)]},
    {"region_id": "a", "coordinates": [(0, 0), (1, 0), (1, 1)], "coord_type": "double"},
    {"region_id": "a", "coordinates": [(0, 0), (0.6, 0), (0, 0.6)], "coord_type": "int"},
])
def test_region_config_validation(kwargs):
    with pytest.raises(ValueError):
        RegionConfig(**kwargs)


def test_int_region_accepts_integral_floats():
    config = RegionConfig("a", [(0.0, 0.0), (4.0, 0), (0, 4.0)], coord_type="int")

    vertex = config.to_region().points[1]
    assert vertex.as_tuple() == (4, 0)
    assert isinstance(vertex.x, int)


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

def test_registry_from_config(catalog_path):
    registry = RegionRegistry.from_config(CatalogConfig.from_yaml(catalog_path))

    assert registry.available_regions == {"downtown", "harbour"}
    assert len(registry) == 2
    assert registry.count() == 2
    assert not registry.is_registered("closed_pier")


def test_registry_locate(catalog_path):
    registry = RegionRegistry.from_config(CatalogConfig.from_yaml(catalog_path))

    assert registry.locate((5, 5)) == ["downtown"]
    assert registry.locate((9, 9)) == ["downtown", "harbour"]
    assert registry.locate((10, 10)) == ["downtown", "harbour"]  # shared corner
    assert registry.locate((15, 15)) == ["harbour"]
    assert registry.locate((35, 31)) == []


def test_registry_query_rect(catalog_path):
    registry = RegionRegistry.from_config(CatalogConfig.from_yaml(catalog_path))

    assert registry.query_rect(Rect(-5, -5, 1, 1)) == ["downtown"]
    assert registry.query_rect(Rect(9, 9, 12, 12)) == ["downtown", "harbour"]
    assert registry.query_rect(Rect(50, 50, 60, 60)) == []


def test_registry_register_and_unregister():
    registry = RegionRegistry()
    region = Region([(0, 0), (4, 0), (0, 4)])

    registry.register("triangle", region)
    assert registry.get("triangle") is region

    with pytest.raises(ValueError, match="already registered"):
        registry.register("triangle", region)

    assert registry.unregister("triangle") is region
    assert len(registry) == 0

    with pytest.raises(RegionNotFoundError):
        registry.unregister("triangle")


def test_registry_unknown_region():
    registry = RegionRegistry()
    registry.register("a", Region([(0, 0), (1, 0), (0, 1)]))

    with pytest.raises(RegionNotFoundError, match="Available regions: a"):
        registry.get("b")


def test_registry_accepts_degenerate_region(caplog):
    registry = RegionRegistry()

    with caplog.at_level("WARNING"):
        registry.register("stub", Region([(0, 0), (1, 1)]))

    assert registry.is_registered("stub")
    assert registry.locate((0, 0)) == []
    assert any("region.degenerate" in record.getMessage() for record in caplog.records)


def test_registry_locate_skips_point_in_rect_but_outside_polygon():
    registry = RegionRegistry()
    registry.register("triangle", Region([(0, 0), (10, 0), (0, 10)]))

    assert registry.locate((9, 9)) == []
    assert registry.locate((5, 5)) == ["triangle"]  # on hypotenuse


def test_default_registry_keeps_configured_log_level():
    registry_logger = logging.getLogger("meridian_region.registry")
    previous = registry_logger.level
    try:
        create_logger("registry", level=logging.DEBUG)
        RegionRegistry()

        assert registry_logger.isEnabledFor(logging.DEBUG)
    finally:
        registry_logger.setLevel(previous)
