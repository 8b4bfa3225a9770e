"""
Meridian Region v1.0
====================

Bounded Context: Polygon regions for map hit-testing.

Design Philosophy:
- Separation of Concerns: Geometry, Registry, Config, Logging separated
- Geometry is pure: no logging, no I/O, no locks
- Boundary points are inside: vertex and on-edge hits are contained
- Degenerate input answers False instead of raising

Architecture:

    meridian_region/
    ├── geometry/          # Pure geometry
    │   ├── primitives.py  # Point, Rect
    │   ├── orientation.py # area_sign, boundary_orientation
    │   ├── region.py      # Region, Containment
    │   └── detector.py    # RegionDetector (detections hit-testing)
    │
    ├── registry.py        # RegionRegistry (named regions, point lookup)
    ├── config.py          # CatalogConfig, RegionConfig (YAML)
    └── logging/           # Structured JSON logging

Usage:

    # 1. Build a region (incrementally or from a point list)
    from meridian_region import Region

    region = Region([(0, 0), (10, 0), (10, 10), (0, 10)], coord_type=int)
    region.contains((5, 5))     # True
    region.contains((10, 5))    # True (on edge)
    region.bounding_box()       # Rect(min_x=0, min_y=0, max_x=10, max_y=10)

    # 2. Many named regions
    from meridian_region import CatalogConfig, RegionRegistry

    catalog = CatalogConfig.from_yaml("regions.yaml")
    registry = RegionRegistry.from_config(catalog)
    registry.locate((5, 5))     # ['downtown', ...]

    # 3. Hit-test detections
    from meridian_region import RegionDetector

    mask = RegionDetector.detect(region, detections)
"""

# Geometry Layer (pure)
from meridian_region.geometry.primitives import Point, Rect
from meridian_region.geometry.orientation import AREA_TOLERANCE, area_sign, boundary_orientation
from meridian_region.geometry.region import Containment, Region, RegionD, RegionI
from meridian_region.geometry.detector import RegionDetector

# Configuration
from meridian_region.config import CatalogConfig, RegionConfig

# Registry
from meridian_region.registry import RegionNotFoundError, RegionRegistry

__all__ = [
    # Geometry
    "Point",
    "Rect",
    "AREA_TOLERANCE",
    "area_sign",
    "boundary_orientation",
    "Containment",
    "Region",
    "RegionI",
    "RegionD",
    "RegionDetector",
    # Configuration
    "CatalogConfig",
    "RegionConfig",
    # Registry
    "RegionRegistry",
    "RegionNotFoundError",
]

__version__ = "1.0.0"
