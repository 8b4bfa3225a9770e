"""
Geometry Layer
==============

Bounded Context: Planar shapes and point containment.

Responsibilities:
- Point and bounding rect values
- Turn (orientation) classification
- Polygon regions with exact point-in-polygon tests
- Hit-testing of detections against a region
- NO logging, NO I/O, NO locking

Design Philosophy:
- Pure functions where possible
- Immutable values; Region is the only mutable aggregate
- Total operations: degenerate input answers False, never raises
"""

from meridian_region.geometry.primitives import Point, Rect
from meridian_region.geometry.orientation import AREA_TOLERANCE, area_sign, boundary_orientation
from meridian_region.geometry.region import Containment, Region, RegionD, RegionI
from meridian_region.geometry.detector import RegionDetector

__all__ = [
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
]
