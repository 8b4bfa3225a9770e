"""
Region Module
=============

Single-ring polygon with a cached bounding rect and an exact
point-in-polygon predicate.

Design:
- Ordered vertex list, last -> first edge implicit (never stored)
- Bounding rect rebuilt on assign(), extended on add_point()
- Dual ray-crossing containment: boundary points count as inside
- No locking, no I/O: single writer, any number of readers
"""

from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, Iterator, List, Tuple, Type

import numpy as np

from meridian_region.geometry.orientation import AREA_TOLERANCE, boundary_orientation
from meridian_region.geometry.primitives import C, Point, Rect


class Containment(str, Enum):
    """Where a query point lies relative to a region."""

    OUTSIDE = "outside"
    INSIDE = "inside"
    BOUNDARY = "boundary"


class Region(Generic[C]):
    """
    Polygonal region over int or float coordinates.

    Design:
    - Vertices kept in insertion order, never reordered or deduplicated
    - Bounding rect always equals the exact box of the current vertices
    - Fewer than 3 vertices: invalid, contains() is always False

    Attributes:
        coord_type: Coordinate type every stored vertex is converted to

    Usage:
        region = Region([(0, 0), (4, 0), (0, 4)], coord_type=int)
        region.contains((1, 1))   # True (inside)
        region.contains((2, 0))   # True (on edge)
        region.contains((5, 5))   # False (rejected by bounding rect)

        region.add_point((-1, 2))
        rect = region.bounding_box()
    """

    def __init__(self, points: Iterable[Any] = (), coord_type: Type[C] = float):
        """
        Initialize region from a point iterable.

        Args:
            points: Points or (x, y) pairs in boundary order
            coord_type: int or float
        """
        if coord_type not in (int, float):
            raise TypeError(f"coord_type must be int or float, got {coord_type!r}")
        self.coord_type = coord_type
        self._points: List[Point] = []
        self._rect: Rect = Rect.empty()
        self.assign(points)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def assign(self, points: Iterable[Any]) -> None:
        """Replace all vertices and rebuild the bounding rect from empty."""
        self._points = [Point.coerce(pt, self.coord_type) for pt in points]
        self._rect = Rect.from_points(self._points)

    def add_point(self, point: Any) -> None:
        """Append one vertex and extend the bounding rect."""
        pt = Point.coerce(point, self.coord_type)
        self._points.append(pt)
        self._rect = self._rect.extend(pt)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def for_each_point(self, visitor: Callable[[Point], Any]) -> None:
        """Call visitor once per vertex, in boundary order."""
        for pt in self._points:
            visitor(pt)

    def bounding_box(self) -> Rect:
        return self._rect

    def is_valid(self) -> bool:
        return len(self._points) > 2

    @property
    def points(self) -> Tuple[Point, ...]:
        """Snapshot of the vertices."""
        return tuple(self._points)

    def contains(self, point: Any) -> bool:
        """
        Check if point is inside region or on its boundary.

        Args:
            point: Point or (x, y) pair

        Returns:
            True if inside or on boundary, False otherwise
        """
        return self.classify(point) is not Containment.OUTSIDE

    def classify(self, point: Any) -> Containment:
        """
        Classify point as inside, on boundary, or outside.

        Two rays are cast from the point, one to the right and one to the
        left. A point on an edge is crossed by exactly one of them, so the
        crossing parities differ; otherwise an odd right count means inside.

        Returns:
            Containment.BOUNDARY for vertex hits and on-edge points
        """
        pt = Point.coerce(point)

        if not self.is_valid() or not self._rect.contains_point(pt):
            return Containment.OUTSIDE

        # Exact vertex hit, component-wise equality
        for vertex in self._points:
            if vertex == pt:
                return Containment.BOUNDARY

        r_cross, l_cross = self.ray_crossings(pt)

        if (r_cross % 2) != (l_cross % 2):
            return Containment.BOUNDARY

        if (r_cross % 2) == 1:
            return Containment.INSIDE
        else:
            return Containment.OUTSIDE

    def ray_crossings(self, point: Any) -> Tuple[int, int]:
        """
        Count raw (right, left) ray crossings for point.

        Runs the edge scan of classify() without the validity, bounding rect
        and vertex-hit shortcuts.
        """
        pt = Point.coerce(point)
        qx, qy = float(pt.x), float(pt.y)
        r_cross = 0
        l_cross = 0

        # For each edge (i - 1, i), with the query point moved to the origin.
        # i = 0 pairs with the last vertex (closing edge).
        for i in range(len(self._points)):
            vertex, prev_vertex = self._points[i], self._points[i - 1]
            curr_x, curr_y = float(vertex.x) - qx, float(vertex.y) - qy
            prev_x, prev_y = float(prev_vertex.x) - qx, float(prev_vertex.y) - qy

            # Edge straddles the x axis: prev_y != curr_y, division is safe
            if (curr_y > 0) != (prev_y > 0):
                x = (curr_x * prev_y - prev_x * curr_y) / (prev_y - curr_y)
                if x > 0:
                    r_cross += 1

            # Edge straddles the x axis when reversed
            if (curr_y < 0) != (prev_y < 0):
                x = (curr_x * prev_y - prev_x * curr_y) / (prev_y - curr_y)
                if x < 0:
                    l_cross += 1

        return r_cross, l_cross

    def orientation(self, tolerance: float = AREA_TOLERANCE) -> int:
        """Winding direction: 1 counter-clockwise, -1 clockwise, 0 degenerate."""
        return boundary_orientation(self._points, tolerance)

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_numpy(self) -> np.ndarray:
        """Vertices as an Nx2 array (int64 or float64 by coord_type)."""
        dtype = np.int64 if self.coord_type is int else np.float64
        return np.array([pt.as_tuple() for pt in self._points], dtype=dtype).reshape(-1, 2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            "coord_type": self.coord_type.__name__,
            "coordinates": [list(pt.as_tuple()) for pt in self._points],
            "bounding_box": self._rect.to_dict(),
        }

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __contains__(self, point: Any) -> bool:
        return self.contains(point)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Region):
            return NotImplemented
        return self.coord_type is other.coord_type and self._points == other._points

    def __repr__(self) -> str:
        return (
            f"Region(points={len(self._points)}, coord_type={self.coord_type.__name__}, "
            f"valid={self.is_valid()})"
        )


# Annotation aliases: Region[int] for pixel grids, Region[float] for map coordinates
RegionI = Region[int]
RegionD = Region[float]
