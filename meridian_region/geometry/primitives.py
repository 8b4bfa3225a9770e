"""
Geometric Primitives Module
===========================

Value types shared by the geometry layer - NO state, NO side effects.

Design:
- Immutable values (frozen dataclass pattern)
- Generic over the coordinate type (int or float)
- Rect "mutators" return new instances (extend is a fold step)
- Thread-safe by design (immutability)
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, Optional, Tuple, Type, TypeVar

C = TypeVar("C", int, float)


@dataclass(frozen=True)
class Point(Generic[C]):
    """
    Immutable 2-D coordinate pair.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Example:
        >>> Point(3, 4) - Point(1, 1)
        Point(x=2, y=3)
    """

    x: C
    y: C

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> Tuple[C, C]:
        return (self.x, self.y)

    @classmethod
    def coerce(cls, value: Any, coord_type: Optional[Type] = None) -> "Point":
        """
        Build a Point from a Point or any 2-item sequence.

        Args:
            value: Point, tuple, list or numpy row holding (x, y)
            coord_type: Convert both coordinates to this type (None = keep)

        Returns:
            Point instance

        Raises:
            TypeError: If value is not a 2-item sequence
            ValueError: If value does not hold exactly 2 coordinates
        """
        if isinstance(value, Point):
            x, y = value.x, value.y
        else:
            try:
                items = tuple(value)
            except TypeError:
                raise TypeError(
                    f"point must be a Point or (x, y) sequence, got {type(value).__name__}"
                )
            if len(items) != 2:
                raise ValueError(f"point must have exactly 2 coordinates, got {len(items)}")
            x, y = items

        if coord_type is not None:
            x, y = coord_type(x), coord_type(y)
        elif isinstance(value, Point):
            return value
        return cls(x, y)


@dataclass(frozen=True)
class Rect(Generic[C]):
    """
    Immutable axis-aligned bounding rectangle.

    An empty rect has min > max on both axes (min=+inf, max=-inf), so it
    contains nothing and the first extend() collapses it onto that point.

    Attributes:
        min_x, min_y: Lower corner
        max_x, max_y: Upper corner

    Invariants:
        - Non-empty rect: min_x <= max_x and min_y <= max_y
    """

    min_x: C = math.inf
    min_y: C = math.inf
    max_x: C = -math.inf
    max_y: C = -math.inf

    @classmethod
    def empty(cls) -> "Rect":
        """Rect enclosing no points."""
        return cls()

    @classmethod
    def from_points(cls, points: Iterable[Any]) -> "Rect":
        """Fold extend() over points, starting from empty."""
        rect = cls.empty()
        for pt in points:
            rect = rect.extend(pt)
        return rect

    def extend(self, point: Any) -> "Rect":
        """
        Return the smallest rect enclosing this rect and point.

        Commutative and order-independent when folded over a point set.
        """
        pt = Point.coerce(point)
        return Rect(
            min_x=min(self.min_x, pt.x),
            min_y=min(self.min_y, pt.y),
            max_x=max(self.max_x, pt.x),
            max_y=max(self.max_y, pt.y),
        )

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    def contains_point(self, point: Any) -> bool:
        """Inclusive on all four sides. Empty rect contains nothing."""
        pt = Point.coerce(point)
        return self.min_x <= pt.x <= self.max_x and self.min_y <= pt.y <= self.max_y

    def intersects(self, other: "Rect") -> bool:
        """True if the rects share at least one point (touching counts)."""
        if self.is_empty or other.is_empty:
            return False
        return not (
            other.min_x > self.max_x
            or other.max_x < self.min_x
            or other.min_y > self.max_y
            or other.max_y < self.min_y
        )

    @property
    def width(self) -> C:
        return 0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> C:
        return 0 if self.is_empty else self.max_y - self.min_y

    @property
    def center(self) -> Point:
        """Center point (float). Undefined for an empty rect."""
        if self.is_empty:
            raise ValueError("empty Rect has no center")
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict (None bounds when empty)."""
        if self.is_empty:
            return {"min_x": None, "min_y": None, "max_x": None, "max_y": None}
        return {
            "min_x": self.min_x,
            "min_y": self.min_y,
            "max_x": self.max_x,
            "max_y": self.max_y,
        }

    def __str__(self) -> str:
        if self.is_empty:
            return "Rect(empty)"
        return f"[{self.min_x}, {self.min_y}] - [{self.max_x}, {self.max_y}]"
