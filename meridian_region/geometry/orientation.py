"""
Orientation Test Module
=======================

Signed-area turn classifier for three points.

Design:
- Pure function (no state)
- Float arithmetic regardless of coordinate type
- Fixed tolerance band treated as collinear
- boundary_orientation() builds ring winding on top of area_sign()
"""

from typing import Any, Iterable

from meridian_region.geometry.primitives import Point

# Areas within +/- this band are collinear. Tuned for pixel-like coordinate
# magnitudes; pass a smaller tolerance for degree-scale data.
AREA_TOLERANCE = 0.5


def area_sign(start: Any, end: Any, pt: Any, tolerance: float = AREA_TOLERANCE) -> int:
    """
    Classify the turn start -> end -> pt.

    Uses cross product: (end - start) x (pt - start)

    Args:
        start: First point of the directed line
        end: Second point of the directed line
        pt: Point to classify
        tolerance: Half-width of the collinear band (area units)

    Returns:
        1: left turn, pt is counter-clockwise of start -> end
        -1: right turn, pt is clockwise of start -> end
        0: collinear within tolerance
    """
    a = Point.coerce(start)
    b = Point.coerce(end)
    p = Point.coerce(pt)

    area = (float(b.x) - float(a.x)) * (float(p.y) - float(a.y)) - (
        float(p.x) - float(a.x)
    ) * (float(b.y) - float(a.y))

    if area > tolerance:
        return 1
    elif area < -tolerance:
        return -1
    else:
        return 0


def boundary_orientation(points: Iterable[Any], tolerance: float = AREA_TOLERANCE) -> int:
    """
    Winding direction of a closed boundary.

    The lowest (then leftmost) vertex is always convex, so the turn taken
    there gives the direction of the whole ring. Neighbours equal to that
    vertex are skipped.

    Args:
        points: Vertices in boundary order (last -> first edge implicit)
        tolerance: Collinear band passed to area_sign()

    Returns:
        1: counter-clockwise
        -1: clockwise
        0: degenerate (fewer than 3 distinct vertices, or flat at the pivot)
    """
    pts = [Point.coerce(pt) for pt in points]
    if len(pts) < 3:
        return 0

    pivot = min(range(len(pts)), key=lambda i: (pts[i].y, pts[i].x))
    n = len(pts)

    prev_idx = (pivot - 1) % n
    while pts[prev_idx] == pts[pivot] and prev_idx != pivot:
        prev_idx = (prev_idx - 1) % n

    next_idx = (pivot + 1) % n
    while pts[next_idx] == pts[pivot] and next_idx != pivot:
        next_idx = (next_idx + 1) % n

    if prev_idx == pivot or next_idx == pivot:
        return 0

    return area_sign(pts[prev_idx], pts[pivot], pts[next_idx], tolerance)
