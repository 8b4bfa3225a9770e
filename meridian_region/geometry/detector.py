"""
Region Detector Module
======================

Stateless hit-testing - applies region geometry to detections.

Design:
- Pure functions (no state)
- Boundary points count as inside (Region.contains semantics)
- Returns boolean masks aligned with the input order
- Thread-safe (no mutations)
"""

import numpy as np
import supervision as sv

from meridian_region.geometry.region import Region


class RegionDetector:
    """
    Stateless detector for applying a Region to points and detections.

    Design Philosophy:
    - All methods are static (no instance state)
    - Bounding rect rejects most points before the full boundary scan
    """

    @staticmethod
    def contains_points(region: Region, points: np.ndarray) -> np.ndarray:
        """
        Test an array of points against a region.

        Args:
            region: Region geometry
            points: Nx2 array of (x, y) points

        Returns:
            Boolean mask of shape (N,) where True = inside or on boundary

        Raises:
            ValueError: If points is not an Nx2 array
        """
        points = np.asarray(points)
        if points.size == 0:
            return np.array([], dtype=bool)
        if points.ndim != 2 or points.shape[1] != 2:
            raise ValueError(f"points must be Nx2 array, got shape {points.shape}")

        if not region.is_valid():
            return np.zeros(len(points), dtype=bool)

        rect = region.bounding_box()
        xs, ys = points[:, 0], points[:, 1]
        candidates = (
            (xs >= rect.min_x) & (xs <= rect.max_x)
            & (ys >= rect.min_y) & (ys <= rect.max_y)
        )

        mask = np.zeros(len(points), dtype=bool)
        for idx in np.flatnonzero(candidates):
            mask[idx] = region.contains((points[idx, 0].item(), points[idx, 1].item()))

        return mask

    @staticmethod
    def detect(
        region: Region,
        detections: sv.Detections,
        anchor: sv.Position = sv.Position.BOTTOM_CENTER
    ) -> np.ndarray:
        """
        Detect which detections are inside a region.

        Args:
            region: Region geometry
            detections: Detections with bounding boxes
            anchor: Which point of bbox to test (default: BOTTOM_CENTER)

        Returns:
            Boolean mask of shape (N,) where True = inside region
        """
        if len(detections) == 0:
            return np.array([], dtype=bool)

        anchors = detections.get_anchors_coordinates(anchor=anchor)

        return RegionDetector.contains_points(region, anchors)
