"""
RegionRegistry - Named regions with point lookup

Bounded Context: Region registration and hit-testing
Responsibilities:
  - Register regions under unique ids
  - Locate which regions contain a point
  - Viewport queries over bounding rects
  - Provide introspection (available_regions, count)

Lookup is a linear scan; each Region rejects by its own bounding rect. There is no
spatial index; catalogs are expected to hold tens of regions, not millions.

Threading: Thread-safe (lock for write operations, reads use snapshots)
Pattern: Registry with explicit registration
"""

from typing import Any, Dict, List, Optional, Set
import threading

from meridian_region.config import CatalogConfig
from meridian_region.geometry.primitives import Point, Rect
from meridian_region.geometry.region import Region
from meridian_region.logging import LogEvent, StructuredLogger, create_logger


class RegionNotFoundError(Exception):
    """Raised when looking up an unregistered region id"""
    pass


class RegionRegistry:
    """
    Registry of named regions.

    Key Features:
      - Fail-fast: duplicate ids rejected immediately
      - Registration order preserved in lookups
      - Degenerate regions (< 3 vertices) accepted with a warning

    Thread Safety:
      - Uses lock for write operations (register, unregister)
      - Read operations copy the dict first, then scan without the lock.
        Registered regions must not be mutated while readers are active.

    Example:
        registry = RegionRegistry()
        registry.register('downtown', Region([(0, 0), (10, 0), (10, 10), (0, 10)]))

        registry.locate((5, 5))        # ['downtown']

        try:
            registry.get('harbour')
        except RegionNotFoundError as e:
            print(f"Region not available: {e}")
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._regions: Dict[str, Region] = {}
        self._lock = threading.Lock()
        self.logger = logger or create_logger("registry")

    @classmethod
    def from_config(
        cls,
        catalog: CatalogConfig,
        logger: Optional[StructuredLogger] = None
    ) -> "RegionRegistry":
        """Register every enabled region of a catalog."""
        registry = cls(logger=logger)
        for region_config in catalog.enabled_regions():
            registry.register(region_config.region_id, region_config.to_region())
        return registry

    def register(self, region_id: str, region: Region) -> None:
        """
        Register a region under an id.

        Raises:
            ValueError: If region_id already registered (double registration)

        Thread Safety: Uses lock for write operation
        """
        with self._lock:
            if region_id in self._regions:
                raise ValueError(f"Region '{region_id}' already registered")
            self._regions[region_id] = region

        metadata = {
            'region_id': region_id,
            'vertices': len(region),
            'bounding_box': region.bounding_box().to_dict(),
        }
        self.logger.info(
            event=LogEvent.REGION_REGISTERED,
            message=f"Registered region '{region_id}'",
            metadata=metadata
        )
        if not region.is_valid():
            self.logger.warning(
                event=LogEvent.REGION_DEGENERATE,
                message=f"Region '{region_id}' has fewer than 3 vertices and contains no points",
                metadata={'region_id': region_id, 'vertices': len(region)}
            )

    def unregister(self, region_id: str) -> Region:
        """
        Remove a region and return it.

        Raises:
            RegionNotFoundError: If region_id not registered
        """
        with self._lock:
            region = self._regions.pop(region_id, None)

        if region is None:
            raise self._not_found(region_id)

        self.logger.info(
            event=LogEvent.REGION_UNREGISTERED,
            message=f"Unregistered region '{region_id}'",
            metadata={'region_id': region_id}
        )
        return region

    def get(self, region_id: str) -> Region:
        """
        Get a registered region.

        Raises:
            RegionNotFoundError: If region_id not registered

        Thread Safety: Read-only operation (no lock needed)
        """
        region = self._regions.get(region_id)
        if region is None:
            raise self._not_found(region_id)
        return region

    def locate(self, point: Any) -> List[str]:
        """
        Ids of all regions containing point (boundary counts), in
        registration order.
        """
        pt = Point.coerce(point)
        hits = [
            region_id
            for region_id, region in dict(self._regions).items()
            if region.contains(pt)
        ]

        self.logger.debug(
            event=LogEvent.REGION_LOCATED,
            message=f"Point matched {len(hits)} region(s)",
            metadata={'point': [pt.x, pt.y], 'region_ids': hits}
        )
        return hits

    def query_rect(self, rect: Rect) -> List[str]:
        """Ids of regions whose bounding rect intersects rect (viewport query)."""
        return [
            region_id
            for region_id, region in dict(self._regions).items()
            if region.bounding_box().intersects(rect)
        ]

    def is_registered(self, region_id: str) -> bool:
        return region_id in self._regions

    @property
    def available_regions(self) -> Set[str]:
        """
        Get set of all registered region ids.

        Returns: Immutable set (snapshot)
        """
        return set(self._regions.keys())

    def items(self) -> List[tuple]:
        """(region_id, region) pairs in registration order (snapshot)."""
        return list(self._regions.items())

    def count(self) -> int:
        return len(self._regions)

    def __len__(self) -> int:
        return len(self._regions)

    def __repr__(self) -> str:
        return f"RegionRegistry(regions={len(self._regions)})"

    def _not_found(self, region_id: str) -> RegionNotFoundError:
        self.logger.warning(
            event=LogEvent.REGION_NOT_FOUND,
            message=f"Region '{region_id}' not registered",
            metadata={'region_id': region_id}
        )
        return RegionNotFoundError(
            f"Region '{region_id}' not registered. "
            f"Available regions: {', '.join(sorted(self.available_regions))}"
        )
