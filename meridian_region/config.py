"""
Configuration schema for region catalogs.

This module defines the YAML catalog structure: named polygon regions with
their coordinate type, plus the orientation tolerance shared by turn tests.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
import yaml

from meridian_region.geometry.orientation import AREA_TOLERANCE
from meridian_region.geometry.region import Region
from meridian_region.logging import LogEvent, StructuredLogger, create_logger

COORD_TYPES = {"int": int, "float": float}


@dataclass(frozen=True)
class RegionConfig:
    """Named polygon region."""

    region_id: str
    coordinates: List[Tuple[float, float]]
    coord_type: str = "float"  # "int" or "float"
    enabled: bool = True

    def __post_init__(self):
        """Validate region configuration."""
        if not self.region_id:
            raise ValueError("region_id cannot be empty")

        if self.coord_type not in COORD_TYPES:
            raise ValueError(
                f"Invalid coord_type for region '{self.region_id}': {self.coord_type}. "
                f"Must be one of {sorted(COORD_TYPES)}"
            )

        for coord in self.coordinates:
            if len(coord) != 2:
                raise ValueError(
                    f"Region '{self.region_id}' coordinates must be [x, y] pairs, "
                    f"got {list(coord)}"
                )
            # int() would truncate silently
            if self.coord_type == "int" and not all(float(v).is_integer() for v in coord):
                raise ValueError(
                    f"Region '{self.region_id}' has coord_type 'int' but non-integral "
                    f"coordinate {list(coord)}"
                )

        if len(self.coordinates) < 3:
            raise ValueError(
                f"Region '{self.region_id}' must have at least 3 points, "
                f"got {len(self.coordinates)}"
            )

    def to_region(self) -> Region:
        """Build the Region described by this entry."""
        return Region(self.coordinates, coord_type=COORD_TYPES[self.coord_type])


@dataclass(frozen=True)
class CatalogConfig:
    """
    Region catalog loaded from YAML.

    Immutable after construction (frozen dataclass).
    """

    regions: List[RegionConfig] = field(default_factory=list)
    orientation_tolerance: float = AREA_TOLERANCE

    def __post_init__(self):
        """Validate catalog configuration."""
        if self.orientation_tolerance < 0:
            raise ValueError(
                f"orientation_tolerance must be >= 0, got {self.orientation_tolerance}"
            )

        seen = set()
        for region in self.regions:
            if region.region_id in seen:
                raise ValueError(f"Duplicate region_id: '{region.region_id}'")
            seen.add(region.region_id)

    def enabled_regions(self) -> List[RegionConfig]:
        return [region for region in self.regions if region.enabled]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogConfig":
        """
        Build catalog from parsed YAML data.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Catalog must be a mapping, got {type(data).__name__}")

        try:
            regions = [
                RegionConfig(
                    region_id=str(r["region_id"]),
                    coordinates=[tuple(coord) for coord in r["coordinates"]],
                    coord_type=r.get("coord_type", "float"),
                    enabled=r.get("enabled", True),
                )
                for r in data.get("regions") or []
            ]
        except KeyError as e:
            raise ValueError(f"Missing required region field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid region data: {e}")

        return cls(
            regions=regions,
            orientation_tolerance=float(data.get("orientation_tolerance", AREA_TOLERANCE)),
        )

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Union[str, Path],
        logger: Optional[StructuredLogger] = None
    ) -> "CatalogConfig":
        """
        Load catalog from YAML file.

        Example YAML:
            orientation_tolerance: 0.5

            regions:
              - region_id: "downtown"
                coord_type: "float"
                coordinates: [[0, 0], [10, 0], [10, 10], [0, 10]]
                enabled: true

        Args:
            yaml_path: Path to catalog file
            logger: Structured logger (default: "catalog" component)

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If YAML is invalid or fails validation
        """
        logger = logger or create_logger("catalog")
        path = Path(yaml_path)

        try:
            if not path.exists():
                raise FileNotFoundError(f"Catalog file not found: {path}")

            try:
                with open(path) as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}")

            catalog = cls.from_dict(data)
        except (OSError, ValueError) as e:
            logger.error(
                event=LogEvent.CATALOG_LOAD_ERROR,
                message=f"Could not load catalog {path}",
                metadata={'catalog': str(path)},
                exc_info=e
            )
            raise

        logger.info(
            event=LogEvent.CATALOG_LOADED,
            message=f"Loaded {len(catalog.regions)} region(s)",
            metadata={
                'catalog': str(path),
                'enabled': len(catalog.enabled_regions()),
            }
        )
        return catalog
