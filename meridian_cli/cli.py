"""
Meridian CLI - Main entry point.

Provides command-line interface for querying a YAML region catalog.
"""

import argparse
import logging
import sys
from typing import List, Optional

from meridian_region.config import CatalogConfig
from meridian_region.geometry.region import Region
from meridian_region.logging import LogEvent, create_logger
from meridian_region.registry import RegionRegistry

ORIENTATION_NAMES = {1: "ccw", -1: "cw", 0: "degenerate"}


def load_registry(catalog_path: str, log_level: int) -> tuple:
    """
    Load catalog and register its enabled regions.

    Returns:
        (catalog, registry)

    Raises:
        FileNotFoundError: If catalog file doesn't exist
        ValueError: If catalog is invalid
    """
    catalog = CatalogConfig.from_yaml(
        catalog_path, logger=create_logger("catalog", level=log_level)
    )
    registry = RegionRegistry.from_config(
        catalog, logger=create_logger("registry", level=log_level)
    )
    return catalog, registry


def format_region(region_id: str, region: Region, tolerance: float) -> str:
    """One-line summary of a region."""
    status = "valid" if region.is_valid() else "invalid"
    orientation = ORIENTATION_NAMES[region.orientation(tolerance)]
    return (
        f"{region_id}: {len(region)} vertices, {status}, {orientation}, "
        f"bbox {region.bounding_box()}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="meridian-cli",
        description="Meridian CLI - Query polygon regions from a YAML catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List regions with vertex count and bounding box
  meridian-cli --catalog regions.yaml list-regions

  # Bounding box of one region
  meridian-cli --catalog regions.yaml bbox downtown

  # Classify a point against one region
  meridian-cli --catalog regions.yaml check downtown 5 5

  # All regions containing a point
  meridian-cli --catalog regions.yaml locate 5 5
"""
    )

    # Global arguments
    parser.add_argument(
        "--catalog",
        default="regions.yaml",
        help="Path to region catalog YAML (default: regions.yaml)"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Structured log level (default: WARNING)"
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    subparsers.add_parser('list-regions', help='List enabled regions')

    bbox = subparsers.add_parser('bbox', help='Print bounding box of a region')
    bbox.add_argument('region_id', help='Region ID')

    check = subparsers.add_parser('check', help='Classify a point against a region')
    check.add_argument('region_id', help='Region ID')
    check.add_argument('x', type=float, help='Point x coordinate')
    check.add_argument('y', type=float, help='Point y coordinate')

    locate = subparsers.add_parser('locate', help='List regions containing a point')
    locate.add_argument('x', type=float, help='Point x coordinate')
    locate.add_argument('y', type=float, help='Point y coordinate')

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    log_level = getattr(logging, args.log_level)
    logger = create_logger("cli", level=log_level)

    # Execute command
    try:
        catalog, registry = load_registry(args.catalog, log_level)

        if args.command == 'list-regions':
            for region_id, region in registry.items():
                print(format_region(region_id, region, catalog.orientation_tolerance))

        elif args.command == 'bbox':
            rect = registry.get(args.region_id).bounding_box()
            print(f"{args.region_id}: {rect}")

        elif args.command == 'check':
            result = registry.get(args.region_id).classify((args.x, args.y))
            print(result.name)

        elif args.command == 'locate':
            for region_id in registry.locate((args.x, args.y)):
                print(region_id)

        logger.info(
            event=LogEvent.CLI_COMMAND,
            message=f"Executed '{args.command}'",
            metadata={'command': args.command}
        )

    except Exception as e:
        logger.error(
            event=LogEvent.CLI_ERROR,
            message=f"Command '{args.command}' failed",
            metadata={'command': args.command, 'catalog': args.catalog},
            exc_info=e
        )
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
