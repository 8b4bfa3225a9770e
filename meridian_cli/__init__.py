"""
Meridian CLI - Command-line interface for region catalogs.

This package provides a CLI for inspecting a YAML region catalog and
hit-testing points against it.

Usage:
    meridian-cli --catalog regions.yaml list-regions
    meridian-cli --catalog regions.yaml bbox downtown
    meridian-cli --catalog regions.yaml check downtown 5 5
    meridian-cli --catalog regions.yaml locate 5 5
"""

__version__ = "1.0.0"
