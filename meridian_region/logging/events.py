"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (namespace.category.action)
- Searchable in log aggregators

Event Naming Convention:
    <component>.<action>

    component: catalog, region, cli, error
    action: loaded, registered, located, ...

Example Log Query (CloudWatch Insights):
    fields @timestamp, event, message, metadata.region_id
    | filter event = "region.degenerate"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - catalog.*: Region catalog loading
    - region.*: Registry changes and lookups
    - cli.*: Command line invocations
    - error.*: Error conditions
    """

    # ========== Catalog Events ==========
    CATALOG_LOADED = "catalog.loaded"
    """Region catalog parsed and validated."""

    # ========== Region Events ==========
    REGION_REGISTERED = "region.registered"
    """Region added to the registry."""

    REGION_UNREGISTERED = "region.unregistered"
    """Region removed from the registry."""

    REGION_DEGENERATE = "region.degenerate"
    """Region with fewer than 3 vertices registered (contains nothing)."""

    REGION_LOCATED = "region.located"
    """Point lookup across registered regions finished."""

    # ========== CLI Events ==========
    CLI_COMMAND = "cli.command"
    """Command line subcommand executed."""

    # ========== Error Events ==========
    CATALOG_LOAD_ERROR = "error.catalog_load"
    """Catalog file missing or invalid."""

    REGION_NOT_FOUND = "error.region_not_found"
    """Lookup of an unregistered region id."""

    CLI_ERROR = "error.cli"
    """Command line subcommand failed."""


# Event categories for filtering
CATALOG_EVENTS = {
    LogEvent.CATALOG_LOADED,
}

REGION_EVENTS = {
    LogEvent.REGION_REGISTERED,
    LogEvent.REGION_UNREGISTERED,
    LogEvent.REGION_DEGENERATE,
    LogEvent.REGION_LOCATED,
}

ERROR_EVENTS = {
    LogEvent.CATALOG_LOAD_ERROR,
    LogEvent.REGION_NOT_FOUND,
    LogEvent.CLI_ERROR,
}
