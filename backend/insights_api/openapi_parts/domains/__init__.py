"""Per-domain route and schema catalogs.

Each module exports ``ROUTES`` (route identifier -> RouteDescriptor) and
``SCHEMAS`` (schema identifier -> SchemaDescriptor). The merged catalogs are
what the assembler resolves identifiers against.
"""
from typing import Dict

from ..models import RouteDescriptor, SchemaDescriptor
from . import anchors, corridors

DOMAINS = (anchors, corridors)

ROUTE_CATALOG: Dict[str, RouteDescriptor] = {}
SCHEMA_CATALOG: Dict[str, SchemaDescriptor] = {}
for _mod in DOMAINS:
    ROUTE_CATALOG.update(_mod.ROUTES)
    SCHEMA_CATALOG.update(_mod.SCHEMAS)

__all__ = [
    "anchors",
    "corridors",
    "ROUTE_CATALOG",
    "SCHEMA_CATALOG",
]
