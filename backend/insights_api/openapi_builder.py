"""Deterministic assembler for the Stellar Insights API description.

Resolves the ordered route and schema identifiers against the domain
catalogs, cross-checks every name reference, and returns one immutable
``ApiDocument``:
- schema registry keyed by name, no duplicates, nested refs resolved
- every route tag declared, every route schema registered
- routes, schemas and tags in input order

This is the canonical builder module; `insights_api/openapi.py` re-exports from here.
"""
import logging
from functools import lru_cache
from typing import Dict, Mapping, Optional, Sequence, Set

from .openapi_parts import constants
from .openapi_parts.domains import ROUTE_CATALOG, SCHEMA_CATALOG
from .openapi_parts.errors import (
    DUPLICATE_OPERATION,
    DUPLICATE_OPERATION_ID,
    DUPLICATE_SCHEMA,
    DUPLICATE_TAG,
    UNDECLARED_SCHEMA,
    UNDECLARED_TAG,
    UNKNOWN_ROUTE,
    UNKNOWN_SCHEMA,
    BrokenReference,
)
from .openapi_parts.models import ApiDocument, ApiManifest, ResolvedRoute, RouteDescriptor, SchemaDescriptor

logger = logging.getLogger(__name__)

__all__ = ["assemble", "build_api_document", "get_api_document"]


def _resolve_schemas(schemas: Sequence[str], catalog: Mapping[str, SchemaDescriptor]) -> Dict[str, SchemaDescriptor]:
    registry: Dict[str, SchemaDescriptor] = {}
    owners: Dict[str, str] = {}
    for ident in schemas:
        if ident not in catalog:
            raise BrokenReference(UNKNOWN_SCHEMA, ident, detail="no data shape registered under this identifier")
        schema = catalog[ident]
        if schema.name in registry:
            raise BrokenReference(
                DUPLICATE_SCHEMA, schema.name, referrer=ident, detail=f"already declared by {owners[schema.name]}"
            )
        registry[schema.name] = schema
        owners[schema.name] = ident
    # nested fields must point inside the registry too
    for name, schema in registry.items():
        for ref in schema.references:
            if ref not in registry:
                raise BrokenReference(UNDECLARED_SCHEMA, ref, referrer=f"schema {name}")
    return registry


def _resolve_routes(routes: Sequence[str], catalog: Mapping[str, RouteDescriptor]) -> list:
    resolved = []
    for ident in routes:
        if ident not in catalog:
            raise BrokenReference(UNKNOWN_ROUTE, ident, detail="no route handler registered under this identifier")
        resolved.append(ResolvedRoute(ident, catalog[ident]))
    return resolved


def _reachable(routes: Sequence[ResolvedRoute], registry: Mapping[str, SchemaDescriptor]) -> Set[str]:
    seen: Set[str] = set()
    stack = [name for r in routes for name in r.descriptor.schema_names]
    while stack:
        name = stack.pop()
        if name in seen:
            continue
        seen.add(name)
        stack.extend(registry[name].references)
    return seen


def _report_completeness(manifest: ApiManifest, routes: Sequence[ResolvedRoute], registry: Mapping[str, SchemaDescriptor]):
    used_tags = {t for r in routes for t in r.descriptor.tags}
    for tag in manifest.tags:
        if tag.name not in used_tags and not tag.reserved:
            logger.warning("Tag %r is declared but no route uses it", tag.name)
    reachable = _reachable(routes, registry)
    for name in registry:
        if name not in reachable:
            logger.warning("Schema %r is not reachable from any route", name)


def assemble(
    manifest: ApiManifest,
    routes: Sequence[str],
    schemas: Sequence[str],
    route_catalog: Optional[Mapping[str, RouteDescriptor]] = None,
    schema_catalog: Optional[Mapping[str, SchemaDescriptor]] = None,
) -> ApiDocument:
    """Build the API description from identifiers.

    Raises BrokenReference when an identifier does not resolve, a schema name
    is declared twice, or a route/schema points at an undeclared tag or schema.
    """
    route_catalog = ROUTE_CATALOG if route_catalog is None else route_catalog
    schema_catalog = SCHEMA_CATALOG if schema_catalog is None else schema_catalog

    tag_names: Set[str] = set()
    for tag in manifest.tags:
        if tag.name in tag_names:
            raise BrokenReference(DUPLICATE_TAG, tag.name)
        tag_names.add(tag.name)

    registry = _resolve_schemas(schemas, schema_catalog)
    resolved = _resolve_routes(routes, route_catalog)

    operations: Dict[tuple, str] = {}
    operation_ids: Dict[str, str] = {}
    for route in resolved:
        desc = route.descriptor
        for tag in desc.tags:
            if tag not in tag_names:
                raise BrokenReference(UNDECLARED_TAG, tag, referrer=route.identifier)
        for name in desc.schema_names:
            if name not in registry:
                raise BrokenReference(UNDECLARED_SCHEMA, name, referrer=route.identifier)
        key = (desc.method, desc.path_key)
        if key in operations:
            raise BrokenReference(
                DUPLICATE_OPERATION,
                f"{desc.method.upper()} {desc.path}",
                referrer=route.identifier,
                detail=f"already served by {operations[key]}",
            )
        operations[key] = route.identifier
        if route.operation_id in operation_ids:
            raise BrokenReference(
                DUPLICATE_OPERATION_ID,
                route.operation_id,
                referrer=route.identifier,
                detail=f"already used by {operation_ids[route.operation_id]}",
            )
        operation_ids[route.operation_id] = route.identifier

    _report_completeness(manifest, resolved, registry)
    logger.debug("Assembled API description: %d routes, %d schemas", len(resolved), len(registry))

    return ApiDocument(
        metadata=manifest.metadata,
        servers=tuple(manifest.servers),
        tags=tuple(manifest.tags),
        routes=tuple(resolved),
        schemas=tuple(registry.values()),
    )


def build_api_document() -> ApiDocument:
    return assemble(constants.MANIFEST, constants.ROUTES, constants.SCHEMAS)


@lru_cache(maxsize=None)
def get_api_document() -> ApiDocument:
    """Process-wide assembled document."""
    return build_api_document()
