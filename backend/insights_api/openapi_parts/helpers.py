"""Helper functions that render descriptors as OpenAPI objects.

Every helper builds fresh dicts so the exported document can be modified by
callers without touching the assembled value.
"""
from typing import Any, Dict, List

SCHEMA_REF_PREFIX = "#/components/schemas/"


def schema_ref(name: str) -> Dict[str, Any]:
    return {"$ref": f"{SCHEMA_REF_PREFIX}{name}"}


def field_schema(field: Any) -> Dict[str, Any]:
    if field.type == "ref":
        out = schema_ref(field.ref)
    elif field.type == "array":
        items = schema_ref(field.ref) if field.ref else {"type": field.items}
        out = {"type": "array", "items": items}
    else:
        out = {"type": field.type}
    if field.format:
        out["format"] = field.format
    if field.description:
        # sibling keys next to $ref are ignored by 3.0 tooling
        if "$ref" in out:
            out = {"allOf": [out], "description": field.description}
        else:
            out["description"] = field.description
    if field.optional and "$ref" not in out:
        out["nullable"] = True
    return out


def schema_object(schema: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": "object"}
    if schema.description:
        out["description"] = schema.description
    out["properties"] = {f.name: field_schema(f) for f in schema.fields}
    required = [f.name for f in schema.fields if not f.optional]
    if required:
        out["required"] = required
    return out


def parameter_object(param: Any) -> Dict[str, Any]:
    schema: Dict[str, Any] = {"type": param.type}
    if param.default is not None:
        schema["default"] = param.default
    out: Dict[str, Any] = {"name": param.name, "in": param.location, "required": param.required, "schema": schema}
    if param.description:
        out["description"] = param.description
    return out


def response_object(resp: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {"description": resp.description}
    if resp.schema:
        body = schema_ref(resp.schema)
        if resp.many:
            body = {"type": "array", "items": body}
        out["content"] = {"application/json": {"schema": body}}
    return out


def operation_object(route: Any) -> Dict[str, Any]:
    desc = route.descriptor
    op: Dict[str, Any] = {
        "tags": list(desc.tags),
        "summary": desc.summary,
        "operationId": route.operation_id,
    }
    if desc.description:
        op["description"] = desc.description
    if desc.parameters:
        op["parameters"] = [parameter_object(p) for p in desc.parameters]
    if desc.request_body:
        op["requestBody"] = {
            "required": True,
            "content": {"application/json": {"schema": schema_ref(desc.request_body)}},
        }
    op["responses"] = {str(r.status): response_object(r) for r in desc.responses}
    return op


def info_object(metadata: Any) -> Dict[str, Any]:
    info: Dict[str, Any] = {"title": metadata.title, "version": metadata.version}
    if metadata.description:
        info["description"] = metadata.description
    if metadata.contact:
        info["contact"] = {"name": metadata.contact.name, "email": metadata.contact.email}
    if metadata.license:
        info["license"] = {"name": metadata.license.name, "url": metadata.license.url}
    return info


def render_document(doc: Any) -> Dict[str, Any]:
    paths: Dict[str, Any] = {}
    # paths grouped by template, first-seen order
    for route in doc.routes:
        paths.setdefault(route.descriptor.path, {})[route.descriptor.method] = operation_object(route)

    tags: List[Dict[str, Any]] = []
    for tag in doc.tags:
        entry = {"name": tag.name}
        if tag.description:
            entry["description"] = tag.description
        tags.append(entry)

    return {
        "openapi": doc.openapi_version,
        "info": info_object(doc.metadata),
        "servers": [{"url": s.url, "description": s.description} for s in doc.servers],
        "tags": tags,
        "paths": paths,
        "components": {"schemas": {s.name: schema_object(s) for s in doc.schemas}},
    }


__all__ = [
    "SCHEMA_REF_PREFIX",
    "schema_ref",
    "field_schema",
    "schema_object",
    "parameter_object",
    "response_object",
    "operation_object",
    "info_object",
    "render_document",
]
