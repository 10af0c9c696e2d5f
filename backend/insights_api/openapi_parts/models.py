"""Immutable value types for the API description.

Descriptors are declared once (domain catalogs and the static manifest) and
never mutated. Invariants that only concern a single value are checked at
construction time and raise ``ValueError``; cross references between values
are checked by the assembler.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
from urllib.parse import urlparse

from .helpers import render_document

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
FIELD_TYPES = ("string", "integer", "number", "boolean", "array", "ref")
PRIMITIVE_TYPES = ("string", "integer", "number", "boolean")
PARAM_LOCATIONS = ("path", "query")

_SEMVER = re.compile(r"^\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?$")
_PLACEHOLDER = re.compile(r"{([^{}]+)}")


@dataclass(frozen=True)
class ContactInfo:
    name: str
    email: str


@dataclass(frozen=True)
class LicenseInfo:
    name: str
    url: str


@dataclass(frozen=True)
class ApiMetadata:
    title: str
    version: str
    description: str = ""
    contact: Optional[ContactInfo] = None
    license: Optional[LicenseInfo] = None

    def __post_init__(self):
        if not self.title.strip():
            raise ValueError("API title must not be empty")
        if not self.version.strip():
            raise ValueError("API version must not be empty")
        if not _SEMVER.match(self.version):
            raise ValueError(f"API version {self.version!r} is not a semantic version")


@dataclass(frozen=True)
class ServerEntry:
    url: str
    description: str = ""

    def __post_init__(self):
        parsed = urlparse(self.url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Server URL {self.url!r} is not an absolute URI")


@dataclass(frozen=True)
class TagDescriptor:
    name: str
    description: str = ""
    # declared ahead of the routes that will use it
    reserved: bool = False

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("Tag name must not be empty")


@dataclass(frozen=True)
class ApiManifest:
    metadata: ApiMetadata
    servers: Tuple[ServerEntry, ...] = ()
    tags: Tuple[TagDescriptor, ...] = ()


@dataclass(frozen=True)
class SchemaField:
    """One property of a named schema.

    ``type`` is a primitive, ``array`` or ``ref``. Nesting goes through
    ``ref`` (another schema name): for ``ref`` fields it is the field's own
    shape, for ``array`` fields it is the item shape. Arrays of primitives use
    ``items`` instead.
    """

    name: str
    type: str
    optional: bool = False
    ref: Optional[str] = None
    items: Optional[str] = None
    format: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self):
        if self.type not in FIELD_TYPES:
            raise ValueError(f"Field {self.name!r} has unknown type {self.type!r}")
        if self.type == "ref" and not self.ref:
            raise ValueError(f"Field {self.name!r} of type ref needs a schema name")
        if self.type == "array":
            if bool(self.ref) == bool(self.items):
                raise ValueError(f"Array field {self.name!r} needs exactly one of ref or items")
            if self.items and self.items not in PRIMITIVE_TYPES:
                raise ValueError(f"Array field {self.name!r} has unknown item type {self.items!r}")
        elif self.items:
            raise ValueError(f"Field {self.name!r} is not an array but declares items")
        if self.type in PRIMITIVE_TYPES and self.ref:
            raise ValueError(f"Primitive field {self.name!r} cannot reference a schema")


@dataclass(frozen=True)
class SchemaDescriptor:
    name: str
    fields: Tuple[SchemaField, ...]
    description: str = ""

    def __post_init__(self):
        if not self.name:
            raise ValueError("Schema name must not be empty")
        seen = set()
        for f in self.fields:
            if f.name in seen:
                raise ValueError(f"Schema {self.name!r} declares field {f.name!r} twice")
            seen.add(f.name)

    @property
    def references(self) -> Tuple[str, ...]:
        names: Dict[str, None] = {}
        for f in self.fields:
            if f.ref:
                names[f.ref] = None
        return tuple(names)


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    location: str
    type: str = "string"
    required: bool = False
    description: Optional[str] = None
    default: Any = None

    def __post_init__(self):
        if self.location not in PARAM_LOCATIONS:
            raise ValueError(f"Parameter {self.name!r} has unknown location {self.location!r}")
        if self.type not in PRIMITIVE_TYPES:
            raise ValueError(f"Parameter {self.name!r} has unknown type {self.type!r}")
        if self.location == "path" and not self.required:
            raise ValueError(f"Path parameter {self.name!r} must be required")


@dataclass(frozen=True)
class ResponseSpec:
    status: int
    description: str
    schema: Optional[str] = None
    many: bool = False


@dataclass(frozen=True)
class RouteDescriptor:
    method: str
    path: str
    summary: str
    tags: Tuple[str, ...]
    responses: Tuple[ResponseSpec, ...]
    description: Optional[str] = None
    parameters: Tuple[ParameterSpec, ...] = ()
    request_body: Optional[str] = None

    def __post_init__(self):
        if self.method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method {self.method!r} for {self.path}")
        if not self.path.startswith("/"):
            raise ValueError(f"Path template {self.path!r} must start with '/'")
        if not self.tags:
            raise ValueError(f"{self.method.upper()} {self.path} declares no tags")
        if not self.responses:
            raise ValueError(f"{self.method.upper()} {self.path} declares no responses")
        statuses = [r.status for r in self.responses]
        if len(set(statuses)) != len(statuses):
            raise ValueError(f"{self.method.upper()} {self.path} declares a response status twice")
        placeholders = set(_PLACEHOLDER.findall(self.path))
        path_params = {p.name for p in self.parameters if p.location == "path"}
        if placeholders != path_params:
            raise ValueError(
                f"{self.method.upper()} {self.path} path parameters {sorted(path_params)} "
                f"do not match template placeholders {sorted(placeholders)}"
            )

    @property
    def path_key(self) -> str:
        """Path template with placeholder names erased; equal keys are the same path."""
        return _PLACEHOLDER.sub("{}", self.path)

    @property
    def schema_names(self) -> Tuple[str, ...]:
        names: Dict[str, None] = {}
        if self.request_body:
            names[self.request_body] = None
        for resp in self.responses:
            if resp.schema:
                names[resp.schema] = None
        return tuple(names)


@dataclass(frozen=True)
class ResolvedRoute:
    identifier: str
    descriptor: RouteDescriptor

    @property
    def operation_id(self) -> str:
        return self.identifier.rsplit(".", 1)[-1]


@dataclass(frozen=True)
class ApiDocument:
    """Assembled API description.

    ``schemas`` is the schema registry in declaration order; names are unique.
    Use :meth:`as_openapi` to export the OpenAPI object model.
    """

    metadata: ApiMetadata
    servers: Tuple[ServerEntry, ...]
    tags: Tuple[TagDescriptor, ...]
    routes: Tuple[ResolvedRoute, ...]
    schemas: Tuple[SchemaDescriptor, ...]
    openapi_version: str = "3.0.3"

    @property
    def schema_names(self) -> Tuple[str, ...]:
        return tuple(s.name for s in self.schemas)

    def schema(self, name: str) -> SchemaDescriptor:
        for s in self.schemas:
            if s.name == name:
                return s
        raise KeyError(name)

    def as_openapi(self) -> Dict[str, Any]:
        return render_document(self)


__all__ = [
    "HTTP_METHODS",
    "FIELD_TYPES",
    "PRIMITIVE_TYPES",
    "ContactInfo",
    "LicenseInfo",
    "ApiMetadata",
    "ServerEntry",
    "TagDescriptor",
    "ApiManifest",
    "SchemaField",
    "SchemaDescriptor",
    "ParameterSpec",
    "ResponseSpec",
    "RouteDescriptor",
    "ResolvedRoute",
    "ApiDocument",
]
