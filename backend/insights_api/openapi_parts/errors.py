"""Wiring errors raised while assembling the API description."""
from typing import Optional

UNKNOWN_ROUTE = "unknown-route"
UNKNOWN_SCHEMA = "unknown-schema"
UNDECLARED_SCHEMA = "undeclared-schema"
UNDECLARED_TAG = "undeclared-tag"
DUPLICATE_SCHEMA = "duplicate-schema"
DUPLICATE_TAG = "duplicate-tag"
DUPLICATE_OPERATION = "duplicate-operation"
DUPLICATE_OPERATION_ID = "duplicate-operation-id"


class BrokenReference(Exception):
    """A route, schema or tag reference that does not resolve.

    Raised once at assembly time; the fix is a manifest edit.
    """

    def __init__(self, kind: str, name: str, referrer: Optional[str] = None, detail: Optional[str] = None):
        self.kind = kind
        self.name = name
        self.referrer = referrer
        msg = f"{kind}: {name!r}"
        if referrer:
            msg += f" (referenced by {referrer})"
        if detail:
            msg += f" - {detail}"
        super().__init__(msg)


__all__ = [
    "BrokenReference",
    "UNKNOWN_ROUTE",
    "UNKNOWN_SCHEMA",
    "UNDECLARED_SCHEMA",
    "UNDECLARED_TAG",
    "DUPLICATE_SCHEMA",
    "DUPLICATE_TAG",
    "DUPLICATE_OPERATION",
    "DUPLICATE_OPERATION_ID",
]
