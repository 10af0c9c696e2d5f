"""Public import for the API description builder.

Keeps a stable import path while the implementation lives in
`openapi_builder.py`.
"""
from .openapi_builder import assemble, build_api_document, get_api_document  # noqa: F401
from .openapi_parts.errors import BrokenReference  # noqa: F401
from .openapi_parts.models import ApiDocument  # noqa: F401

__all__ = ["assemble", "build_api_document", "get_api_document", "BrokenReference", "ApiDocument"]
