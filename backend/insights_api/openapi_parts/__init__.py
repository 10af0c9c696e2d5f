"""Modular pieces for the API description builder.

This package holds the descriptor models, the static manifest, the per-domain
catalogs and the OpenAPI rendering helpers the assembler imports.
"""

__all__ = [
    "constants",
    "domains",
    "errors",
    "helpers",
    "models",
]
