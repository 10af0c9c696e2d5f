"""Anchor routes and data shapes."""
from typing import Dict

from ..models import ParameterSpec, ResponseSpec, RouteDescriptor, SchemaDescriptor, SchemaField

SCHEMAS: Dict[str, SchemaDescriptor] = {
    "anchors.AnchorMetricsResponse": SchemaDescriptor(
        name="AnchorMetricsResponse",
        description="Reliability metrics for a single anchor",
        fields=(
            SchemaField("id", "string"),
            SchemaField("name", "string"),
            SchemaField("stellar_account", "string", description="Issuing account public key"),
            SchemaField("reliability_score", "number", format="double"),
            SchemaField("asset_coverage", "integer", description="Number of assets issued"),
            SchemaField("failure_rate", "number", format="double"),
            SchemaField("total_transactions", "integer", format="int64"),
            SchemaField("successful_transactions", "integer", format="int64"),
            SchemaField("failed_transactions", "integer", format="int64"),
            SchemaField("status", "string", description="green, yellow or red"),
        ),
    ),
    "anchors.AnchorsResponse": SchemaDescriptor(
        name="AnchorsResponse",
        description="Page of anchors with their metrics",
        fields=(
            SchemaField("anchors", "array", ref="AnchorMetricsResponse"),
            SchemaField("total", "integer"),
        ),
    ),
}

ROUTES: Dict[str, RouteDescriptor] = {
    "anchors.get_anchors": RouteDescriptor(
        method="get",
        path="/anchors",
        summary="List anchors with key metrics",
        description="Anchors ordered by reliability score, served from cache when warm.",
        tags=("Anchors",),
        parameters=(
            ParameterSpec("limit", "query", "integer", description="Page size", default=50),
            ParameterSpec("offset", "query", "integer", description="Items to skip", default=0),
        ),
        responses=(
            ResponseSpec(200, "Anchors with metrics", schema="AnchorsResponse"),
            ResponseSpec(500, "Internal server error"),
        ),
    ),
}

__all__ = ["ROUTES", "SCHEMAS"]
