"""Payment corridor routes and data shapes.

A corridor is a source/destination asset pair; its key has the form
``SRC:ISSUER->DST:ISSUER``.
"""
from typing import Dict

from ..models import ParameterSpec, ResponseSpec, RouteDescriptor, SchemaDescriptor, SchemaField

SCHEMAS: Dict[str, SchemaDescriptor] = {
    "corridors.CorridorResponse": SchemaDescriptor(
        name="CorridorResponse",
        description="Summary metrics for a payment corridor",
        fields=(
            SchemaField("id", "string", description="Corridor key"),
            SchemaField("source_asset", "string"),
            SchemaField("destination_asset", "string"),
            SchemaField("success_rate", "number", format="double"),
            SchemaField("total_attempts", "integer", format="int64"),
            SchemaField("successful_payments", "integer", format="int64"),
            SchemaField("failed_payments", "integer", format="int64"),
            SchemaField("average_latency_ms", "number", format="double"),
            SchemaField("median_latency_ms", "number", format="double"),
            SchemaField("p95_latency_ms", "number", format="double"),
            SchemaField("p99_latency_ms", "number", format="double"),
            SchemaField("liquidity_depth_usd", "number", format="double"),
            SchemaField("liquidity_volume_24h_usd", "number", format="double"),
            SchemaField("liquidity_trend", "string", description="increasing, stable or decreasing"),
            SchemaField("health_score", "number", format="double"),
            SchemaField("last_updated", "string", format="date-time"),
        ),
    ),
    "corridors.SuccessRateDataPoint": SchemaDescriptor(
        name="SuccessRateDataPoint",
        fields=(
            SchemaField("timestamp", "string", format="date-time"),
            SchemaField("success_rate", "number", format="double"),
            SchemaField("attempts", "integer", format="int64"),
        ),
    ),
    "corridors.LatencyDataPoint": SchemaDescriptor(
        name="LatencyDataPoint",
        fields=(
            SchemaField("latency_bucket_ms", "integer"),
            SchemaField("count", "integer", format="int64"),
            SchemaField("percentage", "number", format="double"),
        ),
    ),
    "corridors.LiquidityDataPoint": SchemaDescriptor(
        name="LiquidityDataPoint",
        fields=(
            SchemaField("timestamp", "string", format="date-time"),
            SchemaField("liquidity_usd", "number", format="double"),
            SchemaField("volume_24h_usd", "number", format="double"),
        ),
    ),
    "corridors.CorridorDetailResponse": SchemaDescriptor(
        name="CorridorDetailResponse",
        description="Corridor summary with historical series",
        fields=(
            SchemaField("corridor", "ref", ref="CorridorResponse"),
            SchemaField("historical_success_rate", "array", ref="SuccessRateDataPoint"),
            SchemaField("latency_distribution", "array", ref="LatencyDataPoint"),
            SchemaField("liquidity_trends", "array", ref="LiquidityDataPoint"),
            SchemaField("related_corridors", "array", optional=True, ref="CorridorResponse"),
        ),
    ),
}

ROUTES: Dict[str, RouteDescriptor] = {
    "corridors.list_corridors": RouteDescriptor(
        method="get",
        path="/corridors",
        summary="List payment corridors",
        tags=("Corridors",),
        parameters=(
            ParameterSpec("limit", "query", "integer", description="Page size", default=50),
            ParameterSpec("offset", "query", "integer", description="Items to skip", default=0),
            ParameterSpec("sort_by", "query", description="success_rate, health_score or liquidity"),
            ParameterSpec("success_rate_min", "query", "number"),
            ParameterSpec("volume_min", "query", "number", description="Minimum 24h volume in USD"),
            ParameterSpec("asset_code", "query", description="Only corridors touching this asset"),
        ),
        responses=(
            ResponseSpec(200, "Payment corridors", schema="CorridorResponse", many=True),
            ResponseSpec(500, "Internal server error"),
        ),
    ),
    "corridors.get_corridor_detail": RouteDescriptor(
        method="get",
        path="/corridors/{corridor_key}",
        summary="Get corridor detail",
        description="Corridor summary with success rate, latency and liquidity history.",
        tags=("Corridors",),
        parameters=(
            ParameterSpec("corridor_key", "path", required=True, description="SRC:ISSUER->DST:ISSUER"),
        ),
        responses=(
            ResponseSpec(200, "Corridor detail", schema="CorridorDetailResponse"),
            ResponseSpec(404, "Corridor not found"),
            ResponseSpec(500, "Internal server error"),
        ),
    ),
}

__all__ = ["ROUTES", "SCHEMAS"]
