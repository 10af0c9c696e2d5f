"""Static manifest for the Stellar Insights API description.

Route and schema identifiers are listed in display order; the assembler keeps
that order in the produced document.
"""
from typing import Tuple

from .models import ApiManifest, ApiMetadata, ContactInfo, LicenseInfo, ServerEntry, TagDescriptor

METADATA = ApiMetadata(
    title="Stellar Insights API",
    version="1.0.0",
    description="API for Stellar network analytics, anchor monitoring, and payment corridor insights",
    contact=ContactInfo(name="Stellar Insights Team", email="support@stellarinsights.io"),
    license=LicenseInfo(name="MIT", url="https://opensource.org/licenses/MIT"),
)

SERVERS: Tuple[ServerEntry, ...] = (
    ServerEntry("http://localhost:8080", "Local development server"),
    ServerEntry("https://api.stellarinsights.io", "Production server"),
)

# RPC, Fee Bumps, Cache and Metrics have no documented routes yet
TAGS: Tuple[TagDescriptor, ...] = (
    TagDescriptor("Anchors", "Anchor management and metrics endpoints"),
    TagDescriptor("Corridors", "Payment corridor analytics endpoints"),
    TagDescriptor("RPC", "Stellar RPC integration endpoints", reserved=True),
    TagDescriptor("Fee Bumps", "Fee bump transaction tracking", reserved=True),
    TagDescriptor("Cache", "Cache management and statistics", reserved=True),
    TagDescriptor("Metrics", "System metrics and monitoring", reserved=True),
)

MANIFEST = ApiManifest(metadata=METADATA, servers=SERVERS, tags=TAGS)

ROUTES: Tuple[str, ...] = (
    "anchors.get_anchors",
    "corridors.list_corridors",
    "corridors.get_corridor_detail",
)

SCHEMAS: Tuple[str, ...] = (
    "anchors.AnchorsResponse",
    "anchors.AnchorMetricsResponse",
    "corridors.CorridorResponse",
    "corridors.CorridorDetailResponse",
    "corridors.SuccessRateDataPoint",
    "corridors.LatencyDataPoint",
    "corridors.LiquidityDataPoint",
)

__all__ = [
    "METADATA",
    "SERVERS",
    "TAGS",
    "MANIFEST",
    "ROUTES",
    "SCHEMAS",
]
