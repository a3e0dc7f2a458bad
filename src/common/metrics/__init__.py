"""OpenTelemetry metrics for geocoding and delivery quotes."""

from common.metrics.instruments import (
    delivery_quotes,
    geocode_cache_lookups,
    geocode_lookup_duration,
    geocode_lookups,
)

__all__ = [
    "delivery_quotes",
    "geocode_cache_lookups",
    "geocode_lookup_duration",
    "geocode_lookups",
]
