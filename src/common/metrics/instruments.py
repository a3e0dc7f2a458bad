"""
OpenTelemetry metrics for geocoding and delivery quote observability.

Exports geocoder call counts, cache hit ratios, lookup latency and quote
outcomes via OTLP to an OpenTelemetry Collector.

Metrics are fire-and-forget: if the collector is down, the app continues normally.
"""

import os

from opentelemetry import metrics
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource

from common.logging_config import get_logger

logger = get_logger("common_metrics")

# OTEL Collector endpoint (default: localhost:4317 for gRPC)
OTEL_ENDPOINT = os.environ.get("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4317")

# Standard OTEL switch; the test suite sets it so nothing is exported
OTEL_SDK_DISABLED = os.environ.get("OTEL_SDK_DISABLED", "false").lower() in ("true", "1", "yes")

# Setup OTEL metrics
_resource = Resource.create({"service.name": "delivery-fee-engine"})

if OTEL_SDK_DISABLED:
    logger.info("OpenTelemetry metrics disabled via OTEL_SDK_DISABLED")
    _provider = None
else:
    try:
        _exporter = OTLPMetricExporter(endpoint=OTEL_ENDPOINT, insecure=True)
        _reader = PeriodicExportingMetricReader(_exporter, export_interval_millis=5000)
        _provider = MeterProvider(resource=_resource, metric_readers=[_reader])
        metrics.set_meter_provider(_provider)
        logger.info(f"OpenTelemetry metrics enabled, exporting to {OTEL_ENDPOINT}")
    except Exception as e:
        logger.warning(f"OpenTelemetry setup failed (metrics disabled): {e}")
        _provider = None

# Create meter and instruments
_meter = metrics.get_meter("delivery", version="1.0.0")

geocode_lookups = _meter.create_counter(
    name="geocode.lookups",
    description="Outbound geocoder calls by outcome",
    unit="1",
)

geocode_cache_lookups = _meter.create_counter(
    name="geocode.cache_lookups",
    description="Geocode cache lookups by result (hit/miss)",
    unit="1",
)

geocode_lookup_duration = _meter.create_histogram(
    name="geocode.lookup_duration",
    description="Outbound geocoder round-trip duration (ms)",
    unit="ms",
)

delivery_quotes = _meter.create_counter(
    name="delivery.quotes",
    description="Delivery quotes computed, by whether both endpoints resolved",
    unit="1",
)
