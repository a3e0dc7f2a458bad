"""
Delivery Quote Pipeline

Resolves origin and destination, then computes distance and fee when both
resolve. A partial resolution yields an empty DeliveryQuote, never an error.
"""

from typing import Any

from common.logging_config import get_logger
from common.metrics import delivery_quotes
from common.types import DeliveryQuote
from coordinate_resolver.core import CoordinateResolver, get_default_resolver
from delivery_fee.core import compute_distance_and_fee

logger = get_logger("delivery_pipeline")


def quote_delivery(
    origin: Any = None,
    destination: Any = None,
    origin_province: str | None = None,
    destination_province: str | None = None,
    resolver: CoordinateResolver | None = None,
) -> DeliveryQuote:
    """
    Run the full quote pipeline: resolve both endpoints -> distance -> fee.

    Args:
        origin: Explicit origin coordinates (optional)
        destination: Explicit destination coordinates (optional)
        origin_province: Origin province name, used when origin is absent
        destination_province: Destination province name, used when destination is absent
        resolver: Resolver to use (defaults to the process-wide resolver)

    Returns:
        DeliveryQuote; empty when either endpoint could not be resolved
    """
    resolver = resolver or get_default_resolver()

    origin_coords = resolver.resolve(origin, origin_province)
    destination_coords = resolver.resolve(destination, destination_province)

    if origin_coords is None or destination_coords is None:
        logger.info(
            f"Delivery quote unavailable: origin resolved={origin_coords is not None}, "
            f"destination resolved={destination_coords is not None}"
        )
        delivery_quotes.add(1, attributes={"resolved": False})
        return DeliveryQuote()

    result = compute_distance_and_fee(origin_coords, destination_coords)
    delivery_quotes.add(1, attributes={"resolved": True})

    logger.info(f"Delivery quote: {result.distance_km:.2f} km -> fee {result.fee}")
    return DeliveryQuote(distance_km=result.distance_km, fee=result.fee)
