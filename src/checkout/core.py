"""
Checkout Integration

Attaches the delivery distance and fee to a checkout session as metadata.
A fee is an enhancement to checkout: when either endpoint cannot be resolved
the session proceeds without delivery metadata.
"""

from dataclasses import dataclass, field
from typing import Any

from common.logging_config import get_logger
from common.pipeline import quote_delivery
from common.types import DeliveryQuote
from coordinate_resolver.core import CoordinateResolver, get_default_resolver
from delivery_fee.core import compute_distance_and_fee

logger = get_logger("checkout")


class ShippingResolutionError(Exception):
    """Raised by the province-only shipping calculator when a province cannot be resolved."""

    def __init__(self, origin_province: str | None, destination_province: str | None):
        self.origin_province = origin_province
        self.destination_province = destination_province
        super().__init__("Could not resolve provinces to coordinates")


@dataclass
class CheckoutSession:
    """
    The slice of a payment-provider checkout session this engine writes to.

    Metadata values are strings, as payment providers require.
    """

    session_id: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


def build_session_metadata(quote: DeliveryQuote) -> dict[str, str]:
    """Format a quote as session metadata; empty when the quote is unresolved."""
    if not quote.is_resolved:
        return {}
    return {
        "distance_km": f"{quote.distance_km:.2f}",
        "delivery_fee": str(quote.fee),
    }


def attach_delivery_metadata(
    session: CheckoutSession,
    origin: Any = None,
    destination: Any = None,
    origin_province: str | None = None,
    destination_province: str | None = None,
    resolver: CoordinateResolver | None = None,
) -> DeliveryQuote:
    """
    Quote the delivery and merge distance/fee metadata into the session.

    Returns:
        The DeliveryQuote; empty (and the session untouched) on partial resolution
    """
    quote = quote_delivery(
        origin=origin,
        destination=destination,
        origin_province=origin_province,
        destination_province=destination_province,
        resolver=resolver,
    )

    metadata = build_session_metadata(quote)
    if metadata:
        session.metadata.update(metadata)
    else:
        logger.info("Proceeding with checkout without delivery fee")

    return quote


def calculate_shipping(
    origin_province: str | None,
    destination_province: str | None,
    resolver: CoordinateResolver | None = None,
) -> DeliveryQuote:
    """
    Province-only shipping calculator for the storefront's fee preview.

    Raises:
        ShippingResolutionError: If either province cannot be resolved
    """
    resolver = resolver or get_default_resolver()

    origin_coords = resolver.resolve(None, origin_province)
    destination_coords = resolver.resolve(None, destination_province)
    if origin_coords is None or destination_coords is None:
        logger.warning(f"Shipping calculation failed for '{origin_province}' -> '{destination_province}'")
        raise ShippingResolutionError(origin_province, destination_province)

    result = compute_distance_and_fee(origin_coords, destination_coords)
    return DeliveryQuote(distance_km=result.distance_km, fee=result.fee)
