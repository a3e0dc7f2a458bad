"""Delivery date estimation by shipping method and distance tier."""

from datetime import date, timedelta

from common.config import DELIVERY_DAYS
from common.types import DeliveryWindow
from delivery_fee.core import get_distance_tier

SHIPPING_METHODS = tuple(DELIVERY_DAYS)


def estimate_delivery_window(
    shipping_method: str,
    distance_km: float = 0.0,
    today: date | None = None,
) -> DeliveryWindow:
    """
    Estimate the earliest and latest delivery dates.

    Deliveries run 7 days a week, so lead times are plain calendar days.

    Args:
        shipping_method: 'standard' or 'express'
        distance_km: Distance in kilometers
        today: Reference date (defaults to date.today())

    Returns:
        DeliveryWindow with min/max days and dates
    """
    days_by_tier = DELIVERY_DAYS.get(shipping_method)
    if days_by_tier is None:
        raise ValueError(f"Unknown shipping method: {shipping_method!r} (expected one of {SHIPPING_METHODS})")

    tier = get_distance_tier(distance_km)
    min_days, max_days = days_by_tier[tier.name]
    start = today or date.today()

    return DeliveryWindow(
        min_days=min_days,
        max_days=max_days,
        min_date=start + timedelta(days=min_days),
        max_date=start + timedelta(days=max_days),
    )


def estimate_delivery_date(
    shipping_method: str,
    distance_km: float = 0.0,
    today: date | None = None,
) -> date:
    """Latest expected delivery date for the method and distance."""
    return estimate_delivery_window(shipping_method, distance_km, today).max_date
