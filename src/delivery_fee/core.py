"""
Delivery Fee Calculator

Computes the great-circle distance between two coordinates and maps it to a
delivery fee:
- Haversine distance (mean Earth radius 6371 km), not rounded
- Distance tiers from config (near / medium / far)
- Fee = base fee + tier surcharge, in currency minor units

Fees never decrease as distance grows, and every non-negative distance
(including infinity) has a fee.
"""

import math

import numpy as np

from common.config import DELIVERY_BASE_FEE, EARTH_RADIUS_KM, EARTH_RADIUS_MI, FEE_TIERS
from common.logging_config import get_logger
from common.types import Coordinate, DistanceFee, DistanceTier

logger = get_logger("delivery_fee")


class InvalidCoordinateError(ValueError):
    """Raised when a coordinate is non-finite or outside the valid lat/lon range."""


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float, in_miles: bool = False) -> float:
    """Calculate the great-circle distance between two points in kilometers (or miles)."""
    R = EARTH_RADIUS_MI if in_miles else EARTH_RADIUS_KM

    lat1_rad = np.radians(lat1)
    lat2_rad = np.radians(lat2)
    delta_lat = np.radians(lat2 - lat1)
    delta_lon = np.radians(lon2 - lon1)

    a = np.sin(delta_lat / 2) ** 2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(delta_lon / 2) ** 2
    # Rounding can push a just past 1 for near-antipodal points
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))

    return float(R * c)


def get_distance_tier(
    distance_km: float,
    tiers: list[tuple[str, float, int]] = FEE_TIERS,
) -> DistanceTier:
    """
    Find the first tier whose upper bound covers the distance.

    Negative distances are clamped to zero. Distances beyond every bound fall
    into the last tier.
    """
    if math.isnan(distance_km):
        raise ValueError("distance_km must not be NaN")
    if not tiers:
        raise ValueError("at least one fee tier is required")

    d = max(0.0, distance_km)
    for name, upper_bound_km, surcharge in tiers:
        if d <= upper_bound_km:
            return DistanceTier(name=name, surcharge=surcharge)

    name, _, surcharge = tiers[-1]
    return DistanceTier(name=name, surcharge=surcharge)


def calculate_delivery_fee(
    distance_km: float,
    base: int | None = None,
    tiers: list[tuple[str, float, int]] | None = None,
) -> int:
    """Base fee plus the flat surcharge of the distance tier (no per-km pricing)."""
    base_fee = DELIVERY_BASE_FEE if base is None else base
    tier = get_distance_tier(distance_km, tiers if tiers is not None else FEE_TIERS)
    return base_fee + tier.surcharge


def _validate(coord: Coordinate, label: str) -> None:
    if not coord.is_valid:
        raise InvalidCoordinateError(
            f"{label} coordinate out of range: ({coord.latitude}, {coord.longitude})"
        )


def compute_distance_and_fee(a: Coordinate, b: Coordinate) -> DistanceFee:
    """
    Compute the distance between two coordinates and the delivery fee for it.

    Args:
        a: Origin coordinate
        b: Destination coordinate

    Returns:
        DistanceFee with unrounded distance_km and fee in minor units

    Raises:
        InvalidCoordinateError: If either coordinate is non-finite or out of range
    """
    _validate(a, "origin")
    _validate(b, "destination")

    distance_km = haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
    fee = calculate_delivery_fee(distance_km)

    logger.debug(f"Distance {distance_km:.2f} km -> fee {fee}")
    return DistanceFee(distance_km=distance_km, fee=fee)
