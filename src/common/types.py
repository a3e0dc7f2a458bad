"""Type definitions for the delivery distance and fee engine."""

import math
from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Coordinate:
    """Geographic coordinates in decimal degrees."""

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        """True when both fields are finite and inside the WGS84 ranges."""
        return (
            math.isfinite(self.latitude)
            and math.isfinite(self.longitude)
            and -90.0 <= self.latitude <= 90.0
            and -180.0 <= self.longitude <= 180.0
        )


@dataclass(frozen=True)
class Resolved:
    """A location query that resolved to a coordinate."""

    coordinate: Coordinate


@dataclass(frozen=True)
class Unresolved:
    """A location query that was looked up and could not be resolved."""


@dataclass(frozen=True)
class NotAttempted:
    """No lookup was made because the caller supplied nothing usable."""


UNRESOLVED = Unresolved()
NOT_ATTEMPTED = NotAttempted()

# What the geocode cache stores; NotAttempted is never cached
GeocodeOutcome = Resolved | Unresolved

ResolutionOutcome = Resolved | Unresolved | NotAttempted


@dataclass(frozen=True)
class DistanceTier:
    """Named distance band and the surcharge it adds to the base fee."""

    name: str
    surcharge: int


@dataclass(frozen=True)
class DistanceFee:
    """Great-circle distance between two coordinates and the fee it costs."""

    distance_km: float
    fee: int


@dataclass(frozen=True)
class DeliveryQuote:
    """
    Outcome of quoting a delivery between two locations.

    Both fields are None when either endpoint could not be resolved. That is
    a normal outcome: checkout continues without a delivery fee.
    """

    distance_km: float | None = None
    fee: int | None = None

    @property
    def is_resolved(self) -> bool:
        return self.distance_km is not None and self.fee is not None


@dataclass(frozen=True)
class DeliveryWindow:
    """Estimated delivery range for a shipping method."""

    min_days: int
    max_days: int
    min_date: date
    max_date: date

    @property
    def days_text(self) -> str:
        if self.min_days == self.max_days:
            return f"{self.min_days} วัน"
        return f"{self.min_days}-{self.max_days} วัน"
