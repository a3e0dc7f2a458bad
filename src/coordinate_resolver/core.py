"""
Coordinate Resolver

Turns checkout location input into coordinates, in this order:
1. Explicit coordinates supplied by the caller (returned as-is when in range)
2. Static province table (case-insensitive exact match)
3. Geocode cache (resolved and unresolved outcomes)
4. Live geocoder call, whose outcome is stored in the cache

Resolution never raises: anything that cannot be resolved comes back as None.
"""

import math
import threading
from collections.abc import Mapping
from numbers import Real
from typing import Any, Protocol

from common.geocoding import (
    GeocodeCache,
    StaticLocationTable,
    get_default_cache,
    load_province_table,
    normalize_query,
)
from common.logging_config import get_logger
from common.metrics import geocode_cache_lookups
from common.types import (
    NOT_ATTEMPTED,
    UNRESOLVED,
    Coordinate,
    Resolved,
    ResolutionOutcome,
)

logger = get_logger("coordinate_resolver")


class Geocoder(Protocol):
    """Anything that can look up a place name."""

    def lookup(self, place_name: str) -> Coordinate | None: ...


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def coerce_explicit_coordinate(value: Any) -> Coordinate | None:
    """
    Accept a Coordinate or a {"latitude", "longitude"} mapping with finite, in-range numbers.

    Anything else (missing keys, strings, NaN, booleans, latitude beyond
    +-90 or longitude beyond +-180) is treated as absent.
    """
    if value is None:
        return None

    if isinstance(value, Coordinate):
        lat, lon = value.latitude, value.longitude
    elif isinstance(value, Mapping):
        lat, lon = value.get("latitude"), value.get("longitude")
    else:
        return None

    if not (_is_number(lat) and _is_number(lon)):
        return None

    coord = value if isinstance(value, Coordinate) else Coordinate(latitude=float(lat), longitude=float(lon))
    if not coord.is_valid:
        logger.debug(f"Ignoring out-of-range coordinate hint ({lat}, {lon})")
        return None
    return coord


class CoordinateResolver:
    """Resolves explicit coordinates or province names to a Coordinate."""

    def __init__(
        self,
        table: StaticLocationTable | None = None,
        cache: GeocodeCache | None = None,
        geocoder: Geocoder | None = None,
    ):
        self.table = table if table is not None else load_province_table()
        self.cache = cache if cache is not None else get_default_cache()
        if geocoder is None:
            from geocode_client.core import GeocodeClient

            geocoder = GeocodeClient()
        self.geocoder = geocoder

    def resolve(self, explicit_coords: Any = None, province_name: str | None = None) -> Coordinate | None:
        """
        Resolve a location to coordinates.

        Args:
            explicit_coords: Caller-supplied Coordinate or lat/lon mapping (optional)
            province_name: Province or place name used when coordinates are absent

        Returns:
            Coordinate, or None if the location could not be resolved
        """
        outcome = self.resolve_outcome(explicit_coords, province_name)
        if isinstance(outcome, Resolved):
            return outcome.coordinate
        return None

    def resolve_outcome(self, explicit_coords: Any = None, province_name: str | None = None) -> ResolutionOutcome:
        """Same as resolve() but returns the tagged outcome."""
        explicit = coerce_explicit_coordinate(explicit_coords)
        if explicit is not None:
            return Resolved(explicit)

        if not province_name or not province_name.strip():
            return NOT_ATTEMPTED

        table_coord = self.table.lookup(province_name)
        if table_coord is not None:
            logger.debug(f"Province table hit for '{province_name}'")
            return Resolved(table_coord)

        key = normalize_query(province_name)
        cached = self.cache.get(key)
        if cached is not None:
            geocode_cache_lookups.add(1, attributes={"result": "hit"})
            logger.debug(f"Geocode cache hit for '{key}': {type(cached).__name__}")
            return cached

        geocode_cache_lookups.add(1, attributes={"result": "miss"})
        return self._geocode_and_store(province_name, key)

    def _geocode_and_store(self, province_name: str, key: str) -> ResolutionOutcome:
        try:
            coord = self.geocoder.lookup(province_name)
        except Exception as e:
            logger.warning(f"Geocoder raised for '{province_name}': {e}")
            coord = None

        if coord is not None and coord.is_valid:
            outcome = Resolved(coord)
        else:
            # Negative outcomes are cached for the process lifetime as well
            outcome = UNRESOLVED
            logger.info(f"Could not resolve '{province_name}'; caching as unresolved")

        self.cache.put(key, outcome)
        return outcome


# Process-wide resolver, created on first use
_default_resolver: CoordinateResolver | None = None
_default_resolver_lock = threading.Lock()


def get_default_resolver() -> CoordinateResolver:
    """Get or create the process-wide resolver (cached)."""
    global _default_resolver
    if _default_resolver is None:
        with _default_resolver_lock:
            if _default_resolver is None:
                _default_resolver = CoordinateResolver()
    return _default_resolver


def resolve_coordinates(explicit_coords: Any = None, province_name: str | None = None) -> Coordinate | None:
    """Resolve a location with the process-wide resolver."""
    return get_default_resolver().resolve(explicit_coords, province_name)
