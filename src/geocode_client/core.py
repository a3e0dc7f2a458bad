"""
Geocode Client

Resolves a free-text place name to coordinates with a single request to a
Nominatim-compatible search endpoint.

Every failure (network error, non-200 status, empty result, malformed
payload) is reported the same way: lookup() returns None. There is no retry.
"""

import time

import httpx

from common.config import (
    GEOCODER_COUNTRY,
    GEOCODER_TIMEOUT_S,
    GEOCODER_URL,
    GEOCODER_USER_AGENT,
)
from common.logging_config import get_logger
from common.metrics import geocode_lookup_duration, geocode_lookups
from common.types import Coordinate

logger = get_logger("geocode_client")


def build_search_params(place_name: str, country: str = GEOCODER_COUNTRY) -> dict[str, str]:
    """Build query parameters for a single best-match search."""
    query = f"{place_name}, {country}" if country else place_name
    return {"q": query, "format": "jsonv2", "limit": "1"}


def parse_first_result(payload: object) -> Coordinate | None:
    """Extract the first match's lat/lon from a search response payload."""
    if not isinstance(payload, list) or not payload:
        return None

    first = payload[0]
    if not isinstance(first, dict):
        return None

    try:
        coord = Coordinate(latitude=float(first["lat"]), longitude=float(first["lon"]))
    except (KeyError, TypeError, ValueError):
        return None

    if not coord.is_valid:
        return None
    return coord


class GeocodeClient:
    """Best-effort client for the external place-search service."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        base_url: str = GEOCODER_URL,
        user_agent: str = GEOCODER_USER_AGENT,
        country: str = GEOCODER_COUNTRY,
        timeout: float | None = GEOCODER_TIMEOUT_S,
    ):
        self._client = client if client is not None else httpx.Client(timeout=timeout)
        self._owns_client = client is None
        self.base_url = base_url
        self.user_agent = user_agent
        self.country = country

    def lookup(self, place_name: str) -> Coordinate | None:
        """
        Look up a place name and return the first match's coordinates.

        Args:
            place_name: Free-text place name, e.g. a province

        Returns:
            Coordinate of the first match, or None on any failure
        """
        params = build_search_params(place_name, self.country)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        start = time.perf_counter()
        try:
            response = self._client.get(self.base_url, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.warning(f"Geocode request for '{place_name}' failed: {e}")
            self._record("network_error", start)
            return None

        if response.status_code != httpx.codes.OK:
            logger.warning(f"Geocode request for '{place_name}' returned HTTP {response.status_code}")
            self._record("http_error", start)
            return None

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Geocode response for '{place_name}' is not JSON: {e}")
            self._record("malformed", start)
            return None

        coord = parse_first_result(payload)
        if coord is None:
            logger.info(f"Geocoder found no usable result for '{place_name}'")
            self._record("no_result", start)
            return None

        logger.debug(f"Geocoded '{place_name}' -> ({coord.latitude}, {coord.longitude})")
        self._record("resolved", start)
        return coord

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GeocodeClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @staticmethod
    def _record(outcome: str, start: float) -> None:
        elapsed_ms = (time.perf_counter() - start) * 1000
        attrs = {"outcome": outcome}
        geocode_lookups.add(1, attributes=attrs)
        geocode_lookup_duration.record(elapsed_ms, attributes=attrs)
