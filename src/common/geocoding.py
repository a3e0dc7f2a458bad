"""
Local geocoding primitives: the static province table and the geocode cache.

The province table is loaded once from config.py and never mutated. The cache
memoizes outbound geocoder results for the life of the process, including
misses, so an unknown or unreachable place is only queried once.
"""

import threading
from collections.abc import Mapping
from types import MappingProxyType

from common.config import PROVINCE_COORDINATES
from common.logging_config import get_logger
from common.types import Coordinate, GeocodeOutcome, Resolved, Unresolved

logger = get_logger("common_geocoding")


def normalize_query(location: str) -> str:
    """Normalize a free-text location for cache lookups."""
    return location.strip().lower()


class StaticLocationTable:
    """Read-only mapping of canonical province name -> Coordinate."""

    def __init__(self, entries: Mapping[str, tuple[float, float] | Coordinate]):
        coords: dict[str, Coordinate] = {}
        for name, value in entries.items():
            if not isinstance(value, Coordinate):
                value = Coordinate(latitude=float(value[0]), longitude=float(value[1]))
            coords[name] = value

        self._entries = MappingProxyType(coords)
        # Case-insensitive index; exact key match only, no trimming
        self._by_lower = MappingProxyType({name.lower(): coord for name, coord in coords.items()})

    @property
    def entries(self) -> Mapping[str, Coordinate]:
        return self._entries

    def lookup(self, name: str) -> Coordinate | None:
        """
        Case-insensitive exact match against the table keys.

        Names are not trimmed: "Bangkok " misses the table and falls through
        to the geocode cache (whose key is trimmed) and, on a cache miss, to
        a live geocoder call.
        """
        if not name:
            return None
        return self._by_lower.get(name.lower())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._entries)


# Loaded once per process
_province_table: StaticLocationTable | None = None


def load_province_table() -> StaticLocationTable:
    """Get or create the process-wide province table (cached)."""
    global _province_table
    if _province_table is None:
        _province_table = StaticLocationTable(PROVINCE_COORDINATES)
        logger.debug(f"Loaded province table with {len(_province_table)} entries")
    return _province_table


class GeocodeCache:
    """
    Thread-safe memo of normalized query -> Resolved | Unresolved.

    No eviction, no TTL. The key space (province names) is small in practice.
    Concurrent misses for the same key may each store a result; the last
    write wins.
    """

    def __init__(self) -> None:
        self._entries: dict[str, GeocodeOutcome] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> GeocodeOutcome | None:
        """Return the cached outcome, or None if the key was never stored."""
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, value: GeocodeOutcome) -> None:
        if not isinstance(value, (Resolved, Unresolved)):
            raise TypeError(f"Cannot cache {type(value).__name__}; expected Resolved or Unresolved")
        with self._lock:
            self._entries[key] = value

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


# Module-level cache for runtime lookups
_geocode_cache = GeocodeCache()


def get_default_cache() -> GeocodeCache:
    """Return the process-wide geocode cache."""
    return _geocode_cache


def clear_cache() -> None:
    """Clear the process-wide geocode cache."""
    _geocode_cache.clear()
