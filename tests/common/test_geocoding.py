"""Tests for common.geocoding module."""

import threading
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

import pytest

from common.config import PROVINCE_COORDINATES
from common.geocoding import (
    GeocodeCache,
    StaticLocationTable,
    clear_cache,
    get_default_cache,
    load_province_table,
    normalize_query,
)
from common.types import NOT_ATTEMPTED, UNRESOLVED, Coordinate, Resolved


class TestNormalizeQuery:
    """Tests for normalize_query function."""

    def test_trims_and_lowercases(self):
        assert normalize_query("  Chiang Mai \n") == "chiang mai"

    def test_inner_whitespace_untouched(self):
        assert normalize_query("Chiang  Mai") == "chiang  mai"


class TestStaticLocationTable:
    """Tests for the static province table."""

    def test_lookup_is_case_insensitive(self):
        table = StaticLocationTable({"Bangkok": (13.75, 100.5)})
        assert table.lookup("bangkok") == Coordinate(13.75, 100.5)
        assert table.lookup("BANGKOK") == Coordinate(13.75, 100.5)

    def test_lookup_is_exact_match(self):
        """Partial names and surrounding whitespace do not match."""
        table = StaticLocationTable({"Bangkok": (13.75, 100.5)})
        assert table.lookup("Bang") is None
        assert table.lookup(" Bangkok") is None

    def test_lookup_empty_name(self):
        table = StaticLocationTable({"Bangkok": (13.75, 100.5)})
        assert table.lookup("") is None

    def test_accepts_coordinate_values(self):
        table = StaticLocationTable({"Phuket": Coordinate(7.88, 98.39)})
        assert table.lookup("phuket") == Coordinate(7.88, 98.39)

    def test_entries_are_read_only(self):
        table = StaticLocationTable({"Bangkok": (13.75, 100.5)})
        assert isinstance(table.entries, MappingProxyType)
        with pytest.raises(TypeError):
            table.entries["Nan"] = Coordinate(18.77, 100.77)

    def test_source_mapping_changes_do_not_leak(self):
        source = {"Bangkok": (13.75, 100.5)}
        table = StaticLocationTable(source)
        source["Nan"] = (18.77, 100.77)
        assert "Nan" not in table
        assert len(table) == 1

    def test_contains(self):
        table = StaticLocationTable({"Bangkok": (13.75, 100.5)})
        assert "bangkok" in table
        assert "Atlantis" not in table
        assert 42 not in table


class TestProvinceTable:
    """Tests for the process-wide province table."""

    def test_loads_all_provinces(self):
        table = load_province_table()
        assert len(table) == len(PROVINCE_COORDINATES) == 77

    def test_loaded_once(self):
        assert load_province_table() is load_province_table()

    def test_all_coordinates_valid(self):
        for name, coord in load_province_table().entries.items():
            assert coord.is_valid, name

    def test_bangkok_present(self):
        coord = load_province_table().lookup("Bangkok")
        assert coord is not None
        assert coord.latitude == pytest.approx(13.75, abs=0.05)
        assert coord.longitude == pytest.approx(100.5, abs=0.05)


class TestGeocodeCache:
    """Tests for GeocodeCache."""

    def test_missing_key_returns_none(self):
        assert GeocodeCache().get("nowhere") is None

    def test_stores_resolved(self):
        cache = GeocodeCache()
        outcome = Resolved(Coordinate(18.79, 98.98))
        cache.put("chiang mai", outcome)
        assert cache.get("chiang mai") == outcome
        assert "chiang mai" in cache

    def test_stores_unresolved(self):
        """Unresolved is distinguishable from a missing key."""
        cache = GeocodeCache()
        cache.put("atlantis", UNRESOLVED)
        assert cache.get("atlantis") == UNRESOLVED
        assert len(cache) == 1

    def test_last_write_wins(self):
        cache = GeocodeCache()
        cache.put("k", UNRESOLVED)
        cache.put("k", Resolved(Coordinate(1.0, 2.0)))
        assert cache.get("k") == Resolved(Coordinate(1.0, 2.0))

    def test_rejects_not_attempted(self):
        with pytest.raises(TypeError):
            GeocodeCache().put("k", NOT_ATTEMPTED)

    def test_clear(self):
        cache = GeocodeCache()
        cache.put("k", UNRESOLVED)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("k") is None

    def test_concurrent_puts_and_gets(self):
        """Many threads writing distinct keys all land in the cache."""
        cache = GeocodeCache()
        barrier = threading.Barrier(8)

        def worker(n: int) -> None:
            barrier.wait()
            for i in range(200):
                key = f"place-{n}-{i}"
                cache.put(key, Resolved(Coordinate(float(n), float(i % 180))))
                assert cache.get(key) is not None

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(worker, range(8)))

        assert len(cache) == 8 * 200


class TestDefaultCache:
    """Tests for the process-wide cache helpers."""

    def test_default_cache_is_shared(self):
        assert get_default_cache() is get_default_cache()

    def test_clear_cache(self):
        get_default_cache().put("somewhere", UNRESOLVED)
        clear_cache()
        assert get_default_cache().get("somewhere") is None
