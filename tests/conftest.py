"""Shared pytest fixtures and utilities for all tests."""

import os

# Must be set before common.metrics is imported anywhere
os.environ.setdefault("OTEL_SDK_DISABLED", "true")

import httpx
import pytest

from common.geocoding import GeocodeCache, StaticLocationTable
from common.types import Coordinate
from coordinate_resolver.core import CoordinateResolver

BANGKOK = Coordinate(latitude=13.75, longitude=100.5)
CHIANG_MAI = Coordinate(latitude=18.79, longitude=98.98)


class FakeGeocoder:
    """Geocoder spy returning canned results and counting calls per place name."""

    def __init__(self, results: dict[str, Coordinate | None] | None = None, raises: Exception | None = None):
        self.results = results or {}
        self.raises = raises
        self.calls: list[str] = []

    def lookup(self, place_name: str) -> Coordinate | None:
        self.calls.append(place_name)
        if self.raises is not None:
            raise self.raises
        return self.results.get(place_name)

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def cache() -> GeocodeCache:
    """Fresh, empty geocode cache per test."""
    return GeocodeCache()


@pytest.fixture
def table() -> StaticLocationTable:
    """Small province table containing only Bangkok."""
    return StaticLocationTable({"Bangkok": (BANGKOK.latitude, BANGKOK.longitude)})


@pytest.fixture
def fake_geocoder() -> FakeGeocoder:
    return FakeGeocoder()


@pytest.fixture
def resolver(table, cache, fake_geocoder) -> CoordinateResolver:
    return CoordinateResolver(table=table, cache=cache, geocoder=fake_geocoder)


@pytest.fixture
def mock_http_client():
    """Build an httpx.Client whose requests are answered by a handler function."""
    clients: list[httpx.Client] = []

    def _factory(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _factory

    for client in clients:
        client.close()
