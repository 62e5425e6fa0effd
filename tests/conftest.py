"""Shared fixtures."""

from datetime import datetime, timedelta

import pytest

from app.caching import CacheAsideReader, MemoryCacheStore
from app.repositories import (
    AddressRepository,
    AdminRepository,
    CategoryRepository,
    CouponRepository,
    Database,
    ProductRepository,
    UserRepository,
)


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeDateTimeClock:
    """Wall clock for the DuckDB store."""

    def __init__(self, start: datetime = datetime(2026, 1, 15, 12, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return MemoryCacheStore(clock=clock)


@pytest.fixture
def reader(store):
    return CacheAsideReader(store)


@pytest.fixture
def db():
    database = Database(":memory:")
    yield database
    database.close()


@pytest.fixture
def categories(db, reader):
    return CategoryRepository(db, reader)


@pytest.fixture
def products(db, reader):
    return ProductRepository(db, reader)


@pytest.fixture
def coupons(db, reader):
    return CouponRepository(db, reader)


@pytest.fixture
def admin(db, reader):
    return AdminRepository(db, reader)


@pytest.fixture
def users(db, reader):
    return UserRepository(db, reader)


@pytest.fixture
def addresses(db, reader):
    return AddressRepository(db, reader)


@pytest.fixture
def wall_clock():
    return FakeDateTimeClock()
