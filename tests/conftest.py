"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import pytest

from memorial_tributes.adapters.memory_tribute_store import InMemoryTributeStore
from memorial_tributes.adapters.memory_vendor_repository import (
    InMemoryVendorListingRepository,
)
from memorial_tributes.adapters.storage import InMemoryStorage
from memorial_tributes.adapters.storage_tribute_store import StorageTributeStore
from memorial_tributes.adapters.tribute_api_client import HttpxTributeApiClient
from memorial_tributes.config import Settings
from memorial_tributes.containers import AppContainer
from memorial_tributes.services.dashboard import DashboardService
from memorial_tributes.services.identifiers import TimestampIdFactory
from memorial_tributes.services.tributes import TributeRepository
from memorial_tributes.services.vendors import VendorListingService

START = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@dataclass
class FakeClock:
    """Clock that advances by a fixed step on every call."""

    current: datetime = START
    step: timedelta = timedelta(seconds=1)

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        return now


@dataclass
class FailingStorage:
    """Storage whose reads and/or writes raise OSError."""

    value: str | None = None
    fail_reads: bool = False
    fail_writes: bool = True
    writes: list[str] = field(default_factory=list)

    def get_item(self, key: str) -> str | None:
        if self.fail_reads:
            raise OSError("disk unavailable")
        return self.value

    def set_item(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("disk full")
        self.writes.append(value)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        storage_backend="memory",
        id_scheme="timestamp",
        environment="test",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage: InMemoryStorage) -> StorageTributeStore:
    return StorageTributeStore(storage)


@pytest.fixture
def repository(store: StorageTributeStore, clock: FakeClock) -> TributeRepository:
    return TributeRepository(store=store, clock=clock)


@pytest.fixture
def vendor_service() -> VendorListingService:
    return VendorListingService(InMemoryVendorListingRepository())


@pytest.fixture
def container(settings: Settings, clock: FakeClock) -> AppContainer:
    tribute_repository = TributeRepository(
        store=InMemoryTributeStore(),
        id_factory=TimestampIdFactory(clock=clock),
        clock=clock,
    )
    vendor_service = VendorListingService(InMemoryVendorListingRepository())
    api_client = HttpxTributeApiClient.create(settings.api_base_url)
    return AppContainer(
        settings=settings,
        tribute_repository=tribute_repository,
        vendor_service=vendor_service,
        dashboard_service=DashboardService(
            tribute_repository=tribute_repository,
            vendor_service=vendor_service,
        ),
        tribute_api_client=api_client,
        close_resources=api_client.close,
    )
