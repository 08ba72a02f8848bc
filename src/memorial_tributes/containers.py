"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from memorial_tributes.adapters.memory_tribute_store import InMemoryTributeStore
from memorial_tributes.adapters.memory_vendor_repository import (
    InMemoryVendorListingRepository,
)
from memorial_tributes.adapters.storage import FileStorage
from memorial_tributes.adapters.storage_tribute_store import StorageTributeStore
from memorial_tributes.adapters.supabase_storage import SupabaseStorage
from memorial_tributes.adapters.tribute_api_client import HttpxTributeApiClient
from memorial_tributes.config import Settings, parse_storage_backend
from memorial_tributes.services.dashboard import DashboardService
from memorial_tributes.services.identifiers import id_factory_for
from memorial_tributes.services.tributes import TributeRepository, TributeStore
from memorial_tributes.services.vendors import VendorListingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tribute_repository: TributeRepository
    vendor_service: VendorListingService
    dashboard_service: DashboardService
    tribute_api_client: HttpxTributeApiClient
    close_resources: Callable[[], Awaitable[None]]


def build_tribute_store(settings: Settings) -> TributeStore:
    """Create the tribute store selected by ``storage_backend``."""
    backend = parse_storage_backend(settings.storage_backend)
    if backend == "memory":
        return InMemoryTributeStore()
    if backend == "none":
        return StorageTributeStore(None, key=settings.storage_key)
    if backend == "file":
        storage = FileStorage(Path(settings.storage_dir))
    else:
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase storage requires SUPABASE_URL and key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        storage = SupabaseStorage(client, table=settings.supabase_table)
    return StorageTributeStore(storage, key=settings.storage_key)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    id_factory = id_factory_for(resolved_settings.id_scheme)
    tribute_repository = TributeRepository(
        store=build_tribute_store(resolved_settings),
        id_factory=id_factory,
    )
    vendor_service = VendorListingService(
        repository=InMemoryVendorListingRepository(),
        id_factory=id_factory,
    )
    dashboard_service = DashboardService(
        tribute_repository=tribute_repository,
        vendor_service=vendor_service,
    )
    tribute_api_client = HttpxTributeApiClient.create(resolved_settings.api_base_url)

    async def close_resources() -> None:
        await tribute_api_client.close()

    return AppContainer(
        settings=resolved_settings,
        tribute_repository=tribute_repository,
        vendor_service=vendor_service,
        dashboard_service=dashboard_service,
        tribute_api_client=tribute_api_client,
        close_resources=close_resources,
    )
