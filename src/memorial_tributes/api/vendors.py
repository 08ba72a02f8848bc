"""Vendor listing API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from memorial_tributes.api.dependencies import acting_user
from memorial_tributes.domain.vendors import VENDOR_CATEGORIES

if TYPE_CHECKING:
    from memorial_tributes.containers import AppContainer

router = APIRouter(prefix="/api/vendor", tags=["vendors"])


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Not found"})


@router.get("/categories")
async def list_categories() -> dict[str, list[str]]:
    """Return the selectable listing categories."""
    return {"categories": list(VENDOR_CATEGORIES)}


@router.get("/listings")
async def list_listings(
    request: Request, active_only: bool = False
) -> list[dict[str, object]]:
    """Return vendor listings."""
    container: AppContainer = request.app.state.container
    listings = container.vendor_service.list_listings(active_only=active_only)
    return [listing.to_record() for listing in listings]


@router.post("/listings")
async def create_listing(
    request: Request,
    payload: dict[str, Any] = Body(...),
    user_id: str | None = Depends(acting_user),
) -> dict[str, object]:
    """Create a vendor listing."""
    container: AppContainer = request.app.state.container
    listing = container.vendor_service.create_listing(payload, created_by=user_id)
    return listing.to_record()


@router.get("/listings/{listing_id}", response_model=None)
async def get_listing(
    listing_id: str, request: Request
) -> dict[str, object] | JSONResponse:
    """Return one vendor listing."""
    container: AppContainer = request.app.state.container
    listing = container.vendor_service.get_listing(listing_id)
    if listing is None:
        return _not_found()
    return listing.to_record()


@router.put("/listings/{listing_id}", response_model=None)
async def update_listing(
    listing_id: str,
    request: Request,
    payload: dict[str, Any] = Body(...),
) -> dict[str, object] | JSONResponse:
    """Apply a partial update to a vendor listing."""
    container: AppContainer = request.app.state.container
    listing = container.vendor_service.update_listing(listing_id, payload)
    if listing is None:
        return _not_found()
    return listing.to_record()


@router.delete("/listings/{listing_id}", response_model=None)
async def delete_listing(
    listing_id: str, request: Request
) -> dict[str, bool] | JSONResponse:
    """Delete a vendor listing."""
    container: AppContainer = request.app.state.container
    if not container.vendor_service.delete_listing(listing_id):
        return _not_found()
    return {"success": True}
