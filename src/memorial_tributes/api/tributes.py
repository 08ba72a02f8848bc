"""Tribute API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from memorial_tributes.api.dependencies import acting_user
from memorial_tributes.services.forms import (
    NAME_REQUIRED,
    RsvpForm,
    TributeValidationError,
)

if TYPE_CHECKING:
    from memorial_tributes.containers import AppContainer

router = APIRouter(prefix="/api/tributes", tags=["tributes"])


class RsvpRequest(BaseModel):
    """RSVP submission body."""

    name: str = ""
    attending: bool = True


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "Not found"})


def _require_name(payload: dict[str, Any]) -> None:
    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise TributeValidationError([NAME_REQUIRED])


@router.get("")
async def list_tributes(request: Request) -> list[dict[str, object]]:
    """Return every tribute."""
    container: AppContainer = request.app.state.container
    return [tribute.to_record() for tribute in container.tribute_repository.get_all()]


@router.post("")
async def create_tribute(
    request: Request,
    payload: dict[str, Any] = Body(...),
    user_id: str | None = Depends(acting_user),
) -> dict[str, object]:
    """Create a tribute; the server assigns ``id`` and ``createdAt``."""
    _require_name(payload)
    container: AppContainer = request.app.state.container
    tribute = container.tribute_repository.create(payload, created_by=user_id)
    return tribute.to_record()


@router.get("/{tribute_id}", response_model=None)
async def get_tribute(
    tribute_id: str, request: Request
) -> dict[str, object] | JSONResponse:
    """Return one tribute."""
    container: AppContainer = request.app.state.container
    tribute = container.tribute_repository.get_by_id(tribute_id)
    if tribute is None:
        return _not_found()
    return tribute.to_record()


@router.put("/{tribute_id}", response_model=None)
async def update_tribute(
    tribute_id: str,
    request: Request,
    payload: dict[str, Any] = Body(...),
) -> dict[str, object] | JSONResponse:
    """Shallow-merge a partial tribute into the stored one."""
    if "name" in payload:
        _require_name(payload)
    container: AppContainer = request.app.state.container
    tribute = container.tribute_repository.update(tribute_id, payload)
    if tribute is None:
        return _not_found()
    return tribute.to_record()


@router.delete("/{tribute_id}")
async def delete_tribute(tribute_id: str, request: Request) -> dict[str, bool]:
    """Delete a tribute; succeeds whether or not it existed."""
    container: AppContainer = request.app.state.container
    container.tribute_repository.delete(tribute_id)
    return {"success": True}


@router.post("/{tribute_id}/rsvp", response_model=None)
async def submit_rsvp(
    tribute_id: str, body: RsvpRequest, request: Request
) -> dict[str, object] | JSONResponse:
    """Record or replace an RSVP for the tribute's funeral."""
    container: AppContainer = request.app.state.container
    form = RsvpForm(name=body.name, attending=body.attending)
    tribute = form.submit(container.tribute_repository, tribute_id)
    if tribute is None:
        return _not_found()
    return tribute.to_record()
