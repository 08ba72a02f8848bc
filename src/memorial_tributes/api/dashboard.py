"""Dashboard endpoint for the acting user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from memorial_tributes.api.dependencies import require_user

if TYPE_CHECKING:
    from memorial_tributes.containers import AppContainer

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard")
async def dashboard(
    request: Request, user_id: str = Depends(require_user)
) -> dict[str, object]:
    """Return the acting user's tributes and vendor listings."""
    container: AppContainer = request.app.state.container
    return container.dashboard_service.summary(user_id)
