"""Shared FastAPI dependencies."""

from fastapi import Depends, Header, HTTPException, status


async def acting_user(x_user_id: str | None = Header(default=None)) -> str | None:
    """Return the user id forwarded by the identity provider, if any."""
    if x_user_id is None:
        return None
    return x_user_id.strip() or None


async def require_user(user_id: str | None = Depends(acting_user)) -> str:
    """Ensure the request carries an acting user."""
    if user_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user_id
