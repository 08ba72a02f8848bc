"""HTTP client for the tribute API."""

import logging
from dataclasses import dataclass

import httpx

from memorial_tributes.domain.compat import upgrade_record
from memorial_tributes.domain.tributes import (
    RSVP,
    FuneralDetails,
    Tribute,
    seed_tributes,
    upsert_rsvp,
)
from memorial_tributes.services.identifiers import format_timestamp, utc_now

logger = logging.getLogger(__name__)

API_BASE_PATH = "/api/tributes"


@dataclass
class HttpxTributeApiClient:
    """HTTPX-backed client; failures are logged and reported as None."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxTributeApiClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url.rstrip("/"), http_client=httpx.AsyncClient())

    async def get_tributes(self) -> list[Tribute]:
        """Return all tributes, or the seed collection when the API fails."""
        try:
            response = await self.http_client.get(self._url(), timeout=15)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, list):
                return seed_tributes()
            return [_parse_tribute(row) for row in data]
        except (httpx.HTTPError, ValueError):
            logger.exception("Error fetching tributes")
            return seed_tributes()

    async def get_tribute(self, tribute_id: str) -> Tribute | None:
        """Return one tribute, or None when missing or on failure."""
        try:
            response = await self.http_client.get(self._url(tribute_id), timeout=15)
            response.raise_for_status()
            return _parse_tribute(response.json())
        except (httpx.HTTPError, ValueError):
            logger.exception("Error fetching tribute", extra={"tribute_id": tribute_id})
            return None

    async def create_tribute(self, payload: dict[str, object]) -> Tribute | None:
        """POST a new tribute and return the server's record."""
        body = {key: value for key, value in payload.items() if key != "id"}
        return await self._send("POST", self._url(), body)

    async def save_tribute(self, tribute: Tribute) -> Tribute | None:
        """PUT a tribute over the stored one with the same id."""
        return await self._send("PUT", self._url(tribute.id), tribute.to_record())

    async def add_rsvp(
        self, tribute_id: str, name: str, attending: bool
    ) -> Tribute | None:
        """Fetch a tribute, upsert the RSVP locally and write it back."""
        tribute = await self.get_tribute(tribute_id)
        if tribute is None:
            return None
        details = tribute.funeral_details or FuneralDetails()
        rsvp = RSVP(
            name=name, attending=attending, timestamp=format_timestamp(utc_now())
        )
        details = details.model_copy(
            update={"rsvp_list": upsert_rsvp(details.rsvp_list, rsvp)}
        )
        return await self.save_tribute(
            tribute.model_copy(update={"funeral_details": details})
        )

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(
        self, method: str, url: str, body: dict[str, object]
    ) -> Tribute | None:
        try:
            response = await self.http_client.request(
                method, url, json=body, timeout=15
            )
            response.raise_for_status()
            return _parse_tribute(response.json())
        except (httpx.HTTPError, ValueError):
            action = "create" if method == "POST" else "update"
            logger.exception(f"Failed to {action} tribute", extra={"url": url})
            return None

    def _url(self, tribute_id: str | None = None) -> str:
        url = f"{self.base_url}{API_BASE_PATH}"
        return f"{url}/{tribute_id}" if tribute_id else url


def _parse_tribute(row: object) -> Tribute:
    if not isinstance(row, dict):
        raise ValueError("Tribute payload is not an object")
    return Tribute.model_validate(upgrade_record(row))
