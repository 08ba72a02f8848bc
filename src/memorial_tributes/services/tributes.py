"""Tribute persistence interface and repository operations."""

import logging
from dataclasses import dataclass
from typing import Protocol

from memorial_tributes.domain.compat import upgrade_record
from memorial_tributes.domain.storage import LoadResult
from memorial_tributes.domain.tributes import RSVP, FuneralDetails, Tribute, upsert_rsvp
from memorial_tributes.services.identifiers import (
    Clock,
    IdFactory,
    format_timestamp,
    new_token_id,
    utc_now,
)

logger = logging.getLogger(__name__)


class TributeStore(Protocol):
    """Whole-collection persistence for tributes."""

    def load(self) -> LoadResult:
        """Return the stored collection or the reason it is unusable."""

    def load_all(self) -> list[Tribute]:
        """Return the stored collection, degrading instead of raising."""

    def save_all(self, tributes: list[Tribute]) -> None:
        """Overwrite the stored collection; failures are logged, not raised."""


@dataclass
class TributeRepository:
    """CRUD and RSVP operations over a whole-collection store."""

    store: TributeStore
    id_factory: IdFactory = new_token_id
    clock: Clock = utc_now

    def get_all(self) -> list[Tribute]:
        """Return every stored tribute."""
        return self.store.load_all()

    def get_by_id(self, tribute_id: str) -> Tribute | None:
        """Return the tribute with the given id, if present."""
        for tribute in self.get_all():
            if tribute.id == tribute_id:
                return tribute
        return None

    def list_by_owner(self, user_id: str) -> list[Tribute]:
        """Return tributes created by a user."""
        return [tribute for tribute in self.get_all() if tribute.created_by == user_id]

    def save(self, tribute: Tribute) -> Tribute:
        """Insert a new tribute or merge it over the stored one with the same id.

        Only fields explicitly set on ``tribute`` overwrite the stored record,
        and the stored owner is kept when the incoming record has none.
        """
        tributes = self.store.load_all()
        index = _index_of(tributes, tribute.id)
        if index is None:
            stored = tribute
            tributes.append(stored)
        else:
            changes = tribute.model_dump(mode="json", by_alias=True, exclude_unset=True)
            stored = _merge(tributes[index], changes)
            tributes[index] = stored
        self.store.save_all(tributes)
        return stored

    def create(
        self, payload: dict[str, object], created_by: str | None = None
    ) -> Tribute:
        """Create a tribute with a fresh id and creation timestamp."""
        record = {
            **upgrade_record(_wire_keys(payload)),
            "id": self.id_factory(),
            "createdAt": format_timestamp(self.clock()),
        }
        if created_by:
            record["createdBy"] = created_by
        tribute = Tribute.model_validate(record)
        tributes = self.store.load_all()
        tributes.append(tribute)
        self.store.save_all(tributes)
        return tribute

    def update(self, tribute_id: str, changes: dict[str, object]) -> Tribute | None:
        """Shallow-merge a partial payload into a stored tribute."""
        tributes = self.store.load_all()
        index = _index_of(tributes, tribute_id)
        if index is None:
            return None
        updated = _merge(tributes[index], _wire_keys(changes))
        tributes[index] = updated
        self.store.save_all(tributes)
        return updated

    def delete(self, tribute_id: str) -> bool:
        """Remove a tribute, returning whether anything was removed."""
        tributes = self.store.load_all()
        remaining = [tribute for tribute in tributes if tribute.id != tribute_id]
        if len(remaining) == len(tributes):
            return False
        self.store.save_all(remaining)
        return True

    def add_rsvp(self, tribute_id: str, name: str, attending: bool) -> Tribute | None:
        """Record an RSVP, replacing any earlier response under the same name.

        Does nothing when the tribute does not exist.
        """
        tributes = self.store.load_all()
        index = _index_of(tributes, tribute_id)
        if index is None:
            logger.info(
                "Ignoring RSVP for unknown tribute", extra={"tribute_id": tribute_id}
            )
            return None
        tribute = tributes[index]
        details = tribute.funeral_details or FuneralDetails()
        rsvp = RSVP(
            name=name,
            attending=attending,
            timestamp=format_timestamp(self.clock()),
        )
        details = details.model_copy(
            update={"rsvp_list": upsert_rsvp(details.rsvp_list, rsvp)}
        )
        updated = tribute.model_copy(update={"funeral_details": details})
        tributes[index] = updated
        self.store.save_all(tributes)
        return updated


def _index_of(tributes: list[Tribute], tribute_id: str) -> int | None:
    for index, tribute in enumerate(tributes):
        if tribute.id == tribute_id:
            return index
    return None


def _merge(existing: Tribute, changes: dict[str, object]) -> Tribute:
    """Overlay camelCase changes on a stored tribute, keeping id and owner.

    Legacy keys in ``changes`` are mapped before the overlay, so they replace
    the stored values they stand for.
    """
    current = existing.to_record()
    incoming = upgrade_record(changes)
    details = incoming.get("funeralDetails")
    if "funeralDetails" not in changes and isinstance(details, dict):
        stored_details = current.get("funeralDetails")
        if isinstance(stored_details, dict):
            incoming["funeralDetails"] = {**stored_details, **details}
    merged = {**current, **incoming, "id": existing.id}
    if merged.get("createdBy") is None and existing.created_by is not None:
        merged["createdBy"] = existing.created_by
    return Tribute.model_validate(merged)


def _wire_keys(payload: dict[str, object]) -> dict[str, object]:
    """Rename snake_case field names to their camelCase wire aliases."""
    fields = Tribute.model_fields
    return {
        (fields[key].alias or key) if key in fields else key: value
        for key, value in payload.items()
    }
