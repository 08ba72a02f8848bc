"""Tribute collection persisted as one JSON array in a storage slot."""

import json
import logging
from dataclasses import dataclass

from pydantic import TypeAdapter, ValidationError

from memorial_tributes.adapters.storage import KeyValueStorage
from memorial_tributes.domain.compat import upgrade_record
from memorial_tributes.domain.storage import LoadError, LoadFailure, LoadOk, LoadResult
from memorial_tributes.domain.tributes import Tribute, seed_tributes
from memorial_tributes.services.tributes import TributeStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "tributes"

_TRIBUTE_LIST = TypeAdapter(list[Tribute])


@dataclass
class StorageTributeStore(TributeStore):
    """Whole-collection store over a key/value slot.

    ``storage`` is None when no medium exists in the running context; reads
    then return an empty collection and writes do nothing.
    """

    storage: KeyValueStorage | None
    key: str = STORAGE_KEY

    def load(self) -> LoadResult:
        """Read and parse the stored collection."""
        if self.storage is None:
            return LoadError(LoadFailure.UNAVAILABLE, "no storage medium")
        try:
            raw = self.storage.get_item(self.key)
        except Exception as exc:
            logger.exception("Failed to read tributes", extra={"key": self.key})
            return LoadError(LoadFailure.UNAVAILABLE, str(exc))
        if not raw:
            return LoadError(LoadFailure.EMPTY)
        try:
            parsed = json.loads(raw)
        except (ValueError, RecursionError) as exc:
            return LoadError(LoadFailure.CORRUPTED, str(exc))
        if not isinstance(parsed, list):
            return LoadError(LoadFailure.CORRUPTED, "stored value is not an array")
        try:
            records = [
                upgrade_record(item) if isinstance(item, dict) else item
                for item in parsed
            ]
            return LoadOk(_TRIBUTE_LIST.validate_python(records))
        except ValidationError as exc:
            return LoadError(LoadFailure.CORRUPTED, str(exc))

    def load_all(self) -> list[Tribute]:
        """Return the stored collection, the seed when unusable, or [] without a medium."""
        if self.storage is None:
            return []
        result = self.load()
        if isinstance(result, LoadOk):
            return result.tributes
        if result.reason is LoadFailure.CORRUPTED:
            logger.error(
                "Failed to parse stored tributes, using seed data",
                extra={"key": self.key, "detail": result.detail},
            )
        return seed_tributes()

    def save_all(self, tributes: list[Tribute]) -> None:
        """Serialize and overwrite the stored collection."""
        if self.storage is None:
            return
        try:
            payload = json.dumps([tribute.to_record() for tribute in tributes])
            self.storage.set_item(self.key, payload)
        except Exception:
            logger.exception(
                "Failed to save tributes",
                extra={"key": self.key, "count": len(tributes)},
            )
