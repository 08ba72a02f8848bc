"""Supabase-backed key/value storage slot."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from memorial_tributes.adapters.storage import KeyValueStorage


@dataclass
class SupabaseStorage(KeyValueStorage):
    """Supabase implementation storing each key as one row."""

    client: Client
    table: str = "kv_store"

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Insert or replace the row for a key."""
        self.client.table(self.table).upsert(
            {
                "key": key,
                "value": value,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
