"""Key/value storage slots for serialized collections."""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


class KeyValueStorage(Protocol):
    """String storage addressed by key, modelled on browser local storage."""

    def get_item(self, key: str) -> str | None:
        """Return the stored string for a key, if any."""

    def set_item(self, key: str, value: str) -> None:
        """Replace the stored string for a key."""


@dataclass
class InMemoryStorage(KeyValueStorage):
    """Process-local storage, lost on restart."""

    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value


@dataclass
class FileStorage(KeyValueStorage):
    """Storage keeping one UTF-8 file per key inside a directory."""

    directory: Path

    def get_item(self, key: str) -> str | None:
        """Return the file contents for a key, or None when never written."""
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        """Write the value to a temporary file and swap it into place."""
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self._path(key)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{key}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, target)
        except Exception:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
