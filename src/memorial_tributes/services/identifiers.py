"""Record identifier and timestamp helpers."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(tz=UTC)


def format_timestamp(moment: datetime) -> str:
    """Format an instant as ISO-8601 UTC with milliseconds and a Z suffix."""
    return (
        moment.astimezone(UTC)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def new_token_id() -> str:
    """Return a random unique identifier for client-created records."""
    return str(uuid4())


@dataclass
class TimestampIdFactory:
    """Millisecond timestamp identifiers that never repeat or go backwards."""

    clock: Clock = utc_now
    _last: int = 0

    def __call__(self) -> str:
        value = int(self.clock().timestamp() * 1000)
        if value <= self._last:
            value = self._last + 1
        self._last = value
        return str(value)


def id_factory_for(scheme: str) -> IdFactory:
    """Return the identifier factory configured for a deployment."""
    if scheme == "token":
        return new_token_id
    if scheme == "timestamp":
        return TimestampIdFactory()
    raise ValueError(f"Unknown id scheme: {scheme}")
