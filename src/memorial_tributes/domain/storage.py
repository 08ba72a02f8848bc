"""Typed outcomes of reading the stored tribute collection."""

from dataclasses import dataclass
from enum import StrEnum

from memorial_tributes.domain.tributes import Tribute


class LoadFailure(StrEnum):
    """Why a stored collection could not be returned."""

    EMPTY = "empty"
    CORRUPTED = "corrupted"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class LoadOk:
    """Stored collection parsed successfully."""

    tributes: list[Tribute]


@dataclass(frozen=True)
class LoadError:
    """Stored collection missing or unusable."""

    reason: LoadFailure
    detail: str | None = None


LoadResult = LoadOk | LoadError
