"""In-process tribute store for the server API."""

from dataclasses import dataclass, field

from memorial_tributes.domain.storage import LoadOk, LoadResult
from memorial_tributes.domain.tributes import Tribute
from memorial_tributes.services.tributes import TributeStore


@dataclass
class InMemoryTributeStore(TributeStore):
    """Server-side array that starts empty and resets on restart."""

    tributes: list[Tribute] = field(default_factory=list)

    def load(self) -> LoadResult:
        return LoadOk(list(self.tributes))

    def load_all(self) -> list[Tribute]:
        return list(self.tributes)

    def save_all(self, tributes: list[Tribute]) -> None:
        self.tributes = list(tributes)
