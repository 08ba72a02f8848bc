"""Domain models for memorial tributes."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_RECORD_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="allow",
    frozen=True,
)


class RSVP(BaseModel):
    """Attendance response for a tribute's funeral, keyed by attendee name."""

    model_config = _RECORD_CONFIG

    name: str = Field(min_length=1)
    attending: bool
    timestamp: str


class FuneralDetails(BaseModel):
    """Funeral event information and collected RSVPs."""

    model_config = _RECORD_CONFIG

    rsvp_enabled: bool = False
    date_time: str | None = None
    location: str | None = None
    rsvp_link: str | None = None
    notes: str | None = None
    rsvp_list: list[RSVP] = Field(default_factory=list)


class Tribute(BaseModel):
    """Memorial record for one deceased individual."""

    model_config = _RECORD_CONFIG

    id: str
    name: str
    birth_date: str | None = None
    death_date: str | None = None
    bio: str | None = None
    story: str | None = None
    obituary_text: str | None = None
    quote: str | None = None
    candle_message: str | None = None
    photo_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_by: str | None = None
    created_at: str | None = None
    funeral_details: FuneralDetails | None = None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Tribute):
            return self.id == other.id
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.id)

    def to_record(self) -> dict[str, object]:
        """Return the camelCase JSON shape used in storage and over HTTP."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def upsert_rsvp(rsvp_list: list[RSVP], rsvp: RSVP) -> list[RSVP]:
    """Return a copy of the list with the RSVP replacing any entry of the same name.

    A repeat submission keeps the position of the original entry.
    """
    updated = list(rsvp_list)
    for index, existing in enumerate(updated):
        if existing.name == rsvp.name:
            updated[index] = rsvp
            return updated
    updated.append(rsvp)
    return updated


def seed_tributes() -> list[Tribute]:
    """Return the fallback collection used when nothing valid is stored."""
    return [
        Tribute(
            id="1",
            name="Jane Doe",
            birth_date="1950-01-01",
            death_date="2024-05-12",
            bio="A kind and loving person remembered forever.",
            photo_url="/placeholder.jpg",
            created_by="mock-user-1",
        ),
        Tribute(
            id="2",
            name="John Smith",
            birth_date="1945-03-22",
            death_date="2023-11-04",
            bio="A life well lived.",
            photo_url="/placeholder.jpg",
            created_by="mock-user-2",
        ),
    ]
