"""Domain models for vendor listings."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

VENDOR_CATEGORIES: tuple[str, ...] = (
    "Funeral Home",
    "Crematorium",
    "Florist",
    "Grief Counselor",
    "Estate Lawyer",
    "Memorial Products",
    "Event Venue",
    "Catering",
    "Transportation",
)


class VendorListing(BaseModel):
    """A vendor's public listing for memorial-related services."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    id: str
    title: str
    category: str
    location: str
    description: str = ""
    active: bool = True
    created_by: str | None = None

    def to_record(self) -> dict[str, object]:
        """Return the camelCase JSON shape used over HTTP."""
        return self.model_dump(mode="json", by_alias=True)
