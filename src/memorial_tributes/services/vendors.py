"""Services for vendor listings."""

from dataclasses import dataclass
from typing import Protocol

from memorial_tributes.domain.vendors import VENDOR_CATEGORIES, VendorListing
from memorial_tributes.services.identifiers import IdFactory, new_token_id


class VendorValidationError(ValueError):
    """Raised when a listing payload is incomplete or invalid."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(" ".join(errors))
        self.errors = errors


class VendorListingRepository(Protocol):
    """Persistence interface for vendor listings."""

    def list_listings(self) -> list[VendorListing]:
        """Return all listings."""

    def get_listing(self, listing_id: str) -> VendorListing | None:
        """Return a listing by id, if present."""

    def put_listing(self, listing: VendorListing) -> None:
        """Insert or replace a listing."""

    def delete_listing(self, listing_id: str) -> bool:
        """Remove a listing, returning whether it existed."""


@dataclass
class VendorListingService:
    """Application service for the vendor listing create/edit flow."""

    repository: VendorListingRepository
    id_factory: IdFactory = new_token_id

    def list_listings(self, active_only: bool = False) -> list[VendorListing]:
        """Return listings, optionally only the active ones."""
        listings = self.repository.list_listings()
        if active_only:
            return [listing for listing in listings if listing.active]
        return listings

    def list_by_owner(self, user_id: str) -> list[VendorListing]:
        """Return listings created by a user."""
        return [
            listing
            for listing in self.repository.list_listings()
            if listing.created_by == user_id
        ]

    def get_listing(self, listing_id: str) -> VendorListing | None:
        return self.repository.get_listing(listing_id)

    def create_listing(
        self, payload: dict[str, object], created_by: str | None = None
    ) -> VendorListing:
        """Validate and store a new listing."""
        values = {
            "description": "",
            "active": True,
            **_clean(payload),
            "id": self.id_factory(),
            "createdBy": created_by,
        }
        listing = _build(values)
        self.repository.put_listing(listing)
        return listing

    def update_listing(
        self, listing_id: str, changes: dict[str, object]
    ) -> VendorListing | None:
        """Apply a partial update to an existing listing."""
        current = self.repository.get_listing(listing_id)
        if current is None:
            return None
        values = {
            **current.to_record(),
            **_clean(changes),
            "id": current.id,
            "createdBy": current.created_by,
        }
        listing = _build(values)
        self.repository.put_listing(listing)
        return listing

    def delete_listing(self, listing_id: str) -> bool:
        return self.repository.delete_listing(listing_id)


def validate_listing(values: dict[str, object]) -> list[str]:
    """Return validation messages for listing form values."""
    errors = []
    for key, label in (("title", "Title"), ("location", "Location")):
        if not _text(values.get(key)):
            errors.append(f"{label} is required.")
    category = _text(values.get("category"))
    if not category:
        errors.append("Category is required.")
    elif category not in VENDOR_CATEGORIES:
        errors.append(f"Unknown category: {category}.")
    if not isinstance(values.get("active", True), bool):
        errors.append("Active must be true or false.")
    return errors


def _build(values: dict[str, object]) -> VendorListing:
    errors = validate_listing(values)
    if errors:
        raise VendorValidationError(errors)
    return VendorListing.model_validate(values)


def _clean(payload: dict[str, object]) -> dict[str, object]:
    allowed = {"title", "category", "location", "description", "active"}
    return {
        key: value.strip() if isinstance(value, str) else value
        for key, value in payload.items()
        if key in allowed
    }


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""
