"""In-process vendor listing repository."""

from dataclasses import dataclass, field

from memorial_tributes.domain.vendors import VendorListing
from memorial_tributes.services.vendors import VendorListingRepository


@dataclass
class InMemoryVendorListingRepository(VendorListingRepository):
    """Vendor listings kept in insertion order, reset on restart."""

    listings: dict[str, VendorListing] = field(default_factory=dict)

    def list_listings(self) -> list[VendorListing]:
        return list(self.listings.values())

    def get_listing(self, listing_id: str) -> VendorListing | None:
        return self.listings.get(listing_id)

    def put_listing(self, listing: VendorListing) -> None:
        self.listings[listing.id] = listing

    def delete_listing(self, listing_id: str) -> bool:
        return self.listings.pop(listing_id, None) is not None
