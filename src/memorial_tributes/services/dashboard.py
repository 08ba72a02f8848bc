"""Dashboard summaries for signed-in users."""

from dataclasses import dataclass

from memorial_tributes.domain.tributes import Tribute
from memorial_tributes.services.tributes import TributeRepository
from memorial_tributes.services.vendors import VendorListingService


@dataclass
class DashboardService:
    """Service assembling a user's tributes and listings."""

    tribute_repository: TributeRepository
    vendor_service: VendorListingService

    def summary(self, user_id: str) -> dict[str, object]:
        """Return the user's tributes with RSVP counts and their listings."""
        tributes = self.tribute_repository.list_by_owner(user_id)
        listings = self.vendor_service.list_by_owner(user_id)
        return {
            "user_id": user_id,
            "tributes": [_serialize_tribute(tribute) for tribute in tributes],
            "vendor_listings": [listing.to_record() for listing in listings],
        }


def _serialize_tribute(tribute: Tribute) -> dict[str, object]:
    rsvps = tribute.funeral_details.rsvp_list if tribute.funeral_details else []
    attending = sum(1 for rsvp in rsvps if rsvp.attending)
    return {
        "id": tribute.id,
        "name": tribute.name,
        "birth_date": tribute.birth_date,
        "death_date": tribute.death_date,
        "rsvp_enabled": bool(
            tribute.funeral_details and tribute.funeral_details.rsvp_enabled
        ),
        "attending": attending,
        "declined": len(rsvps) - attending,
    }
