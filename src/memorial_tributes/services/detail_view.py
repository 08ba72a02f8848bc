"""State for the tabbed tribute detail page."""

from dataclasses import dataclass, field
from datetime import date

from memorial_tributes.domain.tributes import Tribute
from memorial_tributes.services.forms import (
    RSVP_CLOSED,
    RsvpForm,
    TributeDraft,
    TributeValidationError,
)
from memorial_tributes.services.tributes import TributeRepository

TABS: tuple[str, ...] = ("tribute", "obituary", "details")


@dataclass
class TributeDetailView:
    """Detail page for one tribute with inline editing and RSVP submission.

    Editing is offered only to the viewer who created the tribute. All
    persistence goes through the repository.
    """

    repository: TributeRepository
    tribute_id: str
    viewer_id: str | None = None
    tribute: Tribute | None = None
    not_found: bool = False
    active_tab: str = TABS[0]
    editing: bool = False
    draft: TributeDraft = field(default_factory=TributeDraft)
    rsvp: RsvpForm = field(default_factory=RsvpForm)
    error: str = ""
    rsvp_error: str = ""

    def load(self) -> None:
        """Fetch the tribute and reset the draft to its stored values."""
        found = self.repository.get_by_id(self.tribute_id)
        self.tribute = found
        self.not_found = found is None
        if found is not None:
            self.draft = TributeDraft.from_tribute(found)

    @property
    def can_edit(self) -> bool:
        return (
            self.tribute is not None
            and self.viewer_id is not None
            and self.tribute.created_by == self.viewer_id
        )

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab}")
        self.active_tab = tab

    def next_tab(self) -> str:
        index = TABS.index(self.active_tab)
        self.active_tab = TABS[(index + 1) % len(TABS)]
        return self.active_tab

    def previous_tab(self) -> str:
        index = TABS.index(self.active_tab)
        self.active_tab = TABS[(index - 1) % len(TABS)]
        return self.active_tab

    def start_edit(self) -> bool:
        """Enter edit mode if the viewer owns the tribute."""
        if not self.can_edit:
            return False
        self.editing = True
        return True

    def change(self, name: str, value: object) -> None:
        """Apply an input change to the draft while editing."""
        if not self.editing:
            raise RuntimeError("Tribute is not being edited")
        self.draft.set_field(name, value)

    def save(self) -> bool:
        """Persist the draft; on validation failure keep editing and set the error."""
        if not self.editing or self.tribute is None:
            return False
        try:
            self.tribute = self.draft.update(self.repository, self.tribute)
        except TributeValidationError as exc:
            self.error = str(exc)
            return False
        self.error = ""
        self.editing = False
        self.draft = TributeDraft.from_tribute(self.tribute)
        return True

    def cancel(self) -> None:
        """Leave edit mode and discard unsaved changes."""
        if self.tribute is not None:
            self.draft = TributeDraft.from_tribute(self.tribute)
        self.error = ""
        self.editing = False

    @property
    def rsvp_open(self) -> bool:
        details = self.tribute.funeral_details if self.tribute else None
        return bool(details and details.rsvp_enabled)

    def submit_rsvp(self) -> bool:
        """Submit the RSVP form and reload the tribute."""
        self.rsvp_error = ""
        if not self.rsvp_open:
            self.rsvp_error = RSVP_CLOSED
            return False
        try:
            self.rsvp.submit(self.repository, self.tribute_id)
        except TributeValidationError as exc:
            self.rsvp_error = str(exc)
            return False
        self.load()
        return True

    def rsvp_lines(self) -> list[str]:
        """Return one display line per RSVP response."""
        details = self.tribute.funeral_details if self.tribute else None
        if not details or not details.rsvp_list:
            return []
        return [
            f"{entry.name} - {'Attending' if entry.attending else 'Not Attending'}"
            for entry in details.rsvp_list
        ]


def format_date(value: str | None) -> str:
    """Format an ISO date as e.g. 'January 1, 1950'."""
    if not value:
        return "Unknown"
    try:
        parsed = date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"
