"""Form state for creating and editing tributes and submitting RSVPs."""

from dataclasses import dataclass, field

from memorial_tributes.domain.compat import LEGACY_FUNERAL_FIELDS
from memorial_tributes.domain.tributes import Tribute
from memorial_tributes.services.tributes import TributeRepository

NAME_REQUIRED = "Name is required."
BIRTH_DATE_REQUIRED = "Birth date is required."
DEATH_DATE_REQUIRED = "Death date is required."
RSVP_NAME_REQUIRED = "Please enter your name before submitting."
RSVP_CLOSED = "RSVPs are not open for this funeral."

_FUNERAL_FORM_FIELDS: dict[str, str] = {
    **LEGACY_FUNERAL_FIELDS,
    "funeralNotes": "notes",
    "rsvpEnabled": "rsvpEnabled",
}
_READ_ONLY_FIELDS = frozenset({"id", "createdBy", "createdAt"})


class TributeValidationError(ValueError):
    """Raised when form input fails validation before reaching persistence."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(" ".join(errors))
        self.errors = errors


def _empty_funeral_details() -> dict[str, object]:
    return {
        "rsvpEnabled": False,
        "dateTime": "",
        "location": "",
        "rsvpLink": "",
        "notes": "",
        "rsvpList": [],
    }


@dataclass
class TributeDraft:
    """Editable camelCase copy of a tribute held while a form is open."""

    values: dict[str, object] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "TributeDraft":
        """Blank draft for the create form."""
        return cls(
            {
                "name": "",
                "birthDate": "",
                "deathDate": "",
                "bio": "",
                "story": "",
                "obituaryText": "",
                "photoUrl": "",
                "tags": [],
                "funeralDetails": _empty_funeral_details(),
            }
        )

    @classmethod
    def from_tribute(cls, tribute: Tribute) -> "TributeDraft":
        """Draft pre-filled from a stored tribute."""
        values = tribute.to_record()
        details = values.get("funeralDetails")
        values["funeralDetails"] = {
            **_empty_funeral_details(),
            **(details if isinstance(details, dict) else {}),
        }
        return cls(values)

    def get(self, name: str, default: object = None) -> object:
        """Return a form value, resolving funeral form names."""
        target = _FUNERAL_FORM_FIELDS.get(name)
        if target:
            return self._funeral_details().get(target, default)
        return self.values.get(name, default)

    def set_field(self, name: str, value: object) -> None:
        """Apply a single form input change."""
        if name in _READ_ONLY_FIELDS:
            raise ValueError(f"{name} cannot be edited")
        target = _FUNERAL_FORM_FIELDS.get(name)
        if target:
            details = self._funeral_details()
            details[target] = value
            self.values["funeralDetails"] = details
            return
        self.values[name] = value

    def add_tag(self, tag: str) -> bool:
        """Append a tag unless it is blank or already present."""
        cleaned = tag.strip()
        tags = list(self.values.get("tags") or [])
        if not cleaned or cleaned in tags:
            return False
        tags.append(cleaned)
        self.values["tags"] = tags
        return True

    def remove_tag(self, tag: str) -> None:
        """Drop a tag if present."""
        self.values["tags"] = [t for t in self.values.get("tags") or [] if t != tag]

    def validate(self, require_dates: bool = False) -> list[str]:
        """Return inline error messages; empty when the draft can be saved."""
        errors = []
        if not _text(self.values.get("name")):
            errors.append(NAME_REQUIRED)
        if require_dates:
            if not _text(self.values.get("birthDate")):
                errors.append(BIRTH_DATE_REQUIRED)
            if not _text(self.values.get("deathDate")):
                errors.append(DEATH_DATE_REQUIRED)
        return errors

    def to_payload(self) -> dict[str, object]:
        """Return the draft as a record payload with blank strings cleared."""
        payload = {key: _blank_to_none(value) for key, value in self.values.items()}
        payload["name"] = _text(self.values.get("name"))
        details = self.values.get("funeralDetails")
        if isinstance(details, dict):
            payload["funeralDetails"] = {
                key: _blank_to_none(value) for key, value in details.items()
            }
        return payload

    def create(self, repository: TributeRepository, user_id: str) -> Tribute:
        """Validate and persist the draft as a new tribute owned by the user."""
        errors = self.validate(require_dates=True)
        if errors:
            raise TributeValidationError(errors)
        return repository.create(self.to_payload(), created_by=user_id)

    def update(self, repository: TributeRepository, tribute: Tribute) -> Tribute:
        """Validate and persist the draft over an existing tribute."""
        errors = self.validate()
        if errors:
            raise TributeValidationError(errors)
        record = {**tribute.to_record(), **self.to_payload(), "id": tribute.id}
        return repository.save(Tribute.model_validate(record))

    def _funeral_details(self) -> dict[str, object]:
        details = self.values.get("funeralDetails")
        return dict(details) if isinstance(details, dict) else {}


@dataclass
class RsvpForm:
    """RSVP input for a tribute's funeral."""

    name: str = ""
    attending: bool = True

    def validate(self) -> str | None:
        """Return an inline error message, if any."""
        if not self.name.strip():
            return RSVP_NAME_REQUIRED
        return None

    def submit(self, repository: TributeRepository, tribute_id: str) -> Tribute | None:
        """Record the RSVP under the trimmed name and clear the name field."""
        error = self.validate()
        if error:
            raise TributeValidationError([error])
        updated = repository.add_rsvp(tribute_id, self.name.strip(), self.attending)
        self.name = ""
        return updated


def _text(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def _blank_to_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value
