"""Mapping of legacy tribute record shapes onto the current schema."""

import base64
import binascii

LEGACY_FUNERAL_FIELDS: dict[str, str] = {
    "funeralDate": "dateTime",
    "funeralLocation": "location",
    "funeralRsvpLink": "rsvpLink",
}


def upgrade_record(raw: dict[str, object]) -> dict[str, object]:
    """Return a copy of a raw tribute record using only current field names.

    ``photoBase64`` is folded into ``photoUrl`` as a data URL and flat funeral
    form keys move into ``funeralDetails``. Values already present under the
    current names win.
    """
    record = dict(raw)

    photo_base64 = record.pop("photoBase64", None)
    if isinstance(photo_base64, str) and photo_base64 and not record.get("photoUrl"):
        record["photoUrl"] = to_data_url(photo_base64)

    legacy = {
        target: record.pop(source)
        for source, target in LEGACY_FUNERAL_FIELDS.items()
        if source in record
    }
    if legacy:
        details = record.get("funeralDetails")
        merged = dict(details) if isinstance(details, dict) else {}
        for key, value in legacy.items():
            if not merged.get(key) and value:
                merged[key] = value
        record["funeralDetails"] = merged
    return record


def to_data_url(encoded: str) -> str:
    """Wrap a bare base64 image payload in a data URL."""
    if encoded.startswith("data:"):
        return encoded
    try:
        head = base64.b64decode(encoded[:64] + "=" * (-len(encoded[:64]) % 4))
    except (binascii.Error, ValueError):
        head = b""
    return f"data:{detect_mime_type(head)};base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
