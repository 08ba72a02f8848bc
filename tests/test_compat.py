"""Tests for legacy record mapping."""

import base64

from memorial_tributes.domain.compat import detect_mime_type, to_data_url, upgrade_record


def test_photo_base64_becomes_data_url() -> None:
    encoded = base64.b64encode(b"\xff\xd8\xff\xe0rest-of-jpeg").decode()

    record = upgrade_record({"id": "1", "name": "Jane", "photoBase64": encoded})

    assert record["photoUrl"] == f"data:image/jpeg;base64,{encoded}"
    assert "photoBase64" not in record


def test_existing_photo_url_wins() -> None:
    record = upgrade_record(
        {"id": "1", "name": "Jane", "photoUrl": "/jane.jpg", "photoBase64": "abcd"}
    )

    assert record["photoUrl"] == "/jane.jpg"
    assert "photoBase64" not in record


def test_blank_photo_base64_is_dropped() -> None:
    record = upgrade_record({"id": "1", "name": "Jane", "photoBase64": ""})

    assert "photoUrl" not in record
    assert "photoBase64" not in record


def test_flat_funeral_fields_move_into_details() -> None:
    record = upgrade_record(
        {
            "id": "1",
            "name": "Jane",
            "funeralDate": "2024-06-01T10:00",
            "funeralLocation": "Chapel",
            "funeralRsvpLink": "https://rsvp.example",
            "funeralDetails": {"rsvpEnabled": True, "location": "Cathedral"},
        }
    )

    assert record["funeralDetails"] == {
        "rsvpEnabled": True,
        "location": "Cathedral",
        "dateTime": "2024-06-01T10:00",
        "rsvpLink": "https://rsvp.example",
    }
    assert "funeralDate" not in record


def test_record_without_legacy_fields_is_unchanged() -> None:
    raw = {"id": "1", "name": "Jane", "tags": ["a"]}

    assert upgrade_record(raw) == raw


def test_data_url_passes_through() -> None:
    assert to_data_url("data:image/gif;base64,R0lG") == "data:image/gif;base64,R0lG"


def test_undecodable_payload_defaults_to_jpeg() -> None:
    assert to_data_url("%%%").startswith("data:image/jpeg;base64,")


def test_detect_mime_type_signatures() -> None:
    assert detect_mime_type(b"\x89PNG\r\n\x1a\n....") == "image/png"
    assert detect_mime_type(b"GIF89a....") == "image/gif"
    assert detect_mime_type(b"RIFF\x00\x00\x00\x00WEBP") == "image/webp"
    assert detect_mime_type(b"unknown") == "image/jpeg"
