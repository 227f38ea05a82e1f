import pytest

from contact_api.core.errors import InquiryValidationError
from contact_api.db.models.inquiry import InquiryType
from contact_api.services.inquiry_validator import validate_inquiry


def _reasons(payload) -> dict:
    with pytest.raises(InquiryValidationError) as exc_info:
        validate_inquiry(payload)
    return {d["field"]: d["reason"] for d in exc_info.value.details}


def test_missing_inquiry_type_defaults_to_general():
    inquiry = validate_inquiry({"email": "a@b.com", "message": "Hello there, team!"})
    assert inquiry.inquiry_type is InquiryType.general


@pytest.mark.parametrize("kind", ["general", "partnership", "support", "feedback"])
def test_every_known_inquiry_type_is_accepted(kind):
    inquiry = validate_inquiry({"inquiry_type": kind, "email": "a@b.com", "message": "Hello there, team!"})
    assert inquiry.inquiry_type.value == kind


@pytest.mark.parametrize("kind", ["sales", "GENERAL", "", None, 3])
def test_unknown_inquiry_type_is_rejected(kind):
    reasons = _reasons({"inquiry_type": kind, "email": "a@b.com", "message": "Hello there, team!"})
    assert reasons == {"inquiry_type": "invalid_choice"}


def test_reports_every_failing_field_at_once():
    reasons = _reasons({"message": "short"})
    assert reasons == {"email": "missing", "message": "too_short"}


def test_empty_payload_reports_both_required_fields():
    assert _reasons({}) == {"email": "missing", "message": "missing"}


@pytest.mark.parametrize(
    "email, reason",
    [
        ("", "too_short"),
        ("not-an-email", "invalid_format"),
        ("two@@acme.io", "invalid_format"),
        ("x" * 250 + "@b.com", "too_long"),
        (12345, "wrong_type"),
    ],
)
def test_bad_email(email, reason):
    assert _reasons({"email": email, "message": "Hello there, team!"}) == {"email": reason}


def test_email_is_kept_verbatim():
    inquiry = validate_inquiry({"email": "Someone@Acme.IO", "message": "Hello there, team!"})
    assert inquiry.email == "Someone@Acme.IO"


@pytest.mark.parametrize("length", [10, 2000])
def test_message_length_bounds_are_inclusive(length):
    inquiry = validate_inquiry({"email": "a@b.com", "message": "m" * length})
    assert len(inquiry.message) == length


@pytest.mark.parametrize("length, reason", [(9, "too_short"), (2001, "too_long")])
def test_message_outside_bounds(length, reason):
    assert _reasons({"email": "a@b.com", "message": "m" * length}) == {"message": reason}


def test_message_must_be_a_string():
    assert _reasons({"email": "a@b.com", "message": ["not", "text"]}) == {"message": "wrong_type"}


@pytest.mark.parametrize("payload", [[], "hello", 42, None])
def test_non_object_payload(payload):
    assert _reasons(payload) == {"body": "invalid_body"}


def test_unknown_keys_are_ignored():
    inquiry = validate_inquiry({"email": "a@b.com", "message": "Hello there, team!", "name": "Kim"})
    assert not hasattr(inquiry, "name")


def test_details_carry_a_human_message():
    with pytest.raises(InquiryValidationError) as exc_info:
        validate_inquiry({"email": "nope", "message": "Hello there, team!"})
    (detail,) = exc_info.value.details
    assert detail["field"] == "email"
    assert isinstance(detail["message"], str) and detail["message"]


def test_validation_is_repeatable():
    good = {"email": "a@b.com", "message": "Hello there, team!"}
    assert validate_inquiry(good) == validate_inquiry(good)

    bad = {"email": "nope", "message": "short"}
    first, second = _reasons(bad), _reasons(bad)
    assert first == second == {"email": "invalid_format", "message": "too_short"}
