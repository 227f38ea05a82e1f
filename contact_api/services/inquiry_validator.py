"""
Payload validation for contact submissions.

`validate_inquiry` is pure: it never touches the database or the request
and returns the same verdict for the same payload every time.
"""
from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from contact_api.core.errors import InquiryValidationError
from contact_api.schemas.inquiry import InquiryCreate

# pydantic error type -> reason reported to the client
REASONS = {
    "missing": "missing",
    "string_type": "wrong_type",
    "string_too_short": "too_short",
    "string_too_long": "too_long",
    "value_error": "invalid_format",
    "enum": "invalid_choice",
    "model_type": "invalid_body",
    "model_attributes_type": "invalid_body",
}


def _to_detail(err: dict) -> dict:
    loc = err.get("loc") or ()
    field = ".".join(str(part) for part in loc) if loc else "body"
    return {
        "field": field,
        "reason": REASONS.get(err["type"], err["type"]),
        "message": err["msg"],
    }


def validate_inquiry(payload: Any) -> InquiryCreate:
    """
    Validate a decoded JSON payload.
    Raises InquiryValidationError listing every failing field.
    """
    try:
        return InquiryCreate.model_validate(payload)
    except ValidationError as e:
        details = [_to_detail(err) for err in e.errors(include_url=False, include_input=False)]
        raise InquiryValidationError(details) from None
