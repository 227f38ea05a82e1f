from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, StringConstraints
from datetime import datetime

from contact_api.db.models.inquiry import InquiryType


def _check_email_syntax(value: str) -> str:
    # syntax only; the stored value stays exactly as submitted
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(str(e)) from e
    return value


Email = Annotated[
    str,
    StringConstraints(min_length=1, max_length=255),
    AfterValidator(_check_email_syntax),
]
Message = Annotated[str, StringConstraints(min_length=10, max_length=2000)]


class InquiryCreate(BaseModel):
    inquiry_type: InquiryType = InquiryType.general
    email: Email
    message: Message


class InquiryOut(BaseModel):
    """What callers get back. `message` and `user_id` stay server-side."""
    id: int
    inquiry_type: InquiryType
    email: str
    created_at: datetime

    class Config:
        from_attributes = True
