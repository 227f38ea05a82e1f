# contact_api/db/models/inquiry.py
from __future__ import annotations

import enum
from typing import Optional
from sqlalchemy import Enum, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from contact_api.db.mixins import Base, TimestampMixin


class InquiryType(str, enum.Enum):
    general = "general"
    partnership = "partnership"
    support = "support"
    feedback = "feedback"


class Inquiry(TimestampMixin, Base):
    """
    One contact-form submission. Rows are insert-only: nothing in this
    service updates or deletes them.
    """
    __tablename__ = "inquiries"
    __table_args__ = (Index("ix_inquiries_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    inquiry_type: Mapped[InquiryType] = mapped_column(
        Enum(InquiryType, name="inquiry_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=InquiryType.general,
        index=True,
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    # anonymous submissions keep NULL here
    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )

    user = relationship("User", back_populates="inquiries")
