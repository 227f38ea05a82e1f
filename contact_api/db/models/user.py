from __future__ import annotations
from typing import Optional, List
from sqlalchemy import String, Boolean, Integer, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from contact_api.db.mixins import Base, CreatedUpdatedMixin


class User(CreatedUpdatedMixin, Base):
    """Identity owned by the auth system; this service only reads it."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100))
    last_name: Mapped[Optional[str]] = mapped_column(String(100))
    is_active: Mapped[bool] = mapped_column(Boolean, server_default=text("1"), nullable=False)

    inquiries: Mapped[List["Inquiry"]] = relationship("Inquiry", back_populates="user")
