# contact_api/services/inquiry_store.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contact_api.core.errors import PersistenceError
from contact_api.db.models.inquiry import Inquiry, InquiryType


class InquiryStore:
    """
    Thin wrapper around the `inquiries` table.
    Each insert is a single-row transaction: committed whole or rolled back.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert_inquiry(
        self,
        *,
        inquiry_type: InquiryType,
        email: str,
        message: str,
        user_id: Optional[int],
    ) -> Inquiry:
        row = Inquiry(
            inquiry_type=inquiry_type,
            email=email,
            message=message,
            user_id=user_id,
        )
        try:
            self.db.add(row)
            self.db.flush()
            # pull server-side defaults (id, created_at) before committing
            self.db.refresh(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError("Insert inquiry failed") from e
        return row

    def list_for_user(self, user_id: int, *, limit: int = 20, offset: int = 0) -> list[Inquiry]:
        stmt = (
            select(Inquiry)
            .where(Inquiry.user_id == user_id)
            .order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return list(self.db.scalars(stmt))
