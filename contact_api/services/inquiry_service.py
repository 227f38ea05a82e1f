# contact_api/services/inquiry_service.py
from __future__ import annotations

import logging
from typing import Optional

from contact_api.core.errors import PersistenceError
from contact_api.schemas.auth import Identity
from contact_api.schemas.inquiry import InquiryCreate, InquiryOut
from contact_api.services.inquiry_store import InquiryStore

logger = logging.getLogger(__name__)


class InquiryService:
    def __init__(self, store: InquiryStore):
        self.store = store

    def submit(self, inquiry: InquiryCreate, identity: Optional[Identity] = None) -> InquiryOut:
        """
        Store one validated inquiry and return its public projection.

        - user_id comes from `identity` when there is one, else NULL
        - exactly one insert attempt, no retries
        - raises PersistenceError when the store rejects the row
        """
        user_id = identity.id if identity else None
        try:
            row = self.store.insert_inquiry(
                inquiry_type=inquiry.inquiry_type,
                email=inquiry.email,
                message=inquiry.message,
                user_id=user_id,
            )
        except PersistenceError:
            logger.exception(
                "Insert inquiry error (type=%s email=%s user_id=%s message_len=%d)",
                inquiry.inquiry_type.value,
                inquiry.email,
                user_id,
                len(inquiry.message),
            )
            raise

        logger.info("Inquiry %s stored (type=%s, user_id=%s)", row.id, row.inquiry_type.value, user_id)
        return InquiryOut.model_validate(row)

    def list_for_identity(self, identity: Identity, *, limit: int = 20, offset: int = 0) -> list[InquiryOut]:
        rows = self.store.list_for_user(identity.id, limit=limit, offset=offset)
        return [InquiryOut.model_validate(r) for r in rows]
