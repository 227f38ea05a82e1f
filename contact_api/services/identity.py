# contact_api/services/identity.py
"""
Optional caller identity.

Submissions never require a login, so every failure here ends up as
"anonymous" instead of an error response.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from contact_api.core.config import settings
from contact_api.core.errors import IdentityResolutionError
from contact_api.core.security import decode_token
from contact_api.db.models.user import User
from contact_api.schemas.auth import Identity

logger = logging.getLogger(__name__)


def token_from_request(request: Request) -> Optional[str]:
    """
    Authorization: Bearer <jwt> wins; otherwise the access cookie,
    which is stored as "Bearer <jwt>" too.
    """
    header = request.headers.get("authorization") or ""
    if header.lower().startswith("bearer "):
        return header.split(" ", 1)[1].strip() or None

    raw = request.cookies.get(settings.AUTH_COOKIE_NAME)
    if raw and raw.startswith("Bearer "):
        return raw.split(" ", 1)[1].strip() or None
    return None


def load_identity(db: Session, token: str) -> Identity:
    """
    Decode an access token and load the active user behind it.
    Raises IdentityResolutionError for anything short of that.
    """
    try:
        payload = decode_token(token, token_type="access")
        user_id = int(payload["sub"])
    except (ValueError, TypeError) as e:
        raise IdentityResolutionError("invalid access token") from e

    try:
        user = db.get(User, user_id)
    except SQLAlchemyError as e:
        db.rollback()
        raise IdentityResolutionError("user lookup failed") from e

    if not user or not user.is_active:
        raise IdentityResolutionError(f"user {user_id} not found or inactive")
    return Identity.model_validate(user)


class IdentityProvider:
    def __init__(self, request: Request, db: Session):
        self.request = request
        self.db = db

    def current_identity(self) -> Optional[Identity]:
        token = token_from_request(self.request)
        if not token:
            return None
        try:
            return load_identity(self.db, token)
        except IdentityResolutionError as e:
            # degrade to anonymous
            logger.warning("Identity resolution failed, continuing anonymously: %s", e)
            return None
