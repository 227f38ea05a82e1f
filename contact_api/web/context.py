# contact_api/web/context.py
from __future__ import annotations

from fastapi import Request
from sqlalchemy.orm import Session

from contact_api.core.config import settings
from contact_api.services.identity import IdentityProvider
from contact_api.web.auth_errors import (
    AuthErrorPresenter,
    CLOSE_LABEL,
    MODAL_TITLE,
    RETRY_LABEL,
)


def ctx(request: Request, db: Session, **extra):
    """
    Shared template context: identity and the login-error modal state.
    """
    presenter = AuthErrorPresenter(str(request.url))
    context = {
        "app_name": settings.APP_NAME,
        "identity": IdentityProvider(request, db).current_identity(),
        "auth_error": presenter.observe(),
        "auth_error_clean_url": presenter.clean_url,
        "auth_error_title": MODAL_TITLE,
        "close_label": CLOSE_LABEL,
        "retry_label": RETRY_LABEL,
    }
    context.update(extra or {})
    return context
