# contact_api/web/routes.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from contact_api.core.config import settings
from contact_api.core.deps import get_db
from contact_api.core.errors import IdentityResolutionError
from contact_api.services.identity import load_identity
from contact_api.web.auth_errors import ERROR_PARAM
from contact_api.web.context import ctx

logger = logging.getLogger(__name__)

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

CALLBACK_PATH = "/auth/callback"


def set_access_cookie(resp: Response, token: str):
    resp.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=f"Bearer {token}",
        httponly=True,
        samesite="lax",
        secure=False,  # set True behind HTTPS in prod
        path="/",
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def safe_next(next_url: Optional[str]) -> str:
    # local paths only, and never straight back into the callback
    if not next_url or not next_url.startswith("/") or next_url.startswith("//"):
        return "/"
    if CALLBACK_PATH in next_url:
        return "/"
    return next_url


@router.get("/", response_class=HTMLResponse)
def home(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(request, "index.html", ctx(request, db, title=settings.APP_NAME))


@router.get(CALLBACK_PATH)
def auth_callback(
    token: Optional[str] = Query(None),
    next: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """
    Landing point after an external login.
    Good token -> cookie + redirect to `next`; otherwise back home with ?error=<code>.
    """
    try:
        if not token:
            raise IdentityResolutionError("no token on callback")
        identity = load_identity(db, token)
    except IdentityResolutionError as e:
        logger.info("Auth callback rejected: %s", e)
        return RedirectResponse(url=f"/?{ERROR_PARAM}=auth_failed", status_code=303)
    except Exception:
        logger.exception("Auth callback failed unexpectedly")
        return RedirectResponse(url=f"/?{ERROR_PARAM}=unexpected", status_code=303)

    logger.info("User %s signed in via callback", identity.id)
    resp = RedirectResponse(url=safe_next(next), status_code=303)
    set_access_cookie(resp, token)
    return resp
