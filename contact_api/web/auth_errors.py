# contact_api/web/auth_errors.py
"""
Login-error modal state.

The auth callback redirects to `/?error=<code>`. The page shows a modal
for that code, and dismissing it strips `error` from the address bar
(history.replaceState, no reload) so a re-render doesn't show it again.
"""
from __future__ import annotations

import urllib.parse
from dataclasses import dataclass
from typing import Optional

ERROR_PARAM = "error"
DISMISS_ACTIONS = ("close", "retry")

AUTH_ERROR_MESSAGES = {
    "auth_failed": "로그인에 실패했습니다. 다시 시도해주세요.",
    "unexpected": "예상치 못한 오류가 발생했습니다. 다시 시도해주세요.",
}
# used for unknown codes as well
DEFAULT_AUTH_ERROR_MESSAGE = "로그인 중 오류가 발생했습니다. 다시 시도해주세요."

MODAL_TITLE = "로그인 오류"
CLOSE_LABEL = "닫기"
RETRY_LABEL = "다시 시도"


def message_for(code: str) -> str:
    return AUTH_ERROR_MESSAGES.get(code, DEFAULT_AUTH_ERROR_MESSAGE)


def error_code_from_url(url: str) -> Optional[str]:
    query = urllib.parse.urlsplit(url).query
    values = urllib.parse.parse_qs(query, keep_blank_values=True).get(ERROR_PARAM)
    if not values or not values[0]:
        return None
    return values[0]


def strip_error_param(url: str) -> str:
    """Drop every `error` pair; other params, order and fragment stay."""
    parts = urllib.parse.urlsplit(url)
    pairs = urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    kept = [(k, v) for k, v in pairs if k != ERROR_PARAM]
    return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(kept)))


@dataclass(frozen=True)
class AuthErrorState:
    visible: bool = False
    code: Optional[str] = None
    message: Optional[str] = None


HIDDEN = AuthErrorState()


class AuthErrorPresenter:
    """Hidden -> Shown(message) on an error code, back to Hidden on dismiss."""

    def __init__(self, url: str = "/"):
        self.url = url
        self.state = HIDDEN

    def observe(self, url: Optional[str] = None) -> AuthErrorState:
        if url is not None:
            self.url = url
        code = error_code_from_url(self.url)
        if code:
            self.state = AuthErrorState(visible=True, code=code, message=message_for(code))
        return self.state

    def dismiss(self, action: str = "close") -> str:
        """Hide the modal and return the URL to put in the address bar."""
        if action not in DISMISS_ACTIONS:
            raise ValueError(f"unknown dismiss action: {action!r}")
        self.state = HIDDEN
        self.url = strip_error_param(self.url)
        return self.url

    @property
    def clean_url(self) -> str:
        return strip_error_param(self.url)
