# contact_api/core/errors.py
from __future__ import annotations

from typing import Any


class InquiryValidationError(Exception):
    """
    One or more field-level problems with a submitted payload.
    `details` lists every failing field, not just the first one.
    """

    def __init__(self, details: list[dict[str, Any]]):
        super().__init__(f"{len(details)} invalid field(s)")
        self.details = details


class PersistenceError(Exception):
    """The inquiry store could not complete the insert. Nothing was stored."""


class IdentityResolutionError(Exception):
    """Caller identity could not be resolved. Always downgraded to anonymous."""
