# contact_api/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError

from contact_api.core.config import settings

# JWT helpers
# - tokens carry a "type" claim so "access" and "refresh" can't be swapped
def create_token(user_id: int, expires_delta: Optional[timedelta] = None, token_type: str = "access") -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "type": token_type,
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALGO)

def decode_token(token: str, token_type: Optional[str] = None) -> dict:
    """
    Decode and validate a JWT. If token_type is provided, also checks the 'type' claim.
    Raises ValueError on any validation problem.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGO])
    except JWTError as e:
        raise ValueError("Invalid token") from e

    if token_type is not None:
        if payload.get("type") != token_type:
            raise ValueError("Wrong token type")

    if "sub" not in payload:
        raise ValueError("Invalid token payload (missing 'sub')")

    return payload
