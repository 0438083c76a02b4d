from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt

from rethinking_econ.core.config import settings


def create_access_token(
    subject: str,
    *,
    expires_minutes: int | None = None,
    **claims: Any,
) -> str:
    """Mint a bearer token in the identity provider's format.

    The API itself never issues tokens to browsers; this exists for seeding,
    tooling and tests.
    """
    minutes = expires_minutes if expires_minutes is not None else settings.ACCESS_TOKEN_EXPIRE_MINUTES
    expire = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    payload: dict[str, Any] = {"sub": str(subject), "exp": expire}
    payload.update({key: value for key, value in claims.items() if value is not None})
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
