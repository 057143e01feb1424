import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from flashdeck.auth.identity import Caller
from flashdeck.core.config import settings

logger = logging.getLogger(__name__)


def _expires_at(expires_delta: timedelta | None) -> datetime:
    lifetime = expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return datetime.now(timezone.utc) + lifetime


def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    claims = {**data, "exp": _expires_at(expires_delta)}
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def issue_token(user_id) -> str:
    """Bearer token with the user id as subject."""
    return create_access_token({"sub": str(user_id)})


def decode_access_token(token: str) -> dict | None:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as exc:
        logger.info("rejected access token: %s", exc)
        return None


def caller_from_token(token: str) -> Caller | None:
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        return None
    return Caller(user_id=str(payload["sub"]))
