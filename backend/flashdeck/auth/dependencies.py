from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from flashdeck.auth.identity import Caller
from flashdeck.auth.jwt import caller_from_token
from flashdeck.db.session import get_db
from flashdeck.models.user import User

# no auto_error: a missing header reaches the action layer as caller=None
security = HTTPBearer(auto_error=False)


def _invalid_token() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Caller | None:
    """
    Caller from the bearer token, or None when no token was sent.

    A token that is present but broken is rejected right here.
    """
    if credentials is None:
        return None

    caller = caller_from_token(credentials.credentials)
    if caller is None:
        raise _invalid_token()
    return caller


def get_current_user(
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
) -> User:
    if caller is None:
        raise _invalid_token()

    try:
        user_id = UUID(caller.user_id)
    except ValueError:
        raise _invalid_token()

    user = db.get(User, user_id)
    if not user:
        # 401 rather than 404 so the front end logs out
        raise _invalid_token()
    return user
