import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from flashdeck.auth.dependencies import get_current_user
from flashdeck.auth.jwt import issue_token
from flashdeck.core.security import hash_password, verify_password
from flashdeck.db.session import get_db
from flashdeck.models.user import User
from flashdeck.schemas.auth import LoginRequest, RegisterRequest, TokenResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


def _find_user(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


@router.get("/me", response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user


@router.post("/register", response_model=TokenResponse)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    if _find_user(db, data.email):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    user = User(
        email=data.email,
        username=data.username,
        password_hash=hash_password(data.password),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("registered user %s", user.id)

    return TokenResponse(access_token=issue_token(user.id))


@router.post("/login", response_model=TokenResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    user = _find_user(db, data.email)
    if not user or not verify_password(data.password, user.password_hash):
        logger.info("failed login for %s", data.email)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    return TokenResponse(access_token=issue_token(user.id))
