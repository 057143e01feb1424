"""Pytest fixtures: in-memory SQLite, schema recreated for every test."""
import logging
import os
import uuid as uuid_lib

import pytest

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["ALGORITHM"] = "HS256"

logging.getLogger("sqlalchemy").setLevel(logging.ERROR)

from fastapi.testclient import TestClient  # noqa: E402

from flashdeck.auth.identity import Caller  # noqa: E402
from flashdeck.auth.jwt import issue_token  # noqa: E402
from flashdeck.core.security import hash_password  # noqa: E402
from flashdeck.db.session import SessionLocal, drop_db, init_db  # noqa: E402
from flashdeck.main import app  # noqa: E402
from flashdeck.models.card import Card  # noqa: E402
from flashdeck.models.deck import Deck  # noqa: E402
from flashdeck.models.user import User  # noqa: E402


@pytest.fixture(autouse=True)
def schema():
    init_db()
    yield
    drop_db()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


def make_user(db, prefix: str = "test") -> User:
    user = User(
        username=prefix,
        email=f"{prefix}_{uuid_lib.uuid4()}@example.com",
        password_hash=hash_password("password123"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def auth_headers(user: User) -> dict:
    return {"Authorization": f"Bearer {issue_token(user.id)}"}


@pytest.fixture
def test_user(db) -> User:
    return make_user(db)


@pytest.fixture
def other_user(db) -> User:
    return make_user(db, "other")


@pytest.fixture
def caller(test_user) -> Caller:
    return Caller(user_id=str(test_user.id))


@pytest.fixture
def other_caller(other_user) -> Caller:
    return Caller(user_id=str(other_user.id))


@pytest.fixture
def headers(test_user) -> dict:
    return auth_headers(test_user)


@pytest.fixture
def other_headers(other_user) -> dict:
    return auth_headers(other_user)


@pytest.fixture
def test_deck(db, test_user) -> Deck:
    deck = Deck(owner_id=str(test_user.id), name="Indonesian", description="Basic words")
    db.add(deck)
    db.commit()
    db.refresh(deck)
    return deck


@pytest.fixture
def other_deck(db, other_user) -> Deck:
    deck = Deck(owner_id=str(other_user.id), name="Private Deck")
    db.add(deck)
    db.commit()
    db.refresh(deck)
    return deck


@pytest.fixture
def deck_cards(db, test_deck) -> list[Card]:
    """Three cards A, B, C with orders 0, 1, 2."""
    cards = [
        Card(deck_id=test_deck.id, front="Dog", back="Anjing", order=0),
        Card(deck_id=test_deck.id, front="Cat", back="Kucing", order=1),
        Card(deck_id=test_deck.id, front="Bird", back="Burung", order=2),
    ]
    db.add_all(cards)
    db.commit()
    for card in cards:
        db.refresh(card)
    return cards
