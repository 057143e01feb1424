from sqlalchemy import func
from sqlalchemy.orm import Session

from flashdeck.db.base import utcnow
from flashdeck.db.queries.cards import get_cards_by_deck_id
from flashdeck.models.card import Card
from flashdeck.models.deck import Deck


# -------------------------------
# Read
# -------------------------------
def get_user_decks_with_card_counts(db: Session, owner_id: str):
    """Decks of a user, newest first, with the number of cards in each (empty decks included)."""
    return (
        db.query(Deck, func.count(Card.id).label("card_count"))
        .outerjoin(Card, Card.deck_id == Deck.id)
        .filter(Deck.owner_id == owner_id)
        .group_by(Deck.id)
        .order_by(Deck.created_at.desc(), Deck.id.desc())
        .all()
    )


def get_deck_by_id(db: Session, deck_id: int, owner_id: str) -> Deck | None:
    return (
        db.query(Deck)
        .filter(Deck.id == deck_id, Deck.owner_id == owner_id)
        .first()
    )


def get_deck_with_cards(db: Session, deck_id: int, owner_id: str) -> tuple[Deck, list[Card]] | None:
    deck = get_deck_by_id(db, deck_id, owner_id)
    if not deck:
        return None
    return deck, get_cards_by_deck_id(db, deck_id)


# -------------------------------
# Write
# -------------------------------
def insert_deck(db: Session, *, owner_id: str, name: str, description: str | None) -> Deck:
    deck = Deck(owner_id=owner_id, name=name, description=description)
    db.add(deck)
    db.commit()
    db.refresh(deck)
    return deck


def update_deck_by_id(db: Session, deck_id: int, owner_id: str, **changes) -> Deck | None:
    """Apply only the given columns (``name``, ``description``); others keep their value."""
    deck = get_deck_by_id(db, deck_id, owner_id)
    if not deck:
        return None

    for column, value in changes.items():
        setattr(deck, column, value)
    deck.updated_at = utcnow()
    db.commit()
    db.refresh(deck)
    return deck


def delete_deck_by_id(db: Session, deck_id: int, owner_id: str) -> Deck | None:
    deck = get_deck_by_id(db, deck_id, owner_id)
    if not deck:
        return None

    # cards go with it (ON DELETE CASCADE)
    db.delete(deck)
    db.commit()
    return deck
