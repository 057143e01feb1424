from typing import Iterable

from sqlalchemy import func
from sqlalchemy.orm import Session

from flashdeck.db.base import utcnow
from flashdeck.models.card import Card
from flashdeck.models.deck import Deck


# -------------------------------
# Read
# -------------------------------
def get_cards_by_deck_id(db: Session, deck_id: int) -> list[Card]:
    return (
        db.query(Card)
        .filter(Card.deck_id == deck_id)
        .order_by(Card.order.asc(), Card.created_at.asc(), Card.id.asc())
        .all()
    )


def get_card_by_id(db: Session, card_id: int, deck_id: int) -> Card | None:
    return db.query(Card).filter(Card.id == card_id, Card.deck_id == deck_id).first()


def verify_card_ownership(db: Session, card_id: int, owner_id: str) -> Card | None:
    """The card, if it belongs to a deck owned by ``owner_id``."""
    return (
        db.query(Card)
        .join(Deck, Card.deck_id == Deck.id)
        .filter(Card.id == card_id, Deck.owner_id == owner_id)
        .first()
    )


# -------------------------------
# Write
# -------------------------------
def insert_card(db: Session, *, deck_id: int, front: str, back: str) -> Card:
    # new cards go to the end of the deck
    max_order = db.query(func.max(Card.order)).filter(Card.deck_id == deck_id).scalar()
    card = Card(
        deck_id=deck_id,
        front=front,
        back=back,
        order=(max_order + 1) if max_order is not None else 0,
    )
    db.add(card)
    db.commit()
    db.refresh(card)
    return card


def update_card_by_id(db: Session, card_id: int, deck_id: int, *, front: str, back: str) -> Card | None:
    card = get_card_by_id(db, card_id, deck_id)
    if not card:
        return None

    card.front = front
    card.back = back
    card.updated_at = utcnow()
    db.commit()
    db.refresh(card)
    return card


def update_cards_order(db: Session, deck_id: int, card_orders: Iterable[tuple[int, int]]) -> list[int]:
    """
    Write each (card id, order) pair on its own.

    Pairs naming a card outside ``deck_id`` are skipped. Every pair is
    committed independently, so a failure part way through leaves the
    earlier pairs applied. Returns the ids that were updated.
    """
    updated: list[int] = []
    for card_id, order in card_orders:
        count = (
            db.query(Card)
            .filter(Card.id == card_id, Card.deck_id == deck_id)
            .update({Card.order: order, Card.updated_at: utcnow()}, synchronize_session="fetch")
        )
        db.commit()
        if count:
            updated.append(card_id)
    return updated


def delete_card_by_id(db: Session, card_id: int, deck_id: int) -> Card | None:
    card = get_card_by_id(db, card_id, deck_id)
    if not card:
        return None

    db.delete(card)
    db.commit()
    return card
