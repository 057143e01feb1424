import logging

from sqlalchemy.orm import Session

from flashdeck.actions.base import action
from flashdeck.auth.identity import Caller, require_caller
from flashdeck.core.errors import NotFoundError
from flashdeck.db.queries.cards import (
    delete_card_by_id,
    insert_card,
    update_card_by_id,
    update_cards_order,
    verify_card_ownership,
)
from flashdeck.db.queries.decks import get_deck_by_id
from flashdeck.schemas.cards import (
    CARD_MESSAGES,
    CardRead,
    CreateCardInput,
    DeleteCardInput,
    ReorderCardsInput,
    UpdateCardInput,
)
from flashdeck.schemas.results import ActionResult
from flashdeck.schemas.validation import parse_input
from flashdeck.services.revalidation import DASHBOARD_PATH, StaleViews, deck_path

logger = logging.getLogger(__name__)


@action("Failed to create card")
def create_card(db: Session, caller: Caller | None, *, deck_id: int, front: str, back: str,
                views: StaleViews | None = None) -> ActionResult:
    # 1) validate
    validated = parse_input(
        CreateCardInput,
        {"deck_id": deck_id, "front": front, "back": back},
        CARD_MESSAGES,
    )

    # 2) auth
    owner_id = require_caller(caller)

    # 3) deck ownership
    if not get_deck_by_id(db, validated.deck_id, owner_id):
        raise NotFoundError.deck()

    # 4) persist
    card = insert_card(db, deck_id=validated.deck_id, front=validated.front, back=validated.back)

    # 5) stale views
    if views is not None:
        views.revalidate_path(deck_path(validated.deck_id))
        views.revalidate_path(DASHBOARD_PATH)

    return ActionResult.ok(CardRead.model_validate(card))


@action("Failed to update card")
def update_card(db: Session, caller: Caller | None, *, id: int, deck_id: int, front: str, back: str,
                views: StaleViews | None = None) -> ActionResult:
    validated = parse_input(
        UpdateCardInput,
        {"id": id, "deck_id": deck_id, "front": front, "back": back},
        CARD_MESSAGES,
    )
    owner_id = require_caller(caller)

    if not verify_card_ownership(db, validated.id, owner_id):
        raise NotFoundError.card()

    # scoped to deck_id too, a card id paired with the wrong deck matches nothing
    card = update_card_by_id(db, validated.id, validated.deck_id, front=validated.front, back=validated.back)
    if not card:
        raise NotFoundError.card()

    if views is not None:
        views.revalidate_path(deck_path(validated.deck_id))

    return ActionResult.ok(CardRead.model_validate(card))


@action("Failed to delete card")
def delete_card(db: Session, caller: Caller | None, *, id: int, deck_id: int,
                views: StaleViews | None = None) -> ActionResult:
    validated = parse_input(DeleteCardInput, {"id": id, "deck_id": deck_id}, CARD_MESSAGES)
    owner_id = require_caller(caller)

    if not verify_card_ownership(db, validated.id, owner_id):
        raise NotFoundError.card()

    if not delete_card_by_id(db, validated.id, validated.deck_id):
        raise NotFoundError.card()

    if views is not None:
        views.revalidate_path(deck_path(validated.deck_id))
        views.revalidate_path(DASHBOARD_PATH)

    return ActionResult.ok()


@action("Failed to reorder cards")
def reorder_cards(db: Session, caller: Caller | None, *, deck_id: int, card_orders: list,
                  views: StaleViews | None = None) -> ActionResult:
    validated = parse_input(
        ReorderCardsInput,
        {"deck_id": deck_id, "card_orders": card_orders},
        CARD_MESSAGES,
    )
    owner_id = require_caller(caller)

    if not get_deck_by_id(db, validated.deck_id, owner_id):
        raise NotFoundError.deck()

    # TODO: decide whether a partial reorder should be rolled back as a whole;
    # pairs are still written one by one here.
    updated = update_cards_order(
        db,
        validated.deck_id,
        [(item.id, item.order) for item in validated.card_orders],
    )
    skipped = len(validated.card_orders) - len(updated)
    if skipped:
        logger.info("reorder of deck %s skipped %d card(s) outside the deck", validated.deck_id, skipped)

    if views is not None:
        views.revalidate_path(deck_path(validated.deck_id))

    return ActionResult.ok()
