from sqlalchemy.orm import Session

from flashdeck.actions.base import action
from flashdeck.auth.identity import Caller, require_caller
from flashdeck.core.errors import NotFoundError
from flashdeck.db.queries.decks import (
    delete_deck_by_id,
    get_deck_with_cards,
    get_user_decks_with_card_counts,
    insert_deck,
    update_deck_by_id,
)
from flashdeck.schemas.cards import CardRead
from flashdeck.schemas.decks import (
    DECK_MESSAGES,
    CreateDeckInput,
    DeckRead,
    DeckSummary,
    DeckWithCards,
    DeleteDeckInput,
    GetDeckInput,
    UpdateDeckInput,
)
from flashdeck.schemas.results import ActionResult
from flashdeck.schemas.validation import parse_input
from flashdeck.services.revalidation import DASHBOARD_PATH, StaleViews, deck_path


@action("Failed to create deck")
def create_deck(db: Session, caller: Caller | None, *, name: str, description: str | None = None,
                views: StaleViews | None = None) -> ActionResult:
    # 1) validate
    validated = parse_input(CreateDeckInput, {"name": name, "description": description}, DECK_MESSAGES)

    # 2) auth
    owner_id = require_caller(caller)

    # 3) persist
    deck = insert_deck(db, owner_id=owner_id, name=validated.name, description=validated.description)

    # 4) stale views
    if views is not None:
        views.revalidate_path(DASHBOARD_PATH)

    return ActionResult.ok(DeckRead.model_validate(deck))


# stands for "not passed", so an omitted description is left as it is
_UNSET = object()


@action("Failed to update deck")
def update_deck(db: Session, caller: Caller | None, *, id: int, name: str, description=_UNSET,
                views: StaleViews | None = None) -> ActionResult:
    data = {"id": id, "name": name}
    if description is not _UNSET:
        data["description"] = description
    validated = parse_input(UpdateDeckInput, data, DECK_MESSAGES)
    owner_id = require_caller(caller)

    changes = {f: getattr(validated, f) for f in ("name", "description") if f in validated.model_fields_set}
    deck = update_deck_by_id(db, validated.id, owner_id, **changes)
    if not deck:
        raise NotFoundError.deck()

    if views is not None:
        views.revalidate_path(DASHBOARD_PATH)
        views.revalidate_path(deck_path(validated.id))

    return ActionResult.ok(DeckRead.model_validate(deck))


@action("Failed to delete deck")
def delete_deck(db: Session, caller: Caller | None, *, id: int,
                views: StaleViews | None = None) -> ActionResult:
    validated = parse_input(DeleteDeckInput, {"id": id})
    owner_id = require_caller(caller)

    if not delete_deck_by_id(db, validated.id, owner_id):
        raise NotFoundError.deck()

    if views is not None:
        views.revalidate_path(DASHBOARD_PATH)

    return ActionResult.ok()


@action("Failed to load decks")
def list_decks(db: Session, caller: Caller | None) -> ActionResult:
    owner_id = require_caller(caller)

    rows = get_user_decks_with_card_counts(db, owner_id)
    return ActionResult.ok([
        DeckSummary(
            id=deck.id,
            name=deck.name,
            description=deck.description,
            created_at=deck.created_at,
            updated_at=deck.updated_at,
            card_count=card_count,
        )
        for deck, card_count in rows
    ])


@action("Failed to load deck")
def get_deck(db: Session, caller: Caller | None, *, id: int) -> ActionResult:
    validated = parse_input(GetDeckInput, {"id": id})
    owner_id = require_caller(caller)

    found = get_deck_with_cards(db, validated.id, owner_id)
    if not found:
        raise NotFoundError.deck()

    deck, cards = found
    return ActionResult.ok(
        DeckWithCards(
            **DeckRead.model_validate(deck).model_dump(),
            cards=[CardRead.model_validate(c) for c in cards],
        )
    )
