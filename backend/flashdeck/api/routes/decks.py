from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from flashdeck.actions import deck_actions
from flashdeck.api.responses import action_response, get_stale_views
from flashdeck.auth.dependencies import get_current_caller
from flashdeck.auth.identity import Caller
from flashdeck.core.config import settings
from flashdeck.db.session import get_db
from flashdeck.schemas.decks import DeckBody
from flashdeck.schemas.results import ActionResult
from flashdeck.schemas.study import StudySnapshot
from flashdeck.services.revalidation import StaleViews

router = APIRouter(tags=["decks"])


@router.get("/")
def list_user_decks(
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
):
    """All decks of the caller with their card counts, newest first."""
    return action_response(deck_actions.list_decks(db, caller))


@router.post("/")
def create_deck(
    payload: DeckBody,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
    views: StaleViews = Depends(get_stale_views),
):
    result = deck_actions.create_deck(
        db, caller, name=payload.name, description=payload.description, views=views,
    )
    return action_response(result, views, success_status=status.HTTP_201_CREATED)


@router.get("/{deck_id}")
def get_deck(
    deck_id: int,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
):
    """Deck with its cards in display order."""
    return action_response(deck_actions.get_deck(db, caller, id=deck_id))


@router.patch("/{deck_id}")
def update_deck(
    deck_id: int,
    payload: DeckBody,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
    views: StaleViews = Depends(get_stale_views),
):
    # a description left out of the body is kept, an explicit null clears it
    supplied = {"description": payload.description} if "description" in payload.model_fields_set else {}
    result = deck_actions.update_deck(db, caller, id=deck_id, name=payload.name, views=views, **supplied)
    return action_response(result, views)


@router.delete("/{deck_id}")
def delete_deck(
    deck_id: int,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
    views: StaleViews = Depends(get_stale_views),
):
    result = deck_actions.delete_deck(db, caller, id=deck_id, views=views)
    return action_response(result, views)


@router.get("/{deck_id}/study")
def get_study_snapshot(
    deck_id: int,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
):
    """
    Everything a study session needs up front.

    The session itself runs on the client; no further requests are made
    while flipping or advancing.
    """
    result = deck_actions.get_deck(db, caller, id=deck_id)
    if not result.success:
        return action_response(result)

    deck = result.data
    snapshot = StudySnapshot(
        deck_id=deck.id,
        name=deck.name,
        description=deck.description,
        cards=deck.cards,
        transition_delay_ms=settings.STUDY_TRANSITION_DELAY_MS,
    )
    return action_response(ActionResult.ok(snapshot))
