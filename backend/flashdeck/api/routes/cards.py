from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from flashdeck.actions import card_actions
from flashdeck.api.responses import action_response, get_stale_views
from flashdeck.auth.dependencies import get_current_caller
from flashdeck.auth.identity import Caller
from flashdeck.db.session import get_db
from flashdeck.schemas.cards import CardBody, ReorderBody
from flashdeck.services.revalidation import StaleViews

# mounted under /decks/{deck_id}/cards
router = APIRouter(tags=["cards"])


@router.post("/")
def create_card(
    deck_id: int,
    payload: CardBody,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
    views: StaleViews = Depends(get_stale_views),
):
    result = card_actions.create_card(
        db, caller, deck_id=deck_id, front=payload.front, back=payload.back, views=views,
    )
    return action_response(result, views, success_status=status.HTTP_201_CREATED)


# must stay above /{card_id}
@router.put("/order")
def reorder_cards(
    deck_id: int,
    payload: ReorderBody,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
    views: StaleViews = Depends(get_stale_views),
):
    result = card_actions.reorder_cards(
        db, caller, deck_id=deck_id, card_orders=payload.card_orders, views=views,
    )
    return action_response(result, views)


@router.put("/{card_id}")
def update_card(
    deck_id: int,
    card_id: int,
    payload: CardBody,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
    views: StaleViews = Depends(get_stale_views),
):
    result = card_actions.update_card(
        db, caller, id=card_id, deck_id=deck_id, front=payload.front, back=payload.back, views=views,
    )
    return action_response(result, views)


@router.delete("/{card_id}")
def delete_card(
    deck_id: int,
    card_id: int,
    caller: Caller | None = Depends(get_current_caller),
    db: Session = Depends(get_db),
    views: StaleViews = Depends(get_stale_views),
):
    result = card_actions.delete_card(db, caller, id=card_id, deck_id=deck_id, views=views)
    return action_response(result, views)
