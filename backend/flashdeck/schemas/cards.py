from datetime import datetime
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

MAX_CARD_TEXT = 5000

CardText = Annotated[str, Field(min_length=1, max_length=MAX_CARD_TEXT)]
EntityId = Annotated[int, Field(gt=0)]

CARD_MESSAGES = {
    ("front", "string_too_short"): "Front text is required",
    ("front", "string_too_long"): "Front text too long",
    ("back", "string_too_short"): "Back text is required",
    ("back", "string_too_long"): "Back text too long",
    ("card_orders", "too_short"): "At least one card order is required",
}


class _CardContent(BaseModel):
    front: CardText
    back: CardText

    @field_validator("back")
    @classmethod
    def back_differs_from_front(cls, back: str, info: ValidationInfo) -> str:
        front = info.data.get("front")
        if front is not None and front.strip() == back.strip():
            raise ValueError("Front and back cannot be identical")
        return back


# -------------------------------
# Action inputs
# -------------------------------
class CreateCardInput(_CardContent):
    deck_id: EntityId


class UpdateCardInput(_CardContent):
    id: EntityId
    deck_id: EntityId


class DeleteCardInput(BaseModel):
    id: EntityId
    deck_id: EntityId


class CardOrder(BaseModel):
    id: EntityId
    order: Annotated[int, Field(ge=0)]


class ReorderCardsInput(BaseModel):
    deck_id: EntityId
    card_orders: Annotated[List[CardOrder], Field(min_length=1)]


# -------------------------------
# Request bodies (path params come from the URL)
# -------------------------------
class CardBody(BaseModel):
    front: str = ""
    back: str = ""


class ReorderBody(BaseModel):
    # checked by the action so errors come back in the uniform result
    card_orders: List[dict] = []


# -------------------------------
# Responses
# -------------------------------
class CardRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    deck_id: int
    front: str
    back: str
    order: int
    created_at: datetime
    updated_at: datetime
