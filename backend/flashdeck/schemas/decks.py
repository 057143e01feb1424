from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from flashdeck.schemas.cards import CardRead, EntityId

DECK_MESSAGES = {
    ("name", "string_too_short"): "Name is required",
    ("name", "string_too_long"): "Name too long",
    ("description", "string_too_long"): "Description too long",
}

DeckName = Annotated[str, Field(min_length=1, max_length=255)]
DeckDescription = Optional[Annotated[str, Field(max_length=1000)]]


class CreateDeckInput(BaseModel):
    name: DeckName
    description: DeckDescription = None


class UpdateDeckInput(BaseModel):
    id: EntityId
    name: DeckName
    description: DeckDescription = None


class DeleteDeckInput(BaseModel):
    id: EntityId


class GetDeckInput(BaseModel):
    id: EntityId


class DeckBody(BaseModel):
    name: str = ""
    description: Optional[str] = None


class DeckRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    owner_id: str
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class DeckSummary(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    card_count: int


class DeckWithCards(DeckRead):
    cards: List[CardRead] = []
