from typing import List, Optional

from pydantic import BaseModel

from flashdeck.schemas.cards import CardRead


class StudySnapshot(BaseModel):
    deck_id: int
    name: str
    description: Optional[str] = None
    cards: List[CardRead]
    transition_delay_ms: int
