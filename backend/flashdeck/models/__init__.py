from flashdeck.models.user import User
from flashdeck.models.deck import Deck
from flashdeck.models.card import Card

__all__ = ["User", "Deck", "Card"]
