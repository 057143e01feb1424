from flashdeck.actions.card_actions import create_card, delete_card, reorder_cards, update_card
from flashdeck.actions.deck_actions import create_deck, delete_deck, get_deck, list_decks, update_deck

__all__ = [
    "create_card",
    "update_card",
    "delete_card",
    "reorder_cards",
    "create_deck",
    "update_deck",
    "delete_deck",
    "list_decks",
    "get_deck",
]
