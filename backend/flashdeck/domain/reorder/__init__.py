from .board import MutationState, ReorderBoard, ReorderMutation, persist_order
from .ordering import build_card_orders, move_card, resolve_drag

__all__ = [
    "MutationState",
    "ReorderBoard",
    "ReorderMutation",
    "persist_order",
    "build_card_orders",
    "move_card",
    "resolve_drag",
]
