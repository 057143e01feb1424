# backend/flashdeck/domain/reorder/ordering.py

from typing import Any, Mapping, Sequence, TypeVar

T = TypeVar("T")


def card_id(card: Any) -> int:
    if isinstance(card, Mapping):
        return card["id"]
    return card.id


def move_card(sequence: Sequence[T], source_index: int, target_index: int) -> list[T]:
    """
    Move one element and shift everything between the two positions.

    Always returns a new list; out-of-range or equal indices give an
    unchanged copy.
    """
    items = list(sequence)
    size = len(items)
    if source_index == target_index:
        return items
    if not (0 <= source_index < size and 0 <= target_index < size):
        return items

    moved = items.pop(source_index)
    items.insert(target_index, moved)
    return items


def resolve_drag(sequence: Sequence[Any], active_id: int, over_id: int | None) -> tuple[int, int] | None:
    """Map a finished drag (dragged card, card dropped on) to (source, target) indices."""
    if over_id is None or active_id == over_id:
        return None

    ids = [card_id(c) for c in sequence]
    try:
        return ids.index(active_id), ids.index(over_id)
    except ValueError:
        return None


def build_card_orders(sequence: Sequence[Any]) -> list[dict[str, int]]:
    """Order of each card is its zero-based position in ``sequence``."""
    return [{"id": card_id(card), "order": index} for index, card in enumerate(sequence)]
