# backend/flashdeck/domain/reorder/board.py

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Sequence

from flashdeck.core.errors import ErrorKind
from flashdeck.schemas.results import ActionResult

from .ordering import build_card_orders, move_card

logger = logging.getLogger(__name__)

# (deck_id, [{"id": ..., "order": ...}]) -> ActionResult
SubmitOrder = Callable[[int, list[dict[str, int]]], ActionResult]

REORDER_FAILED = "Failed to reorder cards"


class MutationState(str, Enum):
    pending = "pending"
    committed = "committed"
    rolled_back = "rolled_back"


@dataclass
class ReorderMutation:
    """One optimistic reorder waiting for (or done with) persistence."""

    deck_id: int
    optimistic: list[Any]
    previous: list[Any]
    state: MutationState = MutationState.pending
    error: str | None = None

    @property
    def is_pending(self) -> bool:
        return self.state is MutationState.pending


def persist_order(deck_id: int, sequence: Sequence[Any], submit: SubmitOrder) -> ActionResult:
    """Submit the whole sequence as one batch; exceptions become a failed result."""
    try:
        result = submit(deck_id, build_card_orders(sequence))
    except Exception as exc:
        logger.exception("reorder submit for deck %s raised", deck_id)
        return ActionResult.fail(str(exc) or REORDER_FAILED, ErrorKind.persistence)

    if result is None:
        return ActionResult.fail(REORDER_FAILED, ErrorKind.persistence)
    return result


class ReorderBoard:
    """
    Locally held card order of one deck.

    A move is shown right away and remembered as a pending mutation; once
    the store answers the mutation is committed or rolled back to the
    sequence it replaced. Mutations are not coordinated with each other:
    whichever resolves last decides what is visible.
    """

    def __init__(self, deck_id: int, cards: Sequence[Any]):
        self.deck_id = deck_id
        self._cards: list[Any] = list(cards)
        self._known_good: list[Any] = list(cards)
        self._pending: list[ReorderMutation] = []

    @property
    def cards(self) -> list[Any]:
        return list(self._cards)

    @property
    def known_good(self) -> list[Any]:
        return list(self._known_good)

    @property
    def is_reordering(self) -> bool:
        return bool(self._pending)

    def sync(self, cards: Sequence[Any]) -> None:
        """Take freshly loaded server data as both visible and known-good."""
        self._cards = list(cards)
        self._known_good = list(cards)

    def move(self, source_index: int, target_index: int) -> ReorderMutation | None:
        if len(self._cards) < 2 or source_index == target_index:
            return None
        if not (0 <= source_index < len(self._cards) and 0 <= target_index < len(self._cards)):
            return None

        previous = list(self._cards)
        self._cards = move_card(previous, source_index, target_index)

        mutation = ReorderMutation(
            deck_id=self.deck_id,
            optimistic=list(self._cards),
            previous=previous,
        )
        self._pending.append(mutation)
        return mutation

    def resolve(self, mutation: ReorderMutation, result: ActionResult) -> ReorderMutation:
        if not mutation.is_pending:
            return mutation

        self._pending = [m for m in self._pending if m is not mutation]

        if result.success:
            mutation.state = MutationState.committed
            self._known_good = list(mutation.optimistic)
        else:
            mutation.state = MutationState.rolled_back
            mutation.error = result.error or REORDER_FAILED
            self._cards = list(mutation.previous)
            logger.warning("reorder of deck %s rolled back: %s", self.deck_id, mutation.error)
        return mutation

    def reorder(self, source_index: int, target_index: int, submit: SubmitOrder) -> ReorderMutation | None:
        """Move, persist and resolve in one go."""
        mutation = self.move(source_index, target_index)
        if mutation is None:
            return None

        result = persist_order(self.deck_id, mutation.optimistic, submit)
        return self.resolve(mutation, result)
