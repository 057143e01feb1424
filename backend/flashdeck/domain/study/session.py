# backend/flashdeck/domain/study/session.py

import random
from dataclasses import dataclass
from typing import Any, Sequence

from flashdeck.domain.reorder.ordering import card_id

from .summary import SessionSummary, Verdict, round_half_up

DEFAULT_TRANSITION_DELAY = 0.3


@dataclass(frozen=True)
class Viewing:
    index: int
    flipped: bool
    answered: bool


@dataclass(frozen=True)
class Completed:
    stats: SessionSummary


class StudySession:
    """
    In-memory walk through a deck's cards.

    Never touches the store: it works on the snapshot it was given.
    Every transition is total, an action that is not allowed in the
    current state does nothing and returns False.

    In graded mode a card has to be flipped and then marked correct or
    incorrect before the session moves on.
    """

    KEY_BINDINGS = {
        " ": "flip",
        "Enter": "flip",
        "ArrowLeft": "retreat",
        "ArrowRight": "advance",
        "Escape": "exit",
    }

    def __init__(self, cards: Sequence[Any], *, graded: bool = False,
                 transition_delay: float = DEFAULT_TRANSITION_DELAY):
        self.graded = graded
        # seconds the UI waits between unflipping and showing the next card
        self.transition_delay = transition_delay

        self._cards: list[Any] = list(cards)
        self._index = 0
        self._flipped = False
        self._answered = False
        # set by mark_answer, cleared whenever the card changes
        self._graded_this_visit = False
        self._completed = not self._cards
        self._results: dict[int, Verdict] = {}

    # -------------
    # State
    # -------------

    @property
    def cards(self) -> list[Any]:
        return list(self._cards)

    @property
    def total(self) -> int:
        return len(self._cards)

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def current_card(self) -> Any | None:
        if self._completed:
            return None
        return self._cards[self._index]

    @property
    def is_flipped(self) -> bool:
        return self._flipped

    @property
    def is_answered(self) -> bool:
        return self._answered

    @property
    def is_completed(self) -> bool:
        return self._completed

    @property
    def results(self) -> dict[int, Verdict]:
        return dict(self._results)

    @property
    def is_first(self) -> bool:
        return self._index == 0

    @property
    def is_last(self) -> bool:
        return self._index == self.total - 1

    @property
    def position(self) -> int:
        return self._index + 1 if self.total else 0

    @property
    def progress_percent(self) -> int:
        if not self.total:
            return 0
        return round_half_up(self.position / self.total * 100)

    @property
    def state(self) -> Viewing | Completed:
        if self._completed:
            return Completed(self.summary())
        return Viewing(self._index, self._flipped, self._answered)

    # -------------
    # Gating
    # -------------

    @property
    def can_flip(self) -> bool:
        if self._completed:
            return False
        # a revealed card must be graded before it can be hidden again
        return not (self.graded and self._flipped and not self._answered)

    @property
    def can_answer(self) -> bool:
        return self.graded and not self._completed and self._flipped and not self._graded_this_visit

    @property
    def can_advance(self) -> bool:
        if self._completed:
            return False
        return self._answered if self.graded else True

    @property
    def can_retreat(self) -> bool:
        return not self._completed and self._index > 0

    # -------------
    # Transitions
    # -------------

    def flip(self) -> bool:
        if not self.can_flip:
            return False
        self._flipped = not self._flipped
        return True

    def mark_answer(self, answered_card_id: int, verdict: Verdict) -> bool:
        """
        Record the verdict for the current card.

        One verdict per visit. Coming back to a card later allows answering
        it again, which replaces the verdict stored for it.
        """
        if not self.can_answer:
            return False
        if card_id(self._cards[self._index]) != answered_card_id:
            return False

        self._results[answered_card_id] = Verdict(verdict)
        self._answered = True
        self._graded_this_visit = True
        return True

    def advance(self) -> bool:
        if not self.can_advance:
            return False

        self._flipped = False
        if self.is_last:
            self._completed = True
            return True

        self._move_to(self._index + 1)
        return True

    def retreat(self) -> bool:
        if not self.can_retreat:
            return False

        self._flipped = False
        self._move_to(self._index - 1)
        return True

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Fisher-Yates over the full card set, then start over from the first card."""
        rng = rng or random.Random()
        shuffled = list(self._cards)
        for i in range(len(shuffled) - 1, 0, -1):
            j = rng.randint(0, i)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

        self._cards = shuffled
        self._reset()

    def restart(self) -> None:
        self._reset()

    def summary(self) -> SessionSummary:
        return SessionSummary.from_results(self.total, self._results)

    def handle_key(self, key: str) -> str | None:
        """
        Apply a keyboard shortcut and return the bound action name.

        "exit" is returned for the caller to act on (leave the session).
        """
        name = self.KEY_BINDINGS.get(key)
        if name == "flip":
            self.flip()
        elif name == "retreat":
            self.retreat()
        elif name == "advance":
            self.advance()
        return name

    # -------------
    # Internals
    # -------------

    def _move_to(self, index: int) -> None:
        self._index = index
        # a card graded earlier in this session keeps its verdict
        self._answered = self.graded and card_id(self._cards[index]) in self._results
        self._graded_this_visit = False

    def _reset(self) -> None:
        self._index = 0
        self._flipped = False
        self._answered = False
        self._graded_this_visit = False
        self._completed = not self._cards
        if self.graded:
            self._results = {}
