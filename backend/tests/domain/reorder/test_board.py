from types import SimpleNamespace

from flashdeck.core.errors import ErrorKind
from flashdeck.domain.reorder.board import MutationState, ReorderBoard, persist_order
from flashdeck.schemas.results import ActionResult


def _cards(*ids):
    return [SimpleNamespace(id=i) for i in ids]


def _ids(cards):
    return [c.id for c in cards]


class RecordingSubmit:
    """Stand-in for the reorder action, remembers every batch it gets."""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result or ActionResult.ok()
        self.error = error

    def __call__(self, deck_id, card_orders):
        self.calls.append((deck_id, card_orders))
        if self.error:
            raise self.error
        return self.result


def test_persist_order_sends_one_batch():
    submit = RecordingSubmit()

    result = persist_order(7, _cards(2, 3, 1), submit)

    assert result.success
    assert submit.calls == [
        (7, [{"id": 2, "order": 0}, {"id": 3, "order": 1}, {"id": 1, "order": 2}]),
    ]


def test_persist_order_turns_exceptions_into_failure():
    submit = RecordingSubmit(error=RuntimeError("connection reset"))

    result = persist_order(7, _cards(1, 2), submit)

    assert not result.success
    assert result.error == "connection reset"
    assert result.kind == ErrorKind.persistence


def test_move_applies_optimistically_and_stays_pending():
    board = ReorderBoard(1, _cards(1, 2, 3))

    mutation = board.move(0, 2)

    assert _ids(board.cards) == [2, 3, 1]
    assert mutation.state is MutationState.pending
    assert _ids(mutation.previous) == [1, 2, 3]
    assert _ids(mutation.optimistic) == [2, 3, 1]
    assert board.is_reordering
    # not confirmed yet
    assert _ids(board.known_good) == [1, 2, 3]


def test_successful_reorder_commits():
    board = ReorderBoard(1, _cards(1, 2, 3))
    submit = RecordingSubmit()

    mutation = board.reorder(0, 2, submit)

    assert mutation.state is MutationState.committed
    assert _ids(board.cards) == [2, 3, 1]
    assert _ids(board.known_good) == [2, 3, 1]
    assert not board.is_reordering
    assert submit.calls[0][1] == [{"id": 2, "order": 0}, {"id": 3, "order": 1}, {"id": 1, "order": 2}]


def test_failed_reorder_reverts_to_previous_sequence():
    board = ReorderBoard(1, _cards(1, 2, 3))
    submit = RecordingSubmit(ActionResult.fail("Deck not found or access denied", ErrorKind.not_found))

    mutation = board.reorder(2, 0, submit)

    assert mutation.state is MutationState.rolled_back
    assert mutation.error == "Deck not found or access denied"
    assert _ids(board.cards) == [1, 2, 3]
    assert not board.is_reordering


def test_exception_from_submit_also_reverts():
    board = ReorderBoard(1, _cards(1, 2, 3))

    mutation = board.reorder(0, 1, RecordingSubmit(error=ValueError("boom")))

    assert mutation.state is MutationState.rolled_back
    assert _ids(board.cards) == [1, 2, 3]


def test_no_reorder_for_empty_or_single_card_decks():
    submit = RecordingSubmit()

    assert ReorderBoard(1, []).reorder(0, 0, submit) is None
    assert ReorderBoard(1, _cards(1)).reorder(0, 0, submit) is None
    assert submit.calls == []


def test_no_reorder_for_same_or_invalid_index():
    board = ReorderBoard(1, _cards(1, 2, 3))
    submit = RecordingSubmit()

    assert board.reorder(1, 1, submit) is None
    assert board.reorder(0, 3, submit) is None
    assert submit.calls == []
    assert _ids(board.cards) == [1, 2, 3]


def test_overlapping_mutations_resolve_independently():
    board = ReorderBoard(1, _cards(1, 2, 3))

    first = board.move(0, 2)    # [2, 3, 1]
    second = board.move(0, 1)   # [3, 2, 1]
    assert _ids(board.cards) == [3, 2, 1]

    board.resolve(second, ActionResult.ok())
    assert board.is_reordering

    board.resolve(first, ActionResult.fail("Failed to reorder cards"))
    # last resolution wins, no coordination between the two
    assert _ids(board.cards) == [1, 2, 3]
    assert first.state is MutationState.rolled_back
    assert second.state is MutationState.committed
    assert not board.is_reordering


def test_resolving_twice_keeps_first_outcome():
    board = ReorderBoard(1, _cards(1, 2))
    mutation = board.move(0, 1)

    board.resolve(mutation, ActionResult.ok())
    board.resolve(mutation, ActionResult.fail("late failure"))

    assert mutation.state is MutationState.committed
    assert _ids(board.cards) == [2, 1]


def test_sync_replaces_visible_and_known_good():
    board = ReorderBoard(1, _cards(1, 2))

    board.sync(_cards(4, 5, 6))

    assert _ids(board.cards) == [4, 5, 6]
    assert _ids(board.known_good) == [4, 5, 6]
