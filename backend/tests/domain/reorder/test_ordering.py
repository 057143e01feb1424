from types import SimpleNamespace

import pytest

from flashdeck.domain.reorder.ordering import build_card_orders, move_card, resolve_drag


def _cards(*ids):
    return [SimpleNamespace(id=i, front=f"Q{i}", back=f"A{i}") for i in ids]


def _ids(cards):
    return [c.id for c in cards]


def test_move_first_to_last():
    a, b, c = _cards(1, 2, 3)

    moved = move_card([a, b, c], 0, 2)

    assert moved == [b, c, a]


def test_move_last_to_first_shifts_the_rest_down():
    cards = _cards(1, 2, 3, 4)

    assert _ids(move_card(cards, 3, 0)) == [4, 1, 2, 3]


def test_move_to_same_index_is_identity():
    cards = _cards(1, 2, 3)

    moved = move_card(cards, 1, 1)

    assert moved == cards
    assert moved is not cards


@pytest.mark.parametrize("source, target", [(-1, 0), (0, 3), (5, 1), (1, -2)])
def test_move_out_of_bounds_is_a_no_op(source, target):
    cards = _cards(1, 2, 3)

    assert move_card(cards, source, target) == cards


def test_move_does_not_touch_the_input():
    cards = _cards(1, 2, 3)

    move_card(cards, 0, 2)

    assert _ids(cards) == [1, 2, 3]


def test_move_is_a_permutation_with_element_at_target():
    cards = _cards(*range(1, 8))
    for source in range(len(cards)):
        for target in range(len(cards)):
            moved = move_card(cards, source, target)
            assert sorted(_ids(moved)) == _ids(cards)
            assert moved[target] is cards[source]


def test_move_on_empty_and_single_sequences():
    assert move_card([], 0, 0) == []
    single = _cards(1)
    assert move_card(single, 0, 0) == single


def test_build_card_orders_uses_positions():
    b, c, a = _cards(2, 3, 1)

    assert build_card_orders([b, c, a]) == [
        {"id": 2, "order": 0},
        {"id": 3, "order": 1},
        {"id": 1, "order": 2},
    ]


def test_build_card_orders_accepts_mappings():
    assert build_card_orders([{"id": 9}, {"id": 4}]) == [
        {"id": 9, "order": 0},
        {"id": 4, "order": 1},
    ]


def test_resolve_drag_maps_ids_to_indices():
    cards = _cards(10, 20, 30)

    assert resolve_drag(cards, active_id=10, over_id=30) == (0, 2)
    assert resolve_drag(cards, active_id=30, over_id=20) == (2, 1)


def test_resolve_drag_ignores_drop_on_itself_or_nowhere():
    cards = _cards(10, 20, 30)

    assert resolve_drag(cards, active_id=20, over_id=20) is None
    assert resolve_drag(cards, active_id=20, over_id=None) is None
    assert resolve_drag(cards, active_id=20, over_id=99) is None
