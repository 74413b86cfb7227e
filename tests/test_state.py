import logging
import random
from collections import Counter

import pytest

from hanoi_sim.state import (
    EmptySource,
    GamePhase,
    HanoiState,
    IllegalMove,
    InvalidConfiguration,
    RodId,
    UnrecognizedRod,
)

A, B, C = RodId.A, RodId.B, RodId.C


def make_state(n=3):
    state = HanoiState()
    state.initialize(n)
    return state


def test_initialize_stacks_all_disks_on_rod_a():
    state = make_state(3)
    assert state.rods == [[3, 2, 1], [], []]
    assert state.num_disks == 3
    assert state.moves_made == 0
    assert state.phase is GamePhase.PLAYING


def test_initialize_resets_previous_game():
    state = make_state(3)
    state.move_disk(A, C)
    state.initialize(5)
    assert state.rods == [[5, 4, 3, 2, 1], [], []]
    assert state.moves_made == 0


@pytest.mark.parametrize("n", [2, 7, 0, -1])
def test_initialize_rejects_out_of_range(n):
    state = HanoiState()
    with pytest.raises(InvalidConfiguration):
        state.initialize(n)
    assert state.rods == [[], [], []]
    assert state.phase is GamePhase.SETUP


def test_invalid_initialize_keeps_existing_game():
    state = make_state(4)
    state.move_disk(A, B)
    before = state.state_key()
    with pytest.raises(InvalidConfiguration):
        state.initialize(7)
    assert state.state_key() == before
    assert state.num_disks == 4


def test_initialize_rejects_non_integer():
    with pytest.raises(InvalidConfiguration):
        HanoiState().initialize("3")


def test_custom_max_disks():
    state = HanoiState(max_disks=8)
    state.initialize(8)
    assert state.rods[A] == list(range(8, 0, -1))


def test_top_disk():
    state = make_state(3)
    assert state.top_disk(A) == 1
    assert state.top_disk(B) is None


def test_can_move_onto_empty_rod():
    state = make_state(3)
    state.move_disk(A, C)
    state.move_disk(A, B)
    state.move_disk(C, B)
    assert state.rods == [[3], [2, 1], []]
    # the largest disk may land on an empty rod
    assert state.can_move(A, C)


def test_can_move_rejects_larger_onto_smaller():
    state = make_state(3)
    state.move_disk(A, C)
    assert state.top_disk(A) == 2
    assert state.top_disk(C) == 1
    assert not state.can_move(A, C)
    assert state.can_move(C, A)


def test_can_move_smaller_onto_larger():
    state = make_state(3)
    state.move_disk(A, B)
    state.move_disk(A, C)
    # A: [3], B: [1], C: [2]
    assert state.can_move(B, C)
    assert state.can_move(B, A)
    assert not state.can_move(C, B)


def test_can_move_rejects_empty_source():
    state = make_state(3)
    assert not state.can_move(B, C)


def test_can_move_rejects_out_of_range():
    state = make_state(3)
    assert not state.can_move(0, 3)
    assert not state.can_move(-1, 2)


@pytest.mark.parametrize("rod", list(RodId))
def test_can_move_same_rod_is_always_illegal(rod):
    state = make_state(3)
    assert not state.can_move(rod, rod)
    state.move_disk(A, rod)
    assert not state.can_move(rod, rod)


def test_move_disk_from_empty_source_is_noop():
    state = make_state(3)
    before = state.state_key()
    assert state.move_disk(B, C) is False
    assert state.state_key() == before
    assert state.moves_made == 0


def test_move_disk_does_not_check_ordering():
    state = make_state(3)
    state.move_disk(A, C)
    assert state.move_disk(A, C) is True
    assert state.rods[C] == [1, 2]


def test_checked_move_applies_legal_move():
    state = make_state(3)
    assert state.checked_move(A, C) == 1
    assert state.rods == [[3, 2], [], [1]]
    assert state.moves_made == 1


def test_checked_move_rejects_illegal_move():
    state = make_state(3)
    state.checked_move(A, C)
    before = state.state_key()
    with pytest.raises(IllegalMove):
        state.checked_move(A, C)
    assert state.state_key() == before
    assert state.moves_made == 1


def test_checked_move_rejects_empty_source():
    state = make_state(3)
    with pytest.raises(EmptySource):
        state.checked_move(B, A)


def test_checked_move_requires_game_in_progress():
    state = HanoiState()
    with pytest.raises(IllegalMove):
        state.checked_move(A, C)


def test_legal_moves_from_start():
    state = make_state(3)
    assert state.legal_moves() == [(A, B), (A, C)]


def test_render_snapshot():
    state = make_state(3)
    state.checked_move(A, B)
    assert state.render_snapshot() == [(A, (3, 2)), (B, (1,)), (C, ())]


def test_solves_three_disks_in_seven_moves():
    state = make_state(3)
    script = [
        (A, C, [[3, 2], [], [1]]),
        (A, B, [[3], [2], [1]]),
        (C, B, [[3], [2, 1], []]),
        (A, C, [[], [2, 1], [3]]),
        (B, A, [[1], [2], [3]]),
        (B, C, [[1], [], [3, 2]]),
        (A, C, [[], [], [3, 2, 1]]),
    ]
    for src, dst, expected in script:
        assert not state.is_won()
        assert state.can_move(src, dst)
        assert state.move_disk(src, dst)
        assert state.rods == expected

    assert state.is_won()
    assert state.moves_made == 7 == 2 ** 3 - 1
    assert state.phase is GamePhase.WON


def test_not_won_before_initialize():
    assert not HanoiState().is_won()


def test_not_won_with_disks_on_other_rods():
    state = make_state(3)
    state.rods = [[], [3, 2, 1], []]
    assert not state.is_won()
    state.rods = [[1], [], [3, 2]]
    assert not state.is_won()


def test_won_requires_decreasing_order():
    state = make_state(3)
    state.rods = [[], [], [1, 2, 3]]
    assert not state.is_won()
    state.rods = [[], [], [3, 2, 1]]
    assert state.is_won()


def test_abort_and_acknowledge():
    state = make_state(3)
    state.abort()
    assert state.phase is GamePhase.SETUP

    state.initialize(3)
    state.rods = [[1], [], [3, 2]]
    state.move_disk(A, C)
    assert state.phase is GamePhase.WON
    state.acknowledge()
    assert state.phase is GamePhase.SETUP


@pytest.mark.parametrize("n", [3, 4, 5, 6])
def test_random_legal_moves_keep_invariants(n):
    rng = random.Random(n)
    state = make_state(n)
    for _ in range(200):
        if state.phase is not GamePhase.PLAYING:
            break
        src, dst = rng.choice(state.legal_moves())
        state.checked_move(src, dst)

        assert Counter(d for rod in state.rods for d in rod) == Counter(range(1, n + 1))
        for rod in state.rods:
            assert all(lower > upper for lower, upper in zip(rod, rod[1:]))
            assert len(rod) <= state.max_disks


@pytest.mark.parametrize("text,expected", [("A", A), ("b", B), (" c ", C)])
def test_rod_id_parse(text, expected):
    assert RodId.parse(text) is expected


@pytest.mark.parametrize("text", ["D", "", "AB", "1"])
def test_rod_id_parse_rejects_unknown(text):
    with pytest.raises(UnrecognizedRod):
        RodId.parse(text)


def test_abort_empties_rods_so_moves_are_noops():
    state = make_state(3)
    state.checked_move(A, C)
    state.abort()
    assert state.rods == [[], [], []]
    assert state.num_disks == 0
    assert state.move_disk(A, B) is False
    assert state.moves_made == 1
    assert not state.is_won()


def test_rejected_move_logs_rod_names(caplog):
    state = make_state(3)
    state.checked_move(A, C)
    with caplog.at_level(logging.DEBUG, logger="hanoi_sim.state"):
        with pytest.raises(IllegalMove):
            state.checked_move(A, C)
    assert "Rejected illegal move A -> C" in caplog.text
