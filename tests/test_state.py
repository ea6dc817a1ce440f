import pytest

from tictac.errors import IllegalMoveError, InvalidStateError
from tictac.state import (
    GameState,
    Mark,
    Outcome,
    initial_state,
    is_legal,
    is_terminal,
    is_valid_cells,
    legal_actions,
    outcome,
    parse_board,
    play,
    serialize,
)


def test_initial_state_is_empty_with_first_to_move():
    s = initial_state()
    assert s.cells == (Mark.EMPTY,) * 9
    assert s.side_to_play == Mark.FIRST
    assert legal_actions(s) == tuple(range(9))
    assert outcome(s) == Outcome.IN_PROGRESS


def test_play_sets_mark_and_flips_side():
    s = initial_state()
    s1 = play(s, 4)
    assert s1.cells[4] == Mark.FIRST
    assert s1.side_to_play == Mark.SECOND
    s2 = play(s1, 0)
    assert s2.cells[0] == Mark.SECOND
    assert s2.side_to_play == Mark.FIRST
    # input is untouched
    assert s == initial_state()
    assert s1.cells[0] == Mark.EMPTY


def test_legal_actions_ascending_and_skip_occupied():
    s = play(play(initial_state(), 4), 0)
    assert legal_actions(s) == (1, 2, 3, 5, 6, 7, 8)


def test_legal_actions_empty_on_full_board():
    s = parse_board("112221112")
    assert legal_actions(s) == ()
    assert outcome(s) == Outcome.DRAW


@pytest.mark.parametrize("action", [-1, 9, 100])
def test_is_legal_rejects_out_of_range(action: int):
    assert is_legal(initial_state(), action) is False


@pytest.mark.parametrize("action", [-1, 9])
def test_play_out_of_range_raises(action: int):
    with pytest.raises(IllegalMoveError):
        play(initial_state(), action)


def test_play_occupied_cell_raises_and_keeps_state():
    s = play(initial_state(), 3)
    before = s.cells
    with pytest.raises(IllegalMoveError):
        play(s, 3)
    assert s.cells == before
    assert s.side_to_play == Mark.SECOND


def test_play_after_game_over_raises():
    s = parse_board("111220000")
    assert outcome(s) == Outcome.FIRST_WON
    # empty cells remain listed even though no move may be made
    assert legal_actions(s) == (5, 6, 7, 8)
    with pytest.raises(IllegalMoveError):
        play(s, 5)


@pytest.mark.parametrize(
    "board, expected",
    [
        ("111220000", Outcome.FIRST_WON),   # top row
        ("120120100", Outcome.FIRST_WON),   # left column
        ("120210001", Outcome.FIRST_WON),   # main diagonal
        ("110010222", Outcome.SECOND_WON),  # bottom row
        ("112021200", Outcome.SECOND_WON),  # anti-diagonal
        ("112221112", Outcome.DRAW),
        ("100020000", Outcome.IN_PROGRESS),
    ],
)
def test_outcome_known_positions(board: str, expected: Outcome):
    assert outcome(parse_board(board)) == expected


def test_is_terminal():
    assert is_terminal(Outcome.FIRST_WON)
    assert is_terminal(Outcome.SECOND_WON)
    assert is_terminal(Outcome.DRAW)
    assert not is_terminal(Outcome.IN_PROGRESS)


def test_states_are_hashable_values():
    a = play(initial_state(), 4)
    b = play(initial_state(), 4)
    assert a == b
    assert hash(a) == hash(b)
    assert a is not b
    assert GameState(cells=tuple([0] * 9)) == initial_state()


def test_state_rejects_wrong_length_and_side():
    with pytest.raises(InvalidStateError):
        GameState(cells=(Mark.EMPTY,) * 8)
    with pytest.raises(InvalidStateError):
        GameState(cells=(Mark.EMPTY,) * 9, side_to_play=Mark.EMPTY)


def test_parse_board_derives_side_and_roundtrips():
    s = parse_board("100020000")
    assert s.side_to_play == Mark.FIRST
    assert serialize(s) == "100020000"
    assert str(s) == "100020000"
    assert parse_board("100000000").side_to_play == Mark.SECOND


@pytest.mark.parametrize("bad", ["abc", "0123456789", "12345678x", ""])
def test_parse_board_malformed(bad: str):
    with pytest.raises(ValueError):
        parse_board(bad)


@pytest.mark.parametrize("bad", ["111222111", "220000000", "111220200", "222111000"])
def test_parse_board_unreachable(bad: str):
    with pytest.raises(InvalidStateError):
        parse_board(bad)
    assert not is_valid_cells([int(c) for c in bad])
