"""
State model: board representation, rules, outcome classification, parsing.
Notes:
- A position is 9 cells in row-major order (0,1,2 / 3,4,5 / 6,7,8) plus the side to move.
- Cell values: 0=empty, 1=First (X), 2=Second (O). First always starts.
- A "ply" is a half-move; each ply adds exactly one mark and flips the side.
- GameState is a frozen value. play() returns a new state and never touches its input.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Tuple

from .errors import IllegalMoveError, InvalidStateError

N_CELLS = 9

WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


class Mark(IntEnum):
    EMPTY = 0
    FIRST = 1
    SECOND = 2

    def opponent(self) -> "Mark":
        if self is Mark.FIRST:
            return Mark.SECOND
        if self is Mark.SECOND:
            return Mark.FIRST
        raise ValueError("EMPTY has no opponent")


class Outcome(Enum):
    FIRST_WON = "first_won"
    SECOND_WON = "second_won"
    DRAW = "draw"
    IN_PROGRESS = "in_progress"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS


@dataclass(frozen=True)
class GameState:
    cells: Tuple[Mark, ...]
    side_to_play: Mark = Mark.FIRST

    def __post_init__(self) -> None:
        if len(self.cells) != N_CELLS:
            raise InvalidStateError(f"Expected {N_CELLS} cells, got {len(self.cells)}")
        if self.side_to_play not in (Mark.FIRST, Mark.SECOND):
            raise InvalidStateError(f"Invalid side to play: {self.side_to_play!r}")
        # normalise plain ints so equality and hashing only see Mark members
        object.__setattr__(self, "cells", tuple(Mark(c) for c in self.cells))
        object.__setattr__(self, "side_to_play", Mark(self.side_to_play))

    def __str__(self) -> str:
        return serialize(self)


def initial_state() -> GameState:
    return GameState(cells=(Mark.EMPTY,) * N_CELLS, side_to_play=Mark.FIRST)


def legal_actions(state: GameState) -> Tuple[int, ...]:
    return tuple(i for i, v in enumerate(state.cells) if v == Mark.EMPTY)


def is_legal(state: GameState, action: int) -> bool:
    return 0 <= action < N_CELLS and state.cells[action] == Mark.EMPTY


def play(state: GameState, action: int) -> GameState:
    """Return the position after the side to move marks ``action``.

    Raises IllegalMoveError for an out-of-range or occupied cell, and for any
    move from a finished position.
    """
    if not is_legal(state, action):
        raise IllegalMoveError(f"Illegal action {action!r} on board {serialize(state)}")
    if outcome(state).is_terminal:
        raise IllegalMoveError(f"Game is over on board {serialize(state)}")
    cells = list(state.cells)
    cells[action] = state.side_to_play
    return GameState(cells=tuple(cells), side_to_play=state.side_to_play.opponent())


def has_line(cells: Tuple[Mark, ...], mark: Mark) -> bool:
    return any(all(cells[i] == mark for i in pattern) for pattern in WIN_PATTERNS)


def outcome(state: GameState) -> Outcome:
    cells = state.cells
    if has_line(cells, Mark.FIRST):
        return Outcome.FIRST_WON
    if has_line(cells, Mark.SECOND):
        return Outcome.SECOND_WON
    if Mark.EMPTY not in cells:
        return Outcome.DRAW
    return Outcome.IN_PROGRESS


def is_terminal(result: Outcome) -> bool:
    return result.is_terminal


def piece_counts(cells: Iterable[int]) -> Tuple[int, int]:
    cells = list(cells)
    return cells.count(Mark.FIRST), cells.count(Mark.SECOND)


def is_valid_cells(cells: Iterable[int]) -> bool:
    """True if ``cells`` can arise from alternating play starting with First."""
    cells = tuple(Mark(c) for c in cells)
    if len(cells) != N_CELLS:
        return False
    first, second = piece_counts(cells)
    if not (first == second or first == second + 1):
        return False
    first_line = has_line(cells, Mark.FIRST)
    second_line = has_line(cells, Mark.SECOND)
    if first_line and second_line:
        return False
    if first_line and first != second + 1:
        return False
    if second_line and first != second:
        return False
    return True


def serialize(state: GameState) -> str:
    return ''.join(str(int(c)) for c in state.cells)


def parse_board(text: str) -> GameState:
    """Build a position from a 9-digit string such as ``100020000``.

    The side to move is derived from the mark counts. Raises ValueError for
    malformed text and InvalidStateError for positions that alternating play
    cannot reach.
    """
    raw = text.strip()
    if len(raw) != N_CELLS or any(c not in "012" for c in raw):
        raise ValueError(f"Board must be {N_CELLS} chars of 0/1/2, got {text!r}")
    cells = tuple(Mark(int(c)) for c in raw)
    if not is_valid_cells(cells):
        raise InvalidStateError(f"Board {raw} is not reachable by legal play")
    first, second = piece_counts(cells)
    side = Mark.FIRST if first == second else Mark.SECOND
    return GameState(cells=cells, side_to_play=side)
