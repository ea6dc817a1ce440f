"""Plain-text rendering of a position and its status line."""
from __future__ import annotations

from .state import GameState, Mark, Outcome, outcome

_SYMBOLS = {Mark.EMPTY: " ", Mark.FIRST: "X", Mark.SECOND: "O"}


def render_cell(mark: Mark) -> str:
    return _SYMBOLS[Mark(mark)]


def status_label(state: GameState) -> str:
    res = outcome(state)
    if res is Outcome.FIRST_WON:
        return "X won"
    if res is Outcome.SECOND_WON:
        return "O won"
    if res is Outcome.DRAW:
        return "Game ended with a draw"
    return f"{render_cell(state.side_to_play)} to play"


def render(state: GameState) -> str:
    rows = []
    for r in range(3):
        row = state.cells[3 * r:3 * r + 3]
        rows.append("|" + " ".join(render_cell(c) for c in row) + "|")
    return "\n".join(["-------", *rows, "-------", status_label(state)])
