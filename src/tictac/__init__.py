"""tictac package.

Tic-tac-toe state model, exact minimax search, and a small interactive CLI.

Convenience imports are exposed for common workflows.
"""

from .errors import IllegalMoveError, InvalidStateError
from .search import SearchResult, minimax, score, solve_all_reachable
from .state import (
    GameState,
    Mark,
    Outcome,
    initial_state,
    is_legal,
    is_terminal,
    legal_actions,
    outcome,
    parse_board,
    play,
)

__all__ = [
    "GameState",
    "Mark",
    "Outcome",
    "SearchResult",
    "IllegalMoveError",
    "InvalidStateError",
    "initial_state",
    "legal_actions",
    "is_legal",
    "play",
    "outcome",
    "is_terminal",
    "parse_board",
    "score",
    "minimax",
    "solve_all_reachable",
]
