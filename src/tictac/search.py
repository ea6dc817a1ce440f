"""
Exact game-theoretic search (minimax with memoization).
Conventions:
- Values are from First's point of view: +1 First wins, -1 Second wins, 0 draw.
- First maximizes, Second minimizes. No depth discount: every win is worth the same.
- Tie-break: among equally good actions the smallest cell index is chosen.
- The memo table is keyed on the whole GameState, i.e. exactly (cells, side_to_play).
"""
from __future__ import annotations

import logging
from collections import deque
from functools import lru_cache
from typing import Dict, NamedTuple, Optional

from .errors import InvalidStateError
from .state import GameState, Mark, Outcome, initial_state, legal_actions, outcome, play, serialize

logger = logging.getLogger(__name__)

_SCORES = {
    Outcome.FIRST_WON: 1,
    Outcome.SECOND_WON: -1,
    Outcome.DRAW: 0,
}


class SearchResult(NamedTuple):
    action: Optional[int]
    value: int


def score(result: Outcome) -> int:
    try:
        return _SCORES[result]
    except KeyError:
        raise InvalidStateError(f"Cannot score a non-terminal outcome: {result}") from None


@lru_cache(maxsize=None)
def _search(state: GameState) -> SearchResult:
    res = outcome(state)
    if res.is_terminal:
        return SearchResult(None, score(res))
    maximizing = state.side_to_play == Mark.FIRST
    best: Optional[SearchResult] = None
    for action in legal_actions(state):
        value = _search(play(state, action)).value
        # strict comparison keeps the earliest (smallest) index on ties
        if best is None or (value > best.value if maximizing else value < best.value):
            best = SearchResult(action, value)
    assert best is not None
    return best


def minimax(state: GameState) -> SearchResult:
    """Return the optimal action for the side to move and the position's value.

    Raises InvalidStateError when the position is already finished.
    """
    res = outcome(state)
    if res.is_terminal:
        raise InvalidStateError(f"minimax called on finished position {serialize(state)} ({res.value})")
    return _search(state)


def clear_cache() -> None:
    _search.cache_clear()


def cache_info():
    return _search.cache_info()


def solve_all_reachable() -> Dict[str, SearchResult]:
    """Enumerate positions reachable from the empty board and solve the non-terminal ones."""
    start = initial_state()
    q = deque([start])
    seen = {start}
    solved: Dict[str, SearchResult] = {}
    while q:
        s = q.popleft()
        if outcome(s).is_terminal:
            continue
        solved[serialize(s)] = minimax(s)
        for mv in legal_actions(s):
            child = play(s, mv)
            if child not in seen:
                seen.add(child)
                q.append(child)
    logger.debug("Reached %d positions, solved %d non-terminal; cache=%s", len(seen), len(solved), cache_info())
    return solved
