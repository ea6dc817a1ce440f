from __future__ import annotations

import argparse
import logging
import sys

from . import settings
from .errors import InvalidStateError
from .search import minimax
from .session import PlayArgs, run_session
from .state import outcome, parse_board


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictac", description="Tic-tac-toe engine with exact minimax search")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment info and exit",
    )

    p_play = sub.add_parser("play", help="Play an interactive game on stdin/stdout")
    p_play.add_argument(
        "--human",
        choices=settings.HUMAN_CHOICES,
        default=None,
        help="Which side(s) a human controls (default: $TICTAC_HUMAN or x)",
    )
    p_play.add_argument("--hints", action="store_true", help="Show the engine's best move on human turns")

    p_sol = sub.add_parser("solve", help="Solve a board via minimax from the side to move")
    p_sol.add_argument("--board", help="Board string, e.g., 100020000 (omit with --stdin)")
    p_sol.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    return p


def _print_info() -> None:
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    print(f"tictac={_version()}")
    print(f"log_level={logging.getLevelName(settings.log_level())} human={settings.default_human()}")


def _version() -> str:
    try:
        from importlib.metadata import version as _ver

        return _ver("tictac")
    except Exception:
        return "unknown"


def _solve_stream() -> int:
    import csv as _csv

    w = _csv.writer(sys.stdout)
    w.writerow(["board", "status", "value", "best_action"])
    for line in sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            state = parse_board(raw)
        except ValueError:
            logging.debug("Skipping invalid board %r", raw)
            continue
        res = outcome(state)
        if res.is_terminal:
            w.writerow([raw, res.value, "", ""])
            continue
        result = minimax(state)
        w.writerow([raw, res.value, result.value, result.action])
    return 0


def _solve_one(board: str | None) -> int:
    try:
        state = parse_board(board or "")
    except InvalidStateError:
        logging.error("Board is not a valid reachable state.")
        return 2
    except ValueError:
        logging.error("Invalid board string. Must be 9 chars of 0/1/2.")
        return 2
    res = outcome(state)
    if res.is_terminal:
        logging.error("Board is already finished (%s); nothing to solve.", res.value)
        return 2
    result = minimax(state)
    logging.info("to_move=%d value=%d best=%d", state.side_to_play, result.value, result.action)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else settings.log_level(),
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        print(_version())
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        args = PlayArgs(human=ns.human or settings.default_human(), show_hints=ns.hints)
        result = run_session(args, sys.stdin, sys.stdout)
        logging.debug("outcome=%s", result.value)
        return 0

    if ns.cmd == "solve":
        if ns.stdin:
            return _solve_stream()
        return _solve_one(ns.board)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
