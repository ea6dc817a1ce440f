"""
Interactive game loop over text streams.

The loop owns all input handling: it parses raw lines, rejects anything that
is not a legal cell index, and only then calls into the core. The core's
errors therefore never reach the player.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from .render import render, render_cell
from .search import minimax
from .state import GameState, Mark, Outcome, initial_state, is_legal, legal_actions, outcome, play

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("quit", "q", "exit")


@dataclass
class PlayArgs:
    human: str = "x"  # one of: "x", "o", "both", "none"
    show_hints: bool = False


def human_controls(human: str, side: Mark) -> bool:
    if human == "both":
        return True
    if human == "none":
        return False
    return (human == "x") == (side == Mark.FIRST)


def _read_action(state: GameState, stdin: TextIO, stdout: TextIO):
    """Prompt until a legal action is entered. Returns None on quit or EOF."""
    while True:
        stdout.write("Available actions: " + " ".join(map(str, legal_actions(state))) + "\n")
        stdout.write("> ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        raw = line.strip()
        if raw.lower() in QUIT_COMMANDS:
            return None
        try:
            action = int(raw)
        except ValueError:
            stdout.write(f"Please enter a cell number, not {raw!r}\n")
            continue
        if not is_legal(state, action):
            stdout.write(f"Cell {action} is not available\n")
            continue
        return action


def run_session(args: PlayArgs, stdin: TextIO, stdout: TextIO) -> Outcome:
    """Play one game, returning its outcome (IN_PROGRESS if the player quit)."""
    state = initial_state()
    logger.debug("Starting session human=%s hints=%s", args.human, args.show_hints)
    while not outcome(state).is_terminal:
        stdout.write(render(state) + "\n")
        side = state.side_to_play
        if human_controls(args.human, side):
            if args.show_hints:
                hint = minimax(state)
                stdout.write(f"Hint: best cell {hint.action}, value {hint.value:+d}\n")
            action = _read_action(state, stdin, stdout)
            if action is None:
                stdout.write("Bye\n")
                logger.debug("Player quit at %s", state)
                return outcome(state)
            stdout.write(f"Your action is {action}\n")
        else:
            result = minimax(state)
            action = result.action
            stdout.write(f"{render_cell(side)} (engine) plays {action}\n")
        state = play(state, action)
    stdout.write(render(state) + "\n")
    final = outcome(state)
    logger.debug("Session finished: %s", final.value)
    return final
