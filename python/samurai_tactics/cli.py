"""Command-line interface for a hot-seat game of Samurai Tactics."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Dict, Optional, Tuple, Union

from .game.board import BOARD_COLS, BOARD_ROWS, has_any_move
from .game.pieces import Kind, Owner, Piece
from .game.rules import GameSession, RenderState, SelectResult


SYMBOLS: Dict[Kind, str] = {
    Kind.SAMURAI: "🤺",
    Kind.RONIN: "⚔️",
    Kind.DAIMYO: "👹",
    Kind.NINJA: "🥷",
}

LETTERS: Dict[Kind, str] = {
    Kind.SAMURAI: "S",
    Kind.RONIN: "R",
    Kind.DAIMYO: "D",
    Kind.NINJA: "N",
}

RESET = "reset"
QUIT = "quit"

Command = Union[Tuple[int, int], str]


def _piece_label(piece: Piece, ascii_only: bool) -> str:
    if ascii_only:
        letter = LETTERS[piece.kind]
        return letter if piece.owner is Owner.RED else letter.lower()
    return f"{SYMBOLS[piece.kind]}{piece.owner.value[0]}"


def render_board(state: RenderState, ascii_only: bool = False) -> str:
    lines = ["    " + "  ".join(f"{col:^3}" for col in range(BOARD_COLS))]
    for row in range(BOARD_ROWS):
        cells = []
        for col in range(BOARD_COLS):
            piece = state.board.piece_at(row, col)
            if piece is not None:
                label = _piece_label(piece, ascii_only)
            elif (row, col) in state.legal_destinations:
                label = "*"
            else:
                label = "."
            if (row, col) == state.selected:
                label = f"[{label}]"
            elif (row, col) in state.legal_destinations and piece is not None:
                label = f"x{label}"
            cells.append(f"{label:^3}")
        lines.append(f"{row:>2}  " + "  ".join(cells))
    return "\n".join(lines)


def parse_command(text: str) -> Optional[Command]:
    """Turn a line of input into a square, ``"reset"``, ``"quit"`` or ``None``."""

    value = text.strip().lower()
    if value in {"q", "quit", "exit"}:
        return QUIT
    if value in {"r", "reset", "restart"}:
        return RESET

    parts = value.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError:
        return None
    return row, col


def _prompt_command(prompt: str) -> Command:
    while True:
        try:
            value = input(prompt)
        except EOFError:
            return QUIT

        command = parse_command(value)
        if command is not None:
            return command
        print("Please enter 'row col', 'r' to restart or 'q' to quit.")


def describe(result: SelectResult) -> Optional[str]:
    if result.action == "ignored":
        return "Select one of your own pieces."
    if result.action == "deselected":
        return "Selection cleared."
    move = result.move
    if move is None:
        return None
    text = f"{move.piece} moved {move.origin} -> {move.target}."
    if move.captured is not None:
        text += f" Captured {move.captured}."
    return text


def play(session: GameSession, ascii_only: bool = False) -> int:
    while True:
        state = session.get_render_state()
        print()
        print(render_board(state, ascii_only))
        print(state.status_text)

        if state.winner is None and not has_any_move(state.board, state.current_player):
            print(f"{state.current_player.value} has no legal moves. Type 'r' to restart.")

        prompt = "Play again? ('r' to restart, 'q' to quit): " if state.winner else "Select square (row col): "
        command = _prompt_command(prompt)
        if command == QUIT:
            break
        if command == RESET:
            session.reset()
            continue

        assert isinstance(command, tuple)
        message = describe(session.select(*command))
        if message:
            print(message)

    print("Thanks for playing!")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Samurai Tactics hot-seat game")
    parser.add_argument("--ascii", action="store_true", help="draw pieces as letters instead of symbols")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    print("Samurai Tactics: Red moves first. Capture the enemy Daimyo to win.")
    return play(GameSession(), ascii_only=args.ascii)


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    sys.exit(main())
