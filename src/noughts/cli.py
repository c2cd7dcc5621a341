from __future__ import annotations

import argparse
import logging
import time
from typing import Callable, List

from .board import (
    is_full,
    is_valid_state,
    other_mark,
    parse_board,
    serialize_board,
    side_to_move,
    winner,
    winning_line,
)
from .config import MODES, load_settings
from .game import Game, IllegalMoveError, render
from .search import choose_move


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="noughts", description="Tic-tac-toe with a minimax opponent")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    p_play = sub.add_parser("play", help="Play an interactive game in the terminal")
    p_play.add_argument(
        "--mode",
        choices=list(MODES),
        default=None,
        help="ai: play against the computer, 2p: two humans (default: ai or $NOUGHTS_MODE)",
    )
    p_play.add_argument(
        "--human",
        choices=["X", "O"],
        default=None,
        help="Mark played by the human in ai mode; X always moves first (default: X)",
    )
    p_play.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds to wait before the computer moves (default: 0.25)",
    )

    p_move = sub.add_parser("move", help="Ask the engine for the best move on a board")
    p_move.add_argument("--board", help="Board string, e.g., XX..O..O. (omit with --stdin)")
    p_move.add_argument(
        "--computer",
        choices=["X", "O"],
        default=None,
        help="Mark the engine plays (default: side to move)",
    )
    p_move.add_argument(
        "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
    )

    p_status = sub.add_parser("status", help="Show winner, winning line and fullness of a board")
    p_status.add_argument("--board", required=True, help="Board string, e.g., XXXOO....")

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["pytest", "hypothesis", "pytest_benchmark"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def play_loop(
    game: Game,
    delay: float = 0.0,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Drive a session from line input: 0-8 to move, r reset, m toggle mode, q quit."""
    write(game.diagnostics())
    while True:
        while game.computer_to_move:
            if delay > 0:
                time.sleep(delay)
            result = game.computer_move()
            if result.found:
                write(f"Computer plays {result.index}")
            write(game.diagnostics())
        write(render(game.board, game.win_line))
        write(game.status())
        if game.over:
            write("Enter r to play again or q to quit.")
        try:
            raw = read("> ")
        except EOFError:
            return 0
        cmd = raw.strip().lower()
        if not cmd:
            continue
        if cmd in ("q", "quit"):
            return 0
        if cmd == "r":
            game.reset()
            continue
        if cmd == "m":
            game.toggle_mode()
            write(game.diagnostics())
            continue
        try:
            index = int(cmd)
        except ValueError:
            logging.warning("Unknown input %r; type a cell 0-8, r, m or q", raw.strip())
            continue
        try:
            game.play(index)
        except IllegalMoveError as exc:
            logging.warning("%s", exc)


def _read_decidable_board(raw: str) -> List[str]:
    b = parse_board(raw)
    if not is_valid_state(b):
        raise ValueError("Board is not a valid reachable state.")
    if winner(b) is not None or is_full(b):
        raise ValueError("Board is already decided; no move to search.")
    return b


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("noughts"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "play":
        try:
            settings = load_settings()
            if ns.mode is not None:
                settings.mode = ns.mode
            if ns.human is not None:
                settings.human = ns.human
            if ns.delay is not None:
                settings.ai_delay = ns.delay
            settings.validate()
        except ValueError as exc:
            logging.error("%s", exc)
            return 2
        logging.debug("settings=%s", settings)
        game = Game(mode=settings.mode, human=settings.human)
        return play_loop(game, delay=settings.ai_delay)

    if ns.cmd == "move":
        import sys as _sys
        if ns.stdin:
            import csv as _csv
            w = _csv.writer(_sys.stdout)
            w.writerow(["board", "computer", "index", "score", "nodes"])
            for line in _sys.stdin:
                raw = line.strip()
                if not raw:
                    continue
                try:
                    b = _read_decidable_board(raw)
                except ValueError:
                    continue
                computer = ns.computer or side_to_move(b)
                res = choose_move(b, computer, other_mark(computer))
                w.writerow([serialize_board(b), computer, res.index, res.score, res.nodes_explored])
            return 0
        try:
            b = _read_decidable_board(ns.board or "")
        except ValueError as exc:
            logging.error("%s", exc)
            return 2
        computer = ns.computer or side_to_move(b)
        res = choose_move(b, computer, other_mark(computer))
        logging.info(
            "computer=%s index=%s score=%s nodes=%d",
            computer,
            res.index,
            res.score,
            res.nodes_explored,
        )
        return 0

    if ns.cmd == "status":
        try:
            b = parse_board(ns.board)
        except ValueError as exc:
            logging.error("%s", exc)
            return 2
        line = winning_line(b)
        logging.info(
            "winner=%s line=%s full=%s",
            winner(b) or "none",
            list(line) if line else "none",
            is_full(b),
        )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
