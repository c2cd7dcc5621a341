"""noughts package.

Tic-tac-toe with an exhaustive minimax opponent, a headless game session
and a terminal CLI.

Convenience imports are exposed for common workflows.
"""

from .board import WIN_LINES, is_full, winner, winning_line
from .game import Game, IllegalMoveError
from .search import NO_MOVE, SearchResult, choose_move

__all__ = [
    "WIN_LINES",
    "winner",
    "winning_line",
    "is_full",
    "choose_move",
    "SearchResult",
    "NO_MOVE",
    "Game",
    "IllegalMoveError",
]
