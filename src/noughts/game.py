"""
Game session: mode handling, turn order and the text shown to players.

The session is headless. A front-end feeds it cell indices, asks the
computer to move when ``computer_to_move`` is set and displays ``status()``,
``diagnostics()`` and ``render()``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import EMPTY, is_full, new_board, other_mark, winner, winning_line
from .config import MODE_AI, MODE_TWO_PLAYER, MODES
from .search import SearchResult, choose_move

MODE_LABELS = {MODE_AI: "Vs AI", MODE_TWO_PLAYER: "2 Player"}


class IllegalMoveError(ValueError):
    pass


@dataclass
class Game:
    mode: str = MODE_AI
    human: str = "X"
    board: List[str] = field(default_factory=new_board)
    current: str = "X"
    over: bool = False
    winner: Optional[str] = None
    win_line: Optional[Tuple[int, int, int]] = None
    last_search: Optional[SearchResult] = None

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode {self.mode!r}; expected one of {MODES}")
        self.computer = other_mark(self.human)

    @property
    def computer_to_move(self) -> bool:
        return self.mode == MODE_AI and not self.over and self.current == self.computer

    def reset(self) -> None:
        self.board = new_board()
        self.current = "X"
        self.over = False
        self.winner = None
        self.win_line = None
        self.last_search = None

    def set_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown mode {mode!r}; expected one of {MODES}")
        if mode != self.mode:
            self.mode = mode
            self.reset()

    def toggle_mode(self) -> None:
        self.set_mode(MODE_TWO_PLAYER if self.mode == MODE_AI else MODE_AI)

    def play(self, index: int) -> None:
        """Place the side-to-move's mark for a human player."""
        if self.over:
            raise IllegalMoveError("Game is over; reset to play again")
        if not 0 <= index <= 8:
            raise IllegalMoveError(f"Cell index must be 0-8, got {index}")
        if self.board[index] != EMPTY:
            raise IllegalMoveError(f"Cell {index} is already taken")
        if self.mode == MODE_AI and self.current != self.human:
            raise IllegalMoveError("Wait for the computer to move")
        self._place(index)

    def computer_move(self) -> SearchResult:
        if not self.computer_to_move:
            raise IllegalMoveError("It is not the computer's turn")
        result = choose_move(self.board, self.computer, self.human)
        if not result.found:
            # only reachable when the board has no empty cell
            self._finish()
            return result
        self.last_search = result
        self._place(result.index)
        return result

    def _place(self, index: int) -> None:
        self.board[index] = self.current
        if winner(self.board) is not None or is_full(self.board):
            self._finish()
        else:
            self.current = other_mark(self.current)

    def _finish(self) -> None:
        self.over = True
        self.winner = winner(self.board)
        self.win_line = winning_line(self.board)

    def status(self) -> str:
        if self.over:
            if self.winner is not None:
                return f"Game Over: {self.winner} wins!"
            return "Game Over: It's a draw!"
        return f"Mode: {MODE_LABELS[self.mode]} | Turn: {self.current}"

    def diagnostics(self) -> str:
        if self.mode == MODE_TWO_PLAYER:
            return "Currently in 2 Player mode. Switch back to Vs AI to see Minimax details."
        if self.last_search is None:
            return (
                f"When you play your move (as '{self.human}'), the AI ('{self.computer}') "
                "will use Minimax to choose its best response. "
                "This panel shows how many positions it checked."
            )
        r = self.last_search
        return (
            f"AI used Minimax and evaluated {r.nodes_explored} possible board states. "
            f"Best move score: {r.score}. (AI is '{self.computer}', Human is '{self.human}')"
        )


def render(board: List[str], highlight: Optional[Tuple[int, ...]] = None) -> str:
    """Three text rows; empty cells show their index, highlighted cells are bracketed."""
    marked = set(highlight or ())
    cells = []
    for i, v in enumerate(board):
        label = v if v != EMPTY else str(i)
        cells.append(f"[{label}]" if i in marked else f" {label} ")
    rows = ["|".join(cells[r:r + 3]) for r in range(0, 9, 3)]
    return "\n---+---+---\n".join(rows)
