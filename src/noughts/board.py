"""
Board representation, win-line checks and text (de)serialization.

- A board is a list of 9 cells in row-major order: "" (empty), "X" or "O".
- X always starts, so a reachable board has X count == O count (X to move)
  or X count == O count + 1 (O to move).
"""
from typing import List, Optional, Tuple

EMPTY = ""
MARKS = ("X", "O")

WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

_EMPTY_CHARS = ".-"


def new_board() -> List[str]:
    return [EMPTY] * 9


def winning_line(board: List[str]) -> Optional[Tuple[int, int, int]]:
    """Return the first complete line in WIN_LINES order, or None."""
    for line in WIN_LINES:
        a, b, c = line
        v = board[a]
        if v != EMPTY and v == board[b] and v == board[c]:
            return line
    return None


def winner(board: List[str]) -> Optional[str]:
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_full(board: List[str]) -> bool:
    return EMPTY not in board


def is_draw(board: List[str]) -> bool:
    return is_full(board) and winner(board) is None


def empty_cells(board: List[str]) -> List[int]:
    return [i for i, v in enumerate(board) if v == EMPTY]


def other_mark(mark: str) -> str:
    if mark not in MARKS:
        raise ValueError(f"Unknown mark: {mark!r}")
    return "O" if mark == "X" else "X"


def side_to_move(board: List[str]) -> str:
    return "X" if board.count("X") == board.count("O") else "O"


def is_valid_state(board: List[str]) -> bool:
    if len(board) != 9 or any(v not in (EMPTY,) + MARKS for v in board):
        return False
    x_count, o_count = board.count("X"), board.count("O")
    if not (x_count == o_count or x_count == o_count + 1):
        return False

    def wins(mark: str) -> bool:
        return any(all(board[i] == mark for i in line) for line in WIN_LINES)

    x_wins, o_wins = wins("X"), wins("O")
    if x_wins and o_wins:
        return False
    if x_wins and x_count != o_count + 1:
        return False
    if o_wins and x_count != o_count:
        return False
    return True


def parse_board(text: str) -> List[str]:
    """Parse a 9-character board such as ``XX..O..O.``.

    ``.`` and ``-`` both denote an empty cell. Raises ValueError on a wrong
    length or an unknown character.
    """
    raw = text.strip()
    if len(raw) != 9:
        raise ValueError(f"Board must be 9 characters, got {len(raw)}: {raw!r}")
    cells: List[str] = []
    for ch in raw:
        if ch in MARKS:
            cells.append(ch)
        elif ch in _EMPTY_CHARS:
            cells.append(EMPTY)
        else:
            raise ValueError(f"Invalid board character {ch!r}; use X, O or '.'")
    return cells


def serialize_board(board: List[str]) -> str:
    return ''.join(v if v != EMPTY else '.' for v in board)
