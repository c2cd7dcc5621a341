"""
Exhaustive minimax search for the computer player.

Scoring, from the computer's point of view:
- Computer wins: 10 - depth (faster wins score higher).
- Human wins: depth - 10 (slower losses score higher).
- Draw: 0.
Ties between moves go to the lowest cell index. No pruning, no caching:
every node below the position is visited and counted.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from .board import EMPTY, empty_cells, is_full, winner

WIN_SCORE = 10


@dataclass(frozen=True)
class SearchResult:
    index: Optional[int]
    score: Optional[int]
    nodes_explored: int

    @property
    def found(self) -> bool:
        return self.index is not None


NO_MOVE = SearchResult(index=None, score=None, nodes_explored=0)


class NodeCounter:
    """Visited-node accumulator scoped to one top-level search."""

    def __init__(self) -> None:
        self.count = 0


def score(
    board: List[str],
    depth: int,
    maximizing: bool,
    computer: str,
    human: str,
    counter: NodeCounter,
) -> int:
    counter.count += 1

    w = winner(board)
    if w == computer:
        return WIN_SCORE - depth
    if w == human:
        return depth - WIN_SCORE
    if is_full(board):
        return 0

    mark = computer if maximizing else human
    best: Optional[int] = None
    for i in empty_cells(board):
        board[i] = mark
        try:
            value = score(board, depth + 1, not maximizing, computer, human, counter)
        finally:
            board[i] = EMPTY
        if best is None:
            best = value
        elif maximizing:
            best = max(best, value)
        else:
            best = min(best, value)
    # non-terminal boards always have an empty cell
    assert best is not None
    return best


def choose_move(board: List[str], computer: str, human: str) -> SearchResult:
    """Pick the best cell for ``computer`` on ``board``.

    The caller's board is left untouched; the search mutates a private copy
    and undoes every trial placement. Returns NO_MOVE when no cell is empty.
    """
    if computer == human:
        raise ValueError(f"Computer and human marks must differ, both are {computer!r}")
    cells = list(board)
    counter = NodeCounter()
    best_index: Optional[int] = None
    best_score: Optional[int] = None
    for i in empty_cells(cells):
        cells[i] = computer
        try:
            s = score(cells, 0, False, computer, human, counter)
        finally:
            cells[i] = EMPTY
        if best_score is None or s > best_score:
            best_score = s
            best_index = i
    if best_index is None:
        return NO_MOVE
    logging.debug(
        "choose_move computer=%s index=%d score=%d nodes=%d",
        computer, best_index, best_score, counter.count,
    )
    return SearchResult(index=best_index, score=best_score, nodes_explored=counter.count)
