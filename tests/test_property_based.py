from typing import List

import pytest
try:
    from hypothesis import assume, given, settings, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

from noughts.board import EMPTY, WIN_LINES, empty_cells, is_full, new_board, side_to_move, winner, winning_line
from noughts.search import choose_move


def _play(order: List[int], n: int) -> List[str]:
    b = new_board()
    mark = "X"
    for i in order[:n]:
        if winner(b) is not None:
            break
        b[i] = mark
        mark = "O" if mark == "X" else "X"
    return b


@given(st.lists(st.sampled_from(["", "X", "O"]), min_size=9, max_size=9))
def test_winner_agrees_with_winning_line(board: List[str]):
    line = winning_line(board)
    w = winner(board)
    if line is None:
        assert w is None
        assert not any(board[a] != EMPTY and board[a] == board[b] == board[c] for a, b, c in WIN_LINES)
    else:
        assert line in WIN_LINES
        assert w == board[line[0]] == board[line[1]] == board[line[2]]
        assert w != EMPTY


@settings(max_examples=60, deadline=None)
@given(st.permutations(list(range(9))), st.integers(min_value=4, max_value=8))
def test_choose_move_on_reachable_midgames(order: List[int], n: int):
    b = _play(order, n)
    assume(winner(b) is None and not is_full(b))
    computer = side_to_move(b)
    human = "O" if computer == "X" else "X"
    snapshot = list(b)

    res = choose_move(b, computer, human)
    assert b == snapshot
    assert res.index in empty_cells(b)
    assert -10 <= res.score <= 10
    assert res.nodes_explored >= len(empty_cells(b))
    assert choose_move(b, computer, human) == res

    # an immediate win is always taken
    for i in empty_cells(b):
        b[i] = computer
        wins_now = winner(b) == computer
        b[i] = EMPTY
        if wins_now:
            assert res.score == 10
            b[res.index] = computer
            assert winner(b) == computer
            b[res.index] = EMPTY
            break
