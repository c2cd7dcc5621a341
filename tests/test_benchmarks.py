import pytest

from noughts.board import parse_board
from noughts.search import choose_move

try:
    import pytest_benchmark  # noqa: F401
    HAS_BENCH = True
except ImportError:
    HAS_BENCH = False


@pytest.mark.skipif(not HAS_BENCH, reason="pytest-benchmark not installed")
def test_benchmark_midgame_search(benchmark):
    board = parse_board("X...O....")

    def _search():
        return choose_move(board, "X", "O")

    res = benchmark(_search)
    assert res.found
    assert res.nodes_explored > 0
