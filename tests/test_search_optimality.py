import pytest

from noughts.board import EMPTY, is_full, new_board, serialize_board, winner
from noughts.search import choose_move


def _outcomes(board, engine, opponent, to_move, cache):
    """Set of game results reachable when the opponent tries every line."""
    w = winner(board)
    if w is not None or is_full(board):
        return {w}
    results = set()
    if to_move == engine:
        key = serialize_board(board)
        if key not in cache:
            cache[key] = choose_move(board, engine, opponent).index
        moves = [cache[key]]
        nxt = opponent
    else:
        moves = [i for i, v in enumerate(board) if v == EMPTY]
        nxt = engine
    for i in moves:
        board[i] = to_move
        results |= _outcomes(board, engine, opponent, nxt, cache)
        board[i] = EMPTY
    return results


@pytest.mark.parametrize("engine,opponent", [("X", "O"), ("O", "X")])
def test_engine_never_loses_from_empty_board(engine, opponent):
    results = _outcomes(new_board(), engine, opponent, "X", {})
    assert opponent not in results
    assert None in results  # perfect opponents reach a draw
