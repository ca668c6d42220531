"""Playing and taking back moves.

``apply_move`` returns a fresh Board and is what the search uses: every
branch owns its board. ``make_move``/``undo_move`` work in place for callers
that keep a single board around (the CLI game loop, tests).
"""

from negamate.core.board import EMPTY, Board, Color, Kind, Move, Piece


def make_move(board: Board, move: Move) -> Board:
    """Play ``move`` on ``board`` in place and return it."""
    if move.promotion:
        board.write(move.x1, move.y1, Piece(Kind.QUEEN, move.piece.color))
    else:
        board.write(move.x1, move.y1, move.piece)
    board.write(move.x0, move.y0, EMPTY)
    if move.en_passant:
        # the passed pawn sits beside the origin, on the destination file
        board.write(move.x1, move.y0, EMPTY)
    board.history.append(move)
    board.color = Color(-board.color)
    return board


def apply_move(board: Board, move: Move) -> Board:
    """Return the position after ``move``; ``board`` is left untouched."""
    child = board.copy()
    child.moves = []
    return make_move(child, move)


def undo_move(board: Board, move: Move) -> Board:
    """Take back ``move``, which must be the last move played on ``board``."""
    if not board.history or board.history[-1] != move:
        raise ValueError(f"{move} is not the last move played")
    board.history.pop()
    board.write(move.x0, move.y0, move.piece)
    board.write(move.x1, move.y1, move.captured)
    if move.en_passant:
        board.write(move.x1, move.y0, Piece(Kind.PAWN, Color(-move.piece.color)))
    board.color = Color(-board.color)
    return board
