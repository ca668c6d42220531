"""Pseudo-legal move generation.

Moves are appended in cell-scan order (0..63) and, inside a piece, in the
fixed direction order of its handler. Nothing here checks whether the mover's
own king is left capturable.
"""

from typing import Callable, Dict, List

from negamate.core.board import WIDTH, Board, Color, Kind, Move, Piece

KNIGHT_OFFSETS = ((2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2), (1, 2))
BISHOP_RAYS = ((1, 1), (-1, 1), (-1, -1), (1, -1))
ROOK_RAYS = ((0, 1), (-1, 0), (0, -1), (1, 0))


def pawn_start_rank(color: Color) -> int:
    """Rank a pawn of ``color`` starts on: 1 for White, 6 for Black."""
    return int(3.5 - 2.5 * color)


def is_back_rank(y: int) -> bool:
    return y == 0 or y == WIDTH - 1


def _step(b: Board, piece: Piece, x: int, y: int, nx: int, ny: int) -> bool:
    """Add a move to (nx, ny) unless it is off-board or friendly.

    Returns True when the target was empty, i.e. a ray may continue.
    """
    dest = b.read(nx, ny)
    if dest is None or dest.color == piece.color:
        return False
    capture = not dest.is_empty()
    b.moves.append(Move(piece, x, y, dest, nx, ny, capture=capture))
    return not capture


def _rays(b: Board, piece: Piece, x: int, y: int, rays):
    for dx, dy in rays:
        for i in range(1, WIDTH):
            if not _step(b, piece, x, y, x + dx * i, y + dy * i):
                break


def _was_double_push(b: Board, color: Color, x: int, y: int) -> bool:
    """True if the last move was an enemy pawn jumping two ranks to (x, y)."""
    last = b.last_move()
    if last is None:
        return False
    return (
        last.piece == Piece(Kind.PAWN, Color(-color))
        and not last.capture
        and (last.x0, last.y0) == (x, y + 2 * color)
        and (last.x1, last.y1) == (x, y)
    )


def calc_pawn(b: Board, x: int, y: int, piece: Piece):
    color = piece.color
    fy = y + color
    promotion = is_back_rank(fy)

    ahead = b.read(x, fy)
    if ahead is not None and ahead.is_empty():
        b.moves.append(Move(piece, x, y, ahead, x, fy, promotion=promotion))
        if y == pawn_start_rank(color):
            # the landing cell must be empty too; a pawn never takes straight ahead
            two = b.read(x, y + 2 * color)
            if two is not None and two.is_empty():
                b.moves.append(Move(piece, x, y, two, x, y + 2 * color))

    for dx in (1, -1):
        dest = b.read(x + dx, fy)
        if dest is not None and not dest.is_empty() and dest.color != color:
            b.moves.append(Move(piece, x, y, dest, x + dx, fy, capture=True, promotion=promotion))

    for dx in (-1, 1):
        dest = b.read(x + dx, fy)
        if dest is not None and dest.is_empty() and _was_double_push(b, color, x + dx, y):
            b.moves.append(Move(piece, x, y, dest, x + dx, fy, capture=True, en_passant=True))


def calc_knight(b: Board, x: int, y: int, piece: Piece):
    for dx, dy in KNIGHT_OFFSETS:
        _step(b, piece, x, y, x + dx, y + dy)


def calc_bishop(b: Board, x: int, y: int, piece: Piece):
    _rays(b, piece, x, y, BISHOP_RAYS)


def calc_rook(b: Board, x: int, y: int, piece: Piece):
    _rays(b, piece, x, y, ROOK_RAYS)


def calc_queen(b: Board, x: int, y: int, piece: Piece):
    _rays(b, piece, x, y, BISHOP_RAYS)
    _rays(b, piece, x, y, ROOK_RAYS)


def calc_king(b: Board, x: int, y: int, piece: Piece):
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx or dy:
                _step(b, piece, x, y, x + dx, y + dy)


GENERATORS: Dict[Kind, Callable[[Board, int, int, Piece], None]] = {
    Kind.PAWN: calc_pawn,
    Kind.KNIGHT: calc_knight,
    Kind.BISHOP: calc_bishop,
    Kind.ROOK: calc_rook,
    Kind.QUEEN: calc_queen,
    Kind.KING: calc_king,
}


def generate_moves(b: Board) -> List[Move]:
    """Refill ``b.moves`` with every pseudo-legal move for the side to move."""
    b.moves = []
    for x, y, piece in b.pieces(b.color):
        GENERATORS[piece.kind](b, x, y, piece)
    return b.moves


def piece_moves(b: Board, x: int, y: int) -> List[Move]:
    """Moves of the single piece at (x, y); empty for empty or off-turn cells."""
    piece = b.read(x, y)
    saved = b.moves
    b.moves = []
    try:
        if piece is not None and not piece.is_empty() and piece.color == b.color:
            GENERATORS[piece.kind](b, x, y, piece)
        return b.moves
    finally:
        b.moves = saved
