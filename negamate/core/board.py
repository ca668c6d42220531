"""Board model: pieces, moves and the 64-cell grid.

Cells are indexed ``y * WIDTH + x`` with (0, 0) on White's queenside rook
corner and (0, 7) on Black's. Colors are signed integers: White is +1 and
Black is -1, so pawn direction, pawn start rank and the material sign are
all plain arithmetic on ``color``.

FEN conversion goes through python-chess; only piece placement and the side
to move are carried over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, List, Optional, Tuple

import chess

WIDTH = 8
SIZE = WIDTH * WIDTH


class Color(IntEnum):
    WHITE = 1
    NONE = 0
    BLACK = -1


class Kind(IntEnum):
    NONE = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


_SYMBOLS = {
    Kind.NONE: ".",
    Kind.PAWN: "p",
    Kind.KNIGHT: "n",
    Kind.BISHOP: "b",
    Kind.ROOK: "r",
    Kind.QUEEN: "q",
    Kind.KING: "k",
}


@dataclass(frozen=True)
class Piece:
    kind: Kind = Kind.NONE
    color: Color = Color.NONE

    def is_empty(self) -> bool:
        return self.kind == Kind.NONE

    def symbol(self) -> str:
        s = _SYMBOLS[self.kind]
        return s.upper() if self.color == Color.WHITE else s


EMPTY = Piece(Kind.NONE, Color.NONE)


@dataclass(frozen=True)
class Move:
    """A self-describing move: both endpoints carry their piece contents."""

    piece: Piece
    x0: int
    y0: int
    captured: Piece
    x1: int
    y1: int
    capture: bool = False
    promotion: bool = False
    en_passant: bool = False
    castle: bool = False

    def uci(self) -> str:
        """Long algebraic form, e.g. ``e2e4`` or ``a7a8q``."""
        text = chess.square_name(chess.square(self.x0, self.y0)) + chess.square_name(
            chess.square(self.x1, self.y1)
        )
        return text + "q" if self.promotion else text

    def __str__(self) -> str:
        return self.uci()


@dataclass
class Board:
    color: Color = Color.WHITE
    squares: List[Piece] = field(default_factory=lambda: [EMPTY] * SIZE)
    # candidate moves for the side to move; refilled by generate_moves()
    moves: List[Move] = field(default_factory=list, compare=False, repr=False)
    history: List[Move] = field(default_factory=list)

    @classmethod
    def empty(cls, color: Color = Color.WHITE) -> "Board":
        return cls(color=Color(color))

    def read(self, x: int, y: int) -> Optional[Piece]:
        """Return the piece at (x, y), or None when off the board."""
        if x < 0 or x >= WIDTH or y < 0 or y >= WIDTH:
            return None
        return self.squares[y * WIDTH + x]

    def write(self, x: int, y: int, piece: Piece):
        self.squares[y * WIDTH + x] = piece

    def copy(self) -> "Board":
        return Board(
            color=self.color,
            squares=list(self.squares),
            moves=list(self.moves),
            history=list(self.history),
        )

    def pieces(self, color: Color) -> Iterator[Tuple[int, int, Piece]]:
        """Yield (x, y, piece) for every piece of ``color`` in cell order."""
        for i, piece in enumerate(self.squares):
            if piece.color == color and not piece.is_empty():
                yield i % WIDTH, i // WIDTH, piece

    def last_move(self) -> Optional[Move]:
        return self.history[-1] if self.history else None

    def king_captured(self) -> Color:
        """Color whose king was taken by the last played move, or NONE."""
        last = self.last_move()
        if last is not None and last.captured.kind == Kind.KING:
            return last.captured.color
        return Color.NONE

    # ── FEN interchange ──────────────────────────────────────────

    @classmethod
    def from_fen(cls, fen: str) -> "Board":
        """Build a board from a FEN string (placement and side to move)."""
        cb = chess.Board(fen)
        board = cls.empty(Color.WHITE if cb.turn == chess.WHITE else Color.BLACK)
        for sq, p in cb.piece_map().items():
            color = Color.WHITE if p.color == chess.WHITE else Color.BLACK
            board.write(chess.square_file(sq), chess.square_rank(sq), Piece(Kind(p.piece_type), color))
        return board

    def to_chess(self) -> chess.Board:
        cb = chess.Board(None)
        for i, piece in enumerate(self.squares):
            if piece.is_empty():
                continue
            cb.set_piece_at(
                chess.square(i % WIDTH, i // WIDTH),
                chess.Piece(int(piece.kind), piece.color == Color.WHITE),
            )
        cb.turn = self.color == Color.WHITE
        return cb

    def to_fen(self) -> str:
        return self.to_chess().fen()

    def __str__(self) -> str:
        rows = []
        for y in range(WIDTH - 1, -1, -1):
            rows.append(" ".join(self.squares[y * WIDTH + x].symbol() for x in range(WIDTH)))
        return "\n".join(rows)


_BACK_RANK = (
    Kind.ROOK, Kind.KNIGHT, Kind.BISHOP, Kind.QUEEN,
    Kind.KING, Kind.BISHOP, Kind.KNIGHT, Kind.ROOK,
)


def initial_position() -> Board:
    """Standard starting layout, White to move."""
    board = Board.empty(Color.WHITE)
    for x, kind in enumerate(_BACK_RANK):
        board.write(x, 0, Piece(kind, Color.WHITE))
        board.write(x, 1, Piece(Kind.PAWN, Color.WHITE))
        board.write(x, 7, Piece(kind, Color.BLACK))
        board.write(x, 6, Piece(Kind.PAWN, Color.BLACK))
    return board
