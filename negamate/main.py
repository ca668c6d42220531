from typing import Optional

from negamate.config import CONFIG
from negamate.core.applier import make_move
from negamate.core.board import Board, initial_position
from negamate.core.dispatcher import ProgressCallback, RootDispatcher, SearchResult
from negamate.core.errors import IllegalMoveError
from negamate.core.movegen import generate_moves


class Engine:
    def __init__(self, depth: Optional[int] = None, workers: Optional[int] = None, board: Optional[Board] = None):
        self.depth = CONFIG.search.depth if depth is None else depth
        self.board = board or initial_position()
        self.dispatcher = RootDispatcher(workers=workers)

    def get_best_move(self, progress: Optional[ProgressCallback] = None) -> SearchResult:
        return self.dispatcher.choose(self.board, self.depth, progress=progress)

    def make_move(self, move_uci: str):
        """Play a move given in long algebraic form; returns the Move played."""
        for move in generate_moves(self.board):
            if move.uci() == move_uci:
                make_move(self.board, move)
                return move
        raise IllegalMoveError(f"no such move: {move_uci!r}")

    def set_fen(self, fen: str):
        self.board = Board.from_fen(fen)

    def reset(self):
        self.board = initial_position()

    def print_board(self):
        print(self.board)
