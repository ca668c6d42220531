from typing import Optional

from negamate.core.applier import apply_move
from negamate.core.board import Board, Move
from negamate.core.evaluator import Evaluator
from negamate.core.movegen import generate_moves

# Finite window sentinel; stays exact under negation and sits far above any
# reachable material total (16 kings' worth) and any king-capture score.
INF = 1000000.0
MATE_SCORE = 900000.0


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None):
        self.evaluator = evaluator or Evaluator()
        self.nodes = 0

    def negamax(self, board: Board, depth: int, alpha: float, beta: float) -> float:
        """Alpha-beta negamax; the score is from the side to move's point of view."""
        self.nodes += 1
        if depth == 0:
            return board.color * self.evaluator.evaluate(board)

        # The side to move has just lost its king: the line is over. Deeper
        # remaining depth means an earlier loss, so it scores worse.
        if board.king_captured() == board.color:
            return -(MATE_SCORE + depth)

        moves = generate_moves(board)
        if not moves:
            return board.color * self.evaluator.evaluate(board)

        value = -INF
        for move in moves:
            value = max(value, -self.negamax(apply_move(board, move), depth - 1, -beta, -alpha))
            alpha = max(alpha, value)
            if alpha >= beta:
                break
        return value

    def search_root(self, board: Board, move: Move, depth: int) -> float:
        """Score one root move from the root side's point of view."""
        self.nodes = 0
        return -self.negamax(apply_move(board, move), depth, -INF, INF)
