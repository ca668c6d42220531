"""Static material evaluator."""

import math
from typing import Dict, Optional

from negamate.config import CONFIG
from negamate.core.board import Board, Kind


class Evaluator:
    def __init__(self, piece_values: Optional[Dict[str, float]] = None):
        values = piece_values or CONFIG.eval.piece_values
        self.values = [float(values.get(kind.name, 0.0)) for kind in Kind]

    def material_value(self, kind: Kind) -> float:
        return self.values[kind]

    def evaluate(self, board: Board) -> float:
        """Return material balance in pawns, positive favors White."""
        values = self.values
        # fsum keeps mirrored material at exactly 0.0
        return math.fsum(values[p.kind] * p.color for p in board.squares)
