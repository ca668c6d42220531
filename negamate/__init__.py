"""NegaMate: a parallel negamax board-game search engine."""

from negamate.core import choose_best_move, initial_position

__version__ = "0.1.0"
