"""Core engine components: board, move generation, evaluator, search and root dispatch."""

from .board import Board, Color, Kind, Move, Piece, initial_position
from .applier import apply_move, make_move, undo_move
from .dispatcher import RootDispatcher, SearchResult, choose_best_move
from .evaluator import Evaluator
from .movegen import generate_moves
from .search import SearchEngine
