"""Parallel root search.

Each root move is one task: the worker gets its own pickled copy of the
root position, plays the move and searches the reply tree single-threaded.
Results are gathered by root index before the maximum is taken, so the
chosen move never depends on which worker finished first.
"""

import logging
import multiprocessing
from concurrent.futures import ProcessPoolExecutor, as_completed
from concurrent.futures.process import BrokenProcessPool
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from negamate.config import CONFIG
from negamate.core.board import Board, Move
from negamate.core.errors import NoMovesError, PoolCrashedError, RootMoveError
from negamate.core.evaluator import Evaluator
from negamate.core.movegen import generate_moves
from negamate.core.search import SearchEngine

log = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

_worker_engine: Optional[SearchEngine] = None


def _init_worker(piece_values: Dict[str, float]):
    """Build one search engine per worker process."""
    global _worker_engine
    _worker_engine = SearchEngine(Evaluator(piece_values))


def _search_root_move(board: Board, move: Move, depth: int) -> Tuple[float, int]:
    """Run one root subtree and return (score, nodes)."""
    engine = _worker_engine or SearchEngine()
    score = engine.search_root(board, move, depth)
    return score, engine.nodes


@dataclass
class SearchResult:
    move: Move
    score: float
    nodes: int = 0


def select_best(scores: List[float]) -> int:
    """Index of the strictly greatest score; the first one wins ties."""
    best = 0
    for i in range(1, len(scores)):
        if scores[i] > scores[best]:
            best = i
    return best


class RootDispatcher:
    def __init__(
        self,
        workers: Optional[int] = None,
        piece_values: Optional[Dict[str, float]] = None,
        start_method: Optional[str] = None,
    ):
        self.workers = max(1, workers or CONFIG.search.workers)
        self.piece_values = dict(piece_values or CONFIG.eval.piece_values)
        self.start_method = start_method or CONFIG.search.start_method

    def choose(self, board: Board, depth: int, progress: Optional[ProgressCallback] = None) -> SearchResult:
        if depth < 0:
            raise ValueError(f"depth must be >= 0, got {depth}")

        root = board.copy()
        moves = list(generate_moves(root))
        if not moves:
            raise NoMovesError(f"no moves for {root.color.name} at the root")
        root.moves = []

        total = len(moves)
        scores: List[Optional[float]] = [None] * total
        failures: Dict[int, BaseException] = {}
        nodes = 0
        log.debug("dispatching %d root moves at depth %d on %d workers", total, depth, self.workers)

        if self.workers == 1:
            _init_worker(self.piece_values)
            for i, move in enumerate(moves):
                try:
                    scores[i], n = _search_root_move(root, move, depth)
                    nodes += n
                except Exception as e:
                    failures[i] = e
                if progress:
                    progress(i + 1, total)
        else:
            with ProcessPoolExecutor(
                max_workers=min(self.workers, total),
                initializer=_init_worker,
                initargs=(self.piece_values,),
                mp_context=multiprocessing.get_context(self.start_method),
            ) as pool:
                futures = {}
                for i, move in enumerate(moves):
                    try:
                        futures[pool.submit(_search_root_move, root, move, depth)] = i
                    except BrokenProcessPool as e:
                        # a worker died before every move was queued
                        failures.update((j, e) for j in range(i, total))
                        break
                for done, fut in enumerate(as_completed(futures), 1):
                    i = futures[fut]
                    err = fut.exception()
                    if err is not None:
                        failures[i] = err
                    else:
                        scores[i], n = fut.result()
                        nodes += n
                    if progress:
                        progress(done, total)

        raised = {i: e for i, e in failures.items() if not isinstance(e, BrokenProcessPool)}
        if raised:
            i = min(raised)
            log.error("root move %s failed: %r", moves[i], raised[i])
            raise RootMoveError(moves[i]) from raised[i]
        if failures:
            lost = [moves[i] for i in sorted(failures)]
            log.error("worker pool crashed with %d root moves unfinished", len(lost))
            raise PoolCrashedError(lost) from next(iter(failures.values()))

        best = select_best(scores)
        log.info("best move %s score %s (%d nodes)", moves[best], scores[best], nodes)
        return SearchResult(moves[best], scores[best], nodes)


def choose_best_move(board: Board, depth: int, workers: Optional[int] = None) -> Tuple[Move, float]:
    """Pick the best root move for the side to move and its signed score."""
    result = RootDispatcher(workers=workers).choose(board, depth)
    return result.move, result.score
