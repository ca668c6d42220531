"""Exceptions raised by the engine core."""


class EngineError(Exception):
    """Base class for engine failures."""


class NoMovesError(EngineError):
    """The side to move has no pseudo-legal move at the root."""


class IllegalMoveError(EngineError):
    """A move string does not match any generated move."""


class RootMoveError(EngineError):
    """A root-move worker raised instead of returning a score.

    The failing move is kept on the exception and the worker's exception is
    chained as ``__cause__``.
    """

    def __init__(self, move, message: str = ""):
        self.move = move
        super().__init__(message or f"search failed for root move {move}")


class PoolCrashedError(EngineError):
    """A worker process died, taking every unfinished root move with it.

    The crashing task cannot be told apart from the ones that were merely
    pending, so all affected moves are kept on ``moves``.
    """

    def __init__(self, moves, message: str = ""):
        self.moves = list(moves)
        super().__init__(
            message or "worker pool crashed; unfinished root moves: " + " ".join(str(m) for m in self.moves)
        )
