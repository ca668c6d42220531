"""FastAPI REST interface for the engine."""

import logging
import threading
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from negamate.config import CONFIG
from negamate.core.errors import EngineError
from negamate.core.movegen import generate_moves
from negamate.main import Engine

_log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=CONFIG.log_level)
    _log.info("%s API ready", CONFIG.ui.engine_name)
    yield


app = FastAPI(title=CONFIG.ui.engine_name, version="0.1.0", lifespan=lifespan)

# Shared engine instance; every read or write of its board holds the lock.
engine = Engine()
_board_lock = threading.Lock()


class FenRequest(BaseModel):
    fen: str


class MoveRequest(BaseModel):
    move: str  # long algebraic, e.g. "e2e4"


class SearchRequest(BaseModel):
    depth: Optional[int] = None


def _board_state():
    board = engine.board
    return {
        "fen": board.to_fen(),
        "turn": board.color.name.lower(),
        "moves": [m.uci() for m in generate_moves(board)],
        "king_captured": board.king_captured().name.lower() if board.king_captured() else None,
    }


@app.get("/board")
def get_board():
    with _board_lock:
        return _board_state()


@app.post("/position")
def set_position(req: FenRequest):
    with _board_lock:
        try:
            engine.set_fen(req.fen)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid FEN: {e}")
        return {"fen": engine.board.to_fen()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            engine.make_move(req.move)
        except EngineError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return {"fen": engine.board.to_fen(), "move": req.move}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    depth = CONFIG.search.depth if req.depth is None else req.depth
    with _board_lock:
        board = engine.board.copy()

    try:
        result = engine.dispatcher.choose(board, depth)
    except (EngineError, ValueError) as e:
        _log.warning("search failed: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "best_move": result.move.uci(),
        "piece": result.move.piece.kind.name.lower(),
        "score": result.score,
        "nodes": result.nodes,
        "fen": board.to_fen(),
    }


@app.post("/reset")
def reset_board():
    with _board_lock:
        engine.reset()
        return {"fen": engine.board.to_fen()}
