"""FastAPI REST interface for a single game against the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from engine.analyzer import Analyzer
from engine.config import CONFIG
from engine.core.errors import IllegalMoveError
from engine.core.position import Cell, Position
from engine.core.search import SearchEngine
from engine.core.utils import setup_logging
from engine.main import Engine

setup_logging(CONFIG.log_level)

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared game session.
engine = Engine(
    human=CONFIG.game.human_mark,
    first=CONFIG.game.first_mark,
    seed=CONFIG.search.seed,
)
_board_lock = threading.Lock()


class PositionRequest(BaseModel):
    board: str  # e.g. "XO-/-X-/--O"
    turn: Optional[str] = None


class MoveRequest(BaseModel):
    index: int


class AnalyzeRequest(BaseModel):
    board: str
    index: int
    player: Optional[str] = None  # defaults to the side to move


def _board_state():
    position = engine.position
    return {
        "board": position.to_string(),
        "turn": engine.turn.value,
        "human": engine.human.value,
        "computer": engine.computer.value,
        "legal_moves": [] if position.is_game_over() else position.available_moves(),
        "is_game_over": position.is_game_over(),
        "result": engine.result(),
    }


def _parse_mark(symbol: str) -> Cell:
    try:
        mark = Cell.from_symbol(symbol)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if mark is Cell.EMPTY:
        raise HTTPException(status_code=400, detail="Player must be X or O")
    return mark


@app.get("/board")
def get_board():
    with _board_lock:
        return _board_state()


@app.post("/position")
def set_position(req: PositionRequest):
    with _board_lock:
        turn = _parse_mark(req.turn) if req.turn is not None else None
        try:
            engine.set_position(req.board, turn)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid board: {e}")
        return _board_state()


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if engine.turn is not engine.human:
            raise HTTPException(status_code=400, detail="Not your turn")
        if not engine.make_move(req.index):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.index}")
        return {"move": req.index, **_board_state()}


@app.post("/search")
def search_move():
    with _board_lock:
        if engine.is_game_over():
            raise HTTPException(status_code=400, detail="Game is already over")
        if engine.turn is not engine.computer:
            raise HTTPException(status_code=400, detail="Not the engine's turn")
        search_position = engine.position  # immutable, safe to search unlocked

    move, score, scores = engine.search_position(search_position)

    with _board_lock:
        if engine.position != search_position or engine.turn is not engine.computer:
            raise HTTPException(status_code=409, detail="Board changed during search")
        engine.last_scores = scores
        engine.play_computer_move(move)
        return {
            "best_move": move,
            "score": score,
            "scores": {str(m): s for m, s in scores.items()},
            **_board_state(),
        }


@app.post("/analyze")
def analyze_move(req: AnalyzeRequest):
    try:
        position = Position.from_string(req.board)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid board: {e}")
    if position.is_game_over():
        raise HTTPException(status_code=400, detail="Game is already over")
    mark = _parse_mark(req.player) if req.player is not None else position.side_to_move(engine.first)
    analyzer = Analyzer(SearchEngine(mark.opponent, mark))
    try:
        return analyzer.classify_move(position, req.index)
    except IllegalMoveError as e:
        raise HTTPException(status_code=400, detail=f"Illegal move: {e}")


@app.post("/reset")
def reset_board():
    with _board_lock:
        engine.reset()
        return _board_state()
