"""One human-vs-computer game session built on the search engine."""

import logging
import random
from typing import Dict, List, Optional, Tuple

from engine.core.errors import GameOverError, IllegalMoveError
from engine.core.position import Cell, Position
from engine.core.search import SearchEngine

logger = logging.getLogger(__name__)


def _as_mark(mark) -> Cell:
    if isinstance(mark, Cell):
        cell = mark
    else:
        cell = Cell.from_symbol(str(mark))
    if cell is Cell.EMPTY:
        raise ValueError("A player mark must be X or O")
    return cell


class Engine:
    def __init__(self, human=Cell.X, first=Cell.X, seed: Optional[int] = None):
        self.human = _as_mark(human)
        self.computer = self.human.opponent
        self.first = _as_mark(first)
        self.search = SearchEngine(self.human, self.computer, random.Random(seed))
        self.position = Position.empty()
        self.turn = self.first
        self.move_history: List[Tuple[Cell, int]] = []
        self.last_scores: Dict[int, int] = {}  # per-move scores of the latest search

    def reset(self):
        self.position = Position.empty()
        self.turn = self.first
        self.move_history.clear()
        self.last_scores = {}

    def set_position(self, text: str, turn=None):
        """Load a board string; the side to move is inferred unless given."""
        position = Position.from_string(text)
        self.position = position
        self.turn = _as_mark(turn) if turn is not None else position.side_to_move(self.first)
        self.move_history.clear()

    def make_move(self, index) -> bool:
        """Play the human's move. Returns True if it was legal."""
        if self.is_game_over():
            logger.warning("Rejected move %r: game is over", index)
            return False
        if self.turn is not self.human:
            logger.warning("Rejected move %r: not the human's turn", index)
            return False
        try:
            self.position = self.position.apply_move(index, self.human)
        except IllegalMoveError as e:
            logger.warning("Rejected move %r: %s", index, e)
            return False
        self._record(self.human, index)
        return True

    def search_position(self, position: Position) -> Tuple[int, int, Dict[int, int]]:
        """
        Search ``position`` for the computer without touching the session.

        Returns the chosen square, its score and the score of every move.
        """
        if position.is_game_over():
            raise GameOverError("Game is already over")
        scores = self.search.evaluate_moves(position)
        best_score, tied = self.search.best_of(scores)
        move = self.search.choose(tied)
        logger.debug("Search: best score %d, tied moves %s, chose %d", best_score, tied, move)
        return move, best_score, scores

    def get_best_move(self) -> Tuple[int, int]:
        """Engine's chosen square and the minimax score behind it."""
        move, best_score, scores = self.search_position(self.position)
        self.last_scores = scores
        return move, best_score

    def play_computer_move(self, move: Optional[int] = None) -> int:
        """Play ``move`` for the computer, searching for one when not given."""
        if not self.is_game_over() and self.turn is not self.computer:
            raise RuntimeError("Not the computer's turn")
        if move is None:
            move, _ = self.get_best_move()
        elif self.is_game_over():
            raise GameOverError("Game is already over")
        self.position = self.position.apply_move(move, self.computer)
        self._record(self.computer, move)
        return move

    def _record(self, mark: Cell, index: int):
        self.move_history.append((mark, index))
        self.turn = mark.opponent
        logger.info("%s plays %d", mark.value, index)
        if self.is_game_over():
            logger.info("Game over: %s", self.result())

    def is_game_over(self) -> bool:
        return self.position.is_game_over()

    def winner(self) -> Cell:
        return self.position.check_winner()

    def result(self) -> Optional[str]:
        winner = self.winner()
        if winner is self.computer:
            return "computer"
        if winner is self.human:
            return "human"
        if self.position.is_full():
            return "draw"
        return None

    def print_board(self, output=print):
        output(self.position.render())
