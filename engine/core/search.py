import random
from typing import Dict, List, Optional, Tuple

from engine.core.errors import GameOverError
from engine.core.position import Cell, Position

WIN_SCORE = 1
LOSS_SCORE = -1
DRAW_SCORE = 0


class SearchEngine:
    """
    Exhaustive minimax over the full game tree.

    Scores are from the maximizing side's point of view: +1 it wins,
    -1 it loses, 0 draw. The engine keeps no state between calls beyond
    the two marks and the random source used for tie-breaks.
    """

    def __init__(self, minimizing_mark: Cell, maximizing_mark: Cell,
                 rng: Optional[random.Random] = None):
        for mark in (minimizing_mark, maximizing_mark):
            if not isinstance(mark, Cell) or mark is Cell.EMPTY:
                raise ValueError(f"Engine marks must be X or O, got {mark!r}")
        if minimizing_mark is maximizing_mark:
            raise ValueError("Engine marks must differ")
        self.minimizing_mark = minimizing_mark
        self.maximizing_mark = maximizing_mark
        self.rng = rng

    def score(self, position: Position, maximizing_turn: bool) -> int:
        winner = position.check_winner()
        if winner is self.maximizing_mark:
            return WIN_SCORE
        if winner is self.minimizing_mark:
            return LOSS_SCORE
        if position.is_full():
            return DRAW_SCORE

        if maximizing_turn:
            best_score = LOSS_SCORE - 1
            for move in position.available_moves():
                child = position._place(move, self.maximizing_mark)
                best_score = max(best_score, self.score(child, False))
        else:
            best_score = WIN_SCORE + 1
            for move in position.available_moves():
                child = position._place(move, self.minimizing_mark)
                best_score = min(best_score, self.score(child, True))
        return best_score

    def evaluate_moves(self, position: Position) -> Dict[int, int]:
        """Score of every move open to the maximizing side, ascending by square."""
        if position.is_game_over():
            raise GameOverError("Game is already over")
        return {
            move: self.score(position._place(move, self.maximizing_mark), False)
            for move in position.available_moves()
        }

    def best_moves(self, position: Position) -> Tuple[int, List[int]]:
        return self.best_of(self.evaluate_moves(position))

    @staticmethod
    def best_of(scores: Dict[int, int]) -> Tuple[int, List[int]]:
        """Maximal score in ``scores`` and every move reaching it, in insertion order."""
        best_score = LOSS_SCORE - 1
        tied: List[int] = []
        for move, score in scores.items():
            if score > best_score:
                best_score = score
                tied = [move]
            elif score == best_score:
                tied.append(move)
        return best_score, tied

    def find_best_move(self, position: Position, rng: Optional[random.Random] = None) -> int:
        """Pick uniformly among the moves that share the maximal score."""
        _, tied = self.best_moves(position)
        return self.choose(tied, rng)

    def choose(self, tied: List[int], rng: Optional[random.Random] = None) -> int:
        chooser = rng or self.rng or random
        return chooser.choice(tied)
