# engine/analyzer.py
from typing import List, Dict, Any, Iterable, Optional

from engine.core.position import Cell, Position
from engine.core.search import SearchEngine

# thresholds in score points lost against the best move
TH_BEST = 0       # no loss => "Best move"
TH_MISTAKE = 1    # win -> draw or draw -> loss => "Mistake"
# > TH_MISTAKE (win -> loss) => "Blunder"


class Analyzer:
    def __init__(self, search_engine: SearchEngine):
        self.search_engine = search_engine

    def classify_move(self, position: Position, move: int,
                      search_engine: Optional[SearchEngine] = None) -> Dict[str, Any]:
        """
        Classify a move made by the maximizing side of ``search_engine``
        (default: this analyzer's engine).
        - position: board BEFORE the move (unchanged by this function).
        - move: square the player chose.
        Returns a dict with label, scores and the engine's best moves.
        """
        search_engine = search_engine or self.search_engine
        mark = search_engine.maximizing_mark
        child = position.apply_move(move, mark)
        best_score, best_moves = search_engine.best_moves(position)
        move_score = search_engine.score(child, False)
        delta = best_score - move_score

        if child.check_winner() is mark:
            label = "Winning move"
        elif delta <= TH_BEST:
            label = "Best move"
        elif delta <= TH_MISTAKE:
            label = "Mistake"
        else:
            label = "Blunder"

        return {
            "move": move,
            "player": mark.value,
            "move_score": move_score,
            "best_score": best_score,
            "best_moves": best_moves,
            "delta_vs_best": delta,
            "label": label,
        }

    def analyze_game(self, moves: Iterable[int], first: Cell = Cell.X) -> List[Dict[str, Any]]:
        """
        Replay moves from the empty board, alternating players starting with
        ``first``, and classify each one from its mover's point of view.
        Moves by the engine's maximizing side use ``self.search_engine``; the
        other side's moves use the same engine with the marks swapped.
        """
        own = self.search_engine
        engines = {
            own.maximizing_mark: own,
            own.minimizing_mark: SearchEngine(own.maximizing_mark, own.minimizing_mark, own.rng),
        }
        position = Position.empty()
        mark = first
        report = []
        for move in moves:
            if position.is_game_over():
                break
            report.append(self.classify_move(position, move, engines[mark]))
            position = position.apply_move(move, mark)
            mark = mark.opponent
        return report
