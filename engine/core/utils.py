import logging
from typing import Dict

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level="INFO", name: str = "engine") -> logging.Logger:
    """Attach a console handler to the package logger once and set its level."""
    logger = logging.getLogger(name)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def format_info(scores: Dict[int, int], best_move: int, best_score: int) -> str:
    moves_str = " ".join(f"{m}:{s:+d}" for m, s in scores.items())
    if best_score > 0:
        score_str = "win"
    elif best_score < 0:
        score_str = "loss"
    else:
        score_str = "draw"
    return f"info score {best_score:+d} ({score_str}) bestmove {best_move} moves {moves_str}"


def print_info(scores: Dict[int, int], best_move: int, best_score: int, output=print):
    output(format_info(scores, best_move, best_score))
