"""Core engine components: position, search and move-contract errors."""

from .errors import GameOverError, IllegalMoveError
from .position import WIN_PATTERNS, Cell, Position
from .search import SearchEngine
