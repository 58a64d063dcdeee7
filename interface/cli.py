import argparse
import sys
from typing import Callable, Optional

from engine.config import CONFIG
from engine.core.position import Cell
from engine.core.utils import print_info, setup_logging
from engine.main import Engine


def _ask_symbol(input_fn: Callable[[str], str]) -> Cell:
    prompt = "Choose your symbol (X/O): "
    while True:
        choice = input_fn(prompt).strip().upper()
        if choice in ("X", "O"):
            return Cell(choice)
        prompt = "Invalid choice. Please enter X or O: "


def _parse_index(text: str) -> Optional[int]:
    try:
        return int(text.strip())
    except ValueError:
        return None


def play_game(input_fn: Optional[Callable[[str], str]] = None, output: Callable[[str], None] = print,
              engine: Optional[Engine] = None, symbol: Optional[str] = None,
              seed: Optional[int] = None, verbose: bool = False) -> Optional[str]:
    """
    Run one console game; returns 'computer', 'human' or 'draw'.

    A given ``engine`` is played as-is (its marks, position and turn), so
    the symbol prompt, ``symbol`` and ``seed`` are skipped.
    """
    input_fn = input_fn or input
    if engine is None:
        human = Cell.from_symbol(symbol) if symbol else _ask_symbol(input_fn)
        engine = Engine(human=human, first=CONFIG.game.first_mark, seed=seed)
    output(f"You are {engine.human.value} and the computer is {engine.computer.value}. Let's start!")

    while not engine.is_game_over():
        engine.print_board(output)
        if engine.turn is engine.human:
            text = input_fn(f"Your turn ({engine.human.value}). Enter your move (0-8): ")
            index = _parse_index(text)
            if index is None or not engine.make_move(index):
                output("Invalid move. Try again.")
        else:
            move = engine.play_computer_move()
            if verbose:
                print_info(engine.last_scores, move, engine.last_scores[move], output)
            output(f"Computer ({engine.computer.value}) plays at position {move}")

    engine.print_board(output)
    result = engine.result()
    if result == "computer":
        output("Computer wins!")
    elif result == "human":
        output("You win!")
    else:
        output("It's a draw!")
    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against a perfect opponent.")
    parser.add_argument("--symbol", choices=["X", "O", "x", "o"],
                        help="Your mark; asked interactively when omitted")
    parser.add_argument("--seed", type=int, default=CONFIG.search.seed,
                        help="Seed for choosing between equally good engine moves")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print per-move scores after each engine search")
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else CONFIG.log_level)
    try:
        play_game(symbol=args.symbol, seed=args.seed, verbose=args.verbose)
    except (EOFError, KeyboardInterrupt):
        print("\nGame aborted.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
