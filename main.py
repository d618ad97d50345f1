"""
Main script for console TicTacToe.

This script ties together:
- Engine (board, win checking, minimax AI) through a GameSession
- Console (drawing the board, reading moves)

Run this script to play TicTacToe against the computer!
"""

import logging
from typing import Callable, Optional

import console
from engine.config import GameConfig
from engine.game_state import Mark
from engine.session import GameSession
from engine.win_checker import Outcome


class TicTacToeGame:
    """
    Round controller for console TicTacToe.

    Game flow:
    1. Show the board and stop if the round is decided
    2. Human (X) types a move, re-prompted until it is legal
    3. Computer (O) answers with its best move
    4. Repeat, then ask whether to play again
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        max_rounds: Optional[int] = None
    ):
        """
        Initialize the game.

        Args:
            session: Game session to drive. A new one if not provided.
            input_fn: Reads a line after showing a prompt (default: input).
            output_fn: Writes a line of text (default: print).
            max_rounds: Stop after this many rounds instead of asking.
        """
        self.session = session or GameSession()
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.max_rounds = max_rounds

        self.rounds_played = 0

    def run(self):
        """Play rounds until the player stops."""
        self.output_fn(console.banner())

        play_again = True
        while play_again:
            self.session.reset_board()
            self.play_one_round()
            play_again = self._wants_another_round()

        self.output_fn(GameConfig.GOODBYE)

    def play_one_round(self) -> Outcome:
        """
        Play a single round from an empty board.

        Returns:
            How the round ended.
        """
        current = Mark.PLAYER

        while True:
            self.output_fn(console.render_board(self.session.board))

            outcome = self.session.current_outcome()
            if outcome.is_terminal:
                self._announce(outcome)
                return outcome

            if current == Mark.PLAYER:
                self.human_turn()
            else:
                self.computer_turn()
            current = current.opposite()

    def human_turn(self):
        """Prompt until the player enters a legal move, then play it."""
        while True:
            move = console.parse_move(self.input_fn(GameConfig.MOVE_PROMPT))
            if move is None:
                self.output_fn(GameConfig.INVALID_INPUT)
                continue

            result = self.session.apply_human_move(*move)
            if result.ok:
                return
            self.output_fn(result.message)

    def computer_turn(self):
        """Let the AI play its move."""
        self.output_fn(GameConfig.THINKING)
        self.session.computer_turn()

    def ask_play_again(self) -> bool:
        """Ask y/n until the answer is one of them."""
        while True:
            answer = console.parse_yes_no(self.input_fn(GameConfig.REPLAY_PROMPT))
            if answer is not None:
                return answer
            self.output_fn(GameConfig.INVALID_REPLAY)

    def _wants_another_round(self) -> bool:
        if self.max_rounds is not None:
            return self.rounds_played < self.max_rounds
        return self.ask_play_again()

    def _announce(self, outcome: Outcome):
        """Show the round result."""
        self.rounds_played += 1

        if outcome == Outcome.PLAYER_WINS:
            self.output_fn(GameConfig.PLAYER_WINS + "\n")
        elif outcome == Outcome.COMPUTER_WINS:
            self.output_fn(GameConfig.COMPUTER_WINS + "\n")
        else:
            self.output_fn(GameConfig.DRAW + "\n")

        line = self.session.win_checker.get_winning_line(self.session.board)
        logging.info(
            f"Round {self.rounds_played} finished: {outcome.value}"
            + (f" on line {line}" if line else "")
        )


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Configure diagnostics: warnings by default, everything with --verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        filename=log_file,
    )


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against a minimax AI")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log search statistics and every move"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log messages to this file instead of stderr"
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=None,
        help="Play this many rounds without asking to play again"
    )

    args = parser.parse_args(argv)
    if args.rounds is not None and args.rounds < 1:
        parser.error("--rounds must be at least 1")

    setup_logging(args.verbose, args.log_file)

    game = TicTacToeGame(max_rounds=args.rounds)

    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
        print("Goodbye!")


if __name__ == "__main__":
    main()
