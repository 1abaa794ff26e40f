"""
Main CLI for the fair rock-paper-scissors game.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, Tuple, Union

from rich.console import Console
from rich.markup import escape

from ..core import (
    ConfigurationError,
    GameSession,
    InvalidInput,
    Move,
    MoveSet,
    verify,
)
from ..utils.rich_display import GameDisplay, setup_rich_logging

EXIT_CHOICE = "0"
HELP_CHOICE = "?"
USAGE_EXAMPLE = "Example: fair-rps rock paper scissors"
LABELS_HINT = "Options go before the moves. Put -- before the moves if the first one looks like an option"
FLAG_OPTIONS = ("-h", "--help", "--rich-logging")
VALUE_OPTIONS = ("--log-level",)

MenuChoice = Union[str, Move]

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING", rich: bool = False) -> None:
    """Configure logging."""
    if rich:
        setup_rich_logging(getattr(logging, level.upper()))
        return
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_menu_choice(raw: str, move_set: MoveSet) -> MenuChoice:
    """
    Interpret one line of menu input.

    Args:
        raw: Line typed by the user
        move_set: Moves in play

    Returns:
        EXIT_CHOICE, HELP_CHOICE, or the selected Move

    Raises:
        InvalidInput: if the line is not a menu entry
    """
    choice = raw.strip()
    if choice in (EXIT_CHOICE, HELP_CHOICE):
        return choice
    if choice.isdigit() and choice.isascii():
        number = int(choice)
        if 1 <= number <= len(move_set):
            return move_set.move_at(number - 1)
    raise InvalidInput(f"Invalid input {choice!r}. Choose 1-{len(move_set)}, 0 or ?")


def run_game(
    session: GameSession,
    display: GameDisplay,
    read_line: Optional[Callable[[str], str]] = None,
) -> int:
    """
    Play one interactive round.

    Args:
        session: Fresh, unstarted session
        display: Output target
        read_line: Prompt-and-read function (defaults to the display console)

    Returns:
        Process exit status
    """
    if read_line is None:
        read_line = display.console.input

    try:
        # The tag goes out before the first prompt
        display.show_commitment(session.start())

        while True:
            display.show_menu(session.move_set)
            try:
                raw = read_line("Enter your move: ")
            except (EOFError, KeyboardInterrupt):
                logger.info("Input closed before a move was chosen")
                return 1

            if not raw.strip():
                logger.info("Empty input, giving up")
                return 1

            try:
                choice = parse_menu_choice(raw, session.move_set)
            except InvalidInput as e:
                display.log_error(escape(str(e)))
                continue

            if choice == EXIT_CHOICE:
                display.log_info("Exiting the game.")
                return 0
            if choice == HELP_CHOICE:
                display.show_table(session.move_set)
                continue

            display.show_result(session.play(choice))
            return 0
    finally:
        # Any exit without a result discards the key unrevealed
        if not session.finished:
            session.abandon()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description="Provably fair rock-paper-scissors with any odd number of moves",
        epilog=f"{USAGE_EXAMPLE}. {LABELS_HINT}",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    parser.add_argument(
        "--rich-logging", action="store_true", help="Pretty log output via rich"
    )
    parser.add_argument(
        "moves", nargs="*", metavar="MOVE", help="Move labels, an odd number (>= 3) of distinct names"
    )
    return parser


def split_arguments(argv: List[str]) -> Tuple[List[str], List[str]]:
    """
    Separate leading options from move labels.

    Options are only recognized before the first label. Everything from the
    first token that is not one of this program's options (or everything
    after "--") is a label, so labels like "-a" or "--rich" are kept as-is.

    Args:
        argv: Command-line arguments without the program name

    Returns:
        (option arguments, move labels)
    """
    options: List[str] = []
    position = 0
    while position < len(argv):
        token = argv[position]
        if token == "--":
            return options, argv[position + 1:]
        if token in VALUE_OPTIONS:
            options.extend(argv[position:position + 2])
            position += 2
            continue
        if token in FLAG_OPTIONS or token.split("=", 1)[0] in VALUE_OPTIONS:
            options.append(token)
            position += 1
            continue
        break
    return options, argv[position:]


def main(
    argv: Optional[List[str]] = None,
    output: Optional[Console] = None,
    errors: Optional[Console] = None,
    read_line: Optional[Callable[[str], str]] = None,
) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]
    options, labels = split_arguments(argv)
    args = build_parser().parse_args(options + ["--"] + labels)
    setup_logging(args.log_level, rich=args.rich_logging)

    try:
        move_set = MoveSet(args.moves)
    except ConfigurationError as e:
        error_display = GameDisplay(errors if errors is not None else Console(stderr=True))
        error_display.log_error(escape(f"Error: {e}"))
        error_display.log(USAGE_EXAMPLE)
        error_display.log(LABELS_HINT)
        return 1

    logger.debug(f"Moves: {move_set}")
    return run_game(GameSession(move_set), GameDisplay(output), read_line)


def verify_main(argv: Optional[List[str]] = None, output: Optional[Console] = None) -> int:
    """Check a published HMAC against a revealed key and move."""
    parser = argparse.ArgumentParser(
        prog="fair-rps-verify",
        description="Verify the computer's move against the HMAC shown before the round",
    )
    parser.add_argument("--key", required=True, help="HMAC key revealed after the round")
    parser.add_argument("--move", required=True, help="Computer move revealed after the round")
    parser.add_argument("--tag", required=True, help="HMAC shown before the round")
    args = parser.parse_args(argv)

    display = GameDisplay(output)
    if verify(args.tag, args.key, args.move):
        display.log("[green]✓[/green] HMAC matches: the move was fixed before you played")
        return 0
    display.log_error("HMAC does not match the revealed key and move")
    return 1


if __name__ == "__main__":
    sys.exit(main())
