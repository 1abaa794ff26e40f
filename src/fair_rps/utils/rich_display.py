"""
Rich-based console output for the game.

Provides:
- Commitment tag banner
- Numbered move menu
- Outcome table (help screen)
- Round result with the revealed key
"""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.moves import MoveSet
from ..core.rules import Outcome, generate_table
from ..core.session import RoundResult

console = Console()
logger = logging.getLogger(__name__)

_CELL_STYLES = {
    Outcome.DRAW: "dim",
    Outcome.FIRST_WINS: "green",
    Outcome.SECOND_WINS: "red",
}


def build_outcome_table(move_set: MoveSet) -> Table:
    """
    Create the outcome table.

    Each cell is the row move's result against the column move.
    """
    table = Table(
        title="Results from the row move's point of view",
        show_lines=False,
    )
    table.add_column("Move", style="bold cyan")
    for label in move_set.labels:
        table.add_column(escape(label), justify="center")

    for label, row in zip(move_set.labels, generate_table(move_set)):
        cells = [
            f"[{_CELL_STYLES[outcome]}]{outcome.table_label}[/{_CELL_STYLES[outcome]}]"
            for outcome in row
        ]
        table.add_row(escape(label), *cells)

    return table


class GameDisplay:
    """Console output for one game session."""

    def __init__(self, output: Optional[Console] = None):
        """
        Initialize game display.

        Args:
            output: Console to print to (defaults to the shared console)
        """
        self.console = output if output is not None else console

    def log(self, message: str, style: str = ""):
        """Print a message."""
        self.console.print(message, style=style)

    def log_info(self, message: str):
        self.console.print(f"[blue]ℹ[/blue] {message}")

    def log_error(self, message: str):
        self.console.print(f"[red]✗[/red] {message}")

    def show_commitment(self, tag: str):
        """Show the HMAC of the computer's move."""
        self.console.print(f"[bold]HMAC:[/bold] {tag}")

    def show_menu(self, move_set: MoveSet):
        """Show the numbered move menu."""
        self.console.print("Available moves:")
        for move in move_set:
            self.console.print(f"{move.number} - {escape(move.label)}")
        self.console.print("0 - exit")
        self.console.print("? - help")

    def show_table(self, move_set: MoveSet):
        """Show the outcome table."""
        self.console.print(build_outcome_table(move_set))

    def show_result(self, result: RoundResult):
        """Show both moves, the outcome and the revealed key."""
        style = _CELL_STYLES[result.outcome]
        self.console.print(f"Your move: {escape(result.human_move.label)}")
        self.console.print(f"Computer move: {escape(result.computer_move.label)}")
        self.console.print(f"[bold {style}]{result.message}[/bold {style}]")
        self.console.print(f"[bold]HMAC key:[/bold] {result.secret_key}")


def setup_rich_logging(level: int = logging.INFO, log_console: Optional[Console] = None):
    """Configure logging to work nicely with rich console."""
    from rich.logging import RichHandler

    # Remove existing handlers
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=log_console or Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))

    logging.basicConfig(
        level=level,
        handlers=[rich_handler],
        format="%(message)s",
    )
