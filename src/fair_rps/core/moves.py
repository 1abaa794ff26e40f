"""
Move set representation.

A game is played over a fixed, ordered list of move labels:
- Labels are distinct (exact, case-sensitive comparison)
- The count is odd and at least 3
- A move's position in the list is its canonical index

Moves are never free-standing objects: every Move is resolved from the
MoveSet by label or by index.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

from .errors import ConfigurationError, InvalidMove

MIN_MOVES = 3


@dataclass(frozen=True)
class Move:
    """A move label together with its index in the owning MoveSet."""

    label: str
    index: int

    @property
    def number(self) -> int:
        """1-based number shown in the menu."""
        return self.index + 1

    def __str__(self) -> str:
        return self.label


MoveLike = Union[Move, str, int]


@dataclass(frozen=True)
class MoveSet:
    """
    Immutable ordered list of distinct move labels.

    Example for the classic game:
        MoveSet(("rock", "paper", "scissors"))

    Each move beats the (n-1)/2 moves that precede it in the cycle and
    loses to the (n-1)/2 moves that follow it (see rules.resolve).
    """

    labels: Tuple[str, ...]

    def __init__(self, labels: Iterable[str]) -> None:
        object.__setattr__(self, "labels", tuple(labels))
        self.__post_init__()

    def __post_init__(self) -> None:
        """Validate move set invariants."""
        count = len(self.labels)
        if count < MIN_MOVES or count % 2 == 0:
            raise ConfigurationError(
                f"Expected an odd number (>= {MIN_MOVES}) of moves, got {count}"
            )
        duplicates = [label for label, seen in Counter(self.labels).items() if seen > 1]
        if duplicates:
            raise ConfigurationError(
                f"Moves must not repeat: {', '.join(duplicates)}"
            )

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[Move]:
        for index, label in enumerate(self.labels):
            yield Move(label=label, index=index)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Move):
            return self._owns(item)
        if isinstance(item, str):
            return item in self.labels
        return False

    @property
    def moves(self) -> List[Move]:
        """All moves in canonical order."""
        return list(self)

    def move_at(self, index: int) -> Move:
        """Get the move at a 0-based index."""
        if isinstance(index, bool) or not 0 <= index < len(self.labels):
            raise InvalidMove(f"No move at index {index} (have {len(self.labels)} moves)")
        return Move(label=self.labels[index], index=index)

    def move_named(self, label: str) -> Move:
        """Get the move with an exact label."""
        try:
            index = self.labels.index(label)
        except ValueError:
            raise InvalidMove(f"Unknown move {label!r}") from None
        return Move(label=label, index=index)

    def resolve_move(self, move: MoveLike) -> Move:
        """
        Turn a Move, label or index into a Move owned by this set.

        Args:
            move: Move instance, exact label, or 0-based index

        Returns:
            The corresponding Move

        Raises:
            InvalidMove: if the move does not belong to this set
        """
        if isinstance(move, Move):
            if not self._owns(move):
                raise InvalidMove(f"Move {move.label!r} at index {move.index} is not in this move set")
            return move
        if isinstance(move, str):
            return self.move_named(move)
        if isinstance(move, int):
            return self.move_at(move)
        raise InvalidMove(f"Cannot interpret {move!r} as a move")

    def _owns(self, move: Move) -> bool:
        return 0 <= move.index < len(self.labels) and self.labels[move.index] == move.label

    def __str__(self) -> str:
        return " ".join(self.labels)
