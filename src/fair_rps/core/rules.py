"""
Generalized rock-paper-scissors rules.

Implements the half-cycle rule over an odd-length, cyclically ordered
move list:
- Equal moves draw
- Otherwise let d = (index(B) - index(A)) mod n
- B beats A when 1 <= d <= (n-1)/2, A beats B when (n+1)/2 <= d <= n-1

For n=3 this is classic rock-paper-scissors ([rock, paper, scissors]).
For every odd n each move beats exactly (n-1)/2 moves and loses to
exactly (n-1)/2 moves.
"""

from enum import Enum
from typing import List

from .moves import Move, MoveLike, MoveSet


class Outcome(Enum):
    """Result of one move against another, named from the first move's side."""

    DRAW = "draw"
    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"

    @property
    def inverse(self) -> "Outcome":
        """Outcome with the two moves swapped."""
        if self is Outcome.FIRST_WINS:
            return Outcome.SECOND_WINS
        if self is Outcome.SECOND_WINS:
            return Outcome.FIRST_WINS
        return Outcome.DRAW

    @property
    def table_label(self) -> str:
        """Cell text for the outcome table (row move's point of view)."""
        return _TABLE_LABELS[self]


_TABLE_LABELS = {
    Outcome.DRAW: "Draw",
    Outcome.FIRST_WINS: "Win",
    Outcome.SECOND_WINS: "Lose",
}


def cyclic_distance(move_set: MoveSet, move_a: MoveLike, move_b: MoveLike) -> int:
    """
    Forward distance from move_a to move_b around the cycle.

    Args:
        move_set: Moves in play
        move_a: Starting move
        move_b: Target move

    Returns:
        (index(b) - index(a)) mod n, in [0, n)
    """
    a = move_set.resolve_move(move_a)
    b = move_set.resolve_move(move_b)
    return (b.index - a.index) % len(move_set)


def resolve(move_set: MoveSet, move_a: MoveLike, move_b: MoveLike) -> Outcome:
    """
    Decide move_a against move_b.

    Args:
        move_set: Moves in play (odd length)
        move_a: First move (Move, label or index)
        move_b: Second move (Move, label or index)

    Returns:
        DRAW, FIRST_WINS or SECOND_WINS

    Raises:
        InvalidMove: if either move is not in move_set
    """
    distance = cyclic_distance(move_set, move_a, move_b)
    if distance == 0:
        return Outcome.DRAW

    # n is odd, so the half-cycle boundary (n-1)/2 is exact
    half = (len(move_set) - 1) // 2
    if distance <= half:
        return Outcome.SECOND_WINS
    return Outcome.FIRST_WINS


def beats(move_set: MoveSet, move_a: MoveLike, move_b: MoveLike) -> bool:
    """True if move_a beats move_b."""
    return resolve(move_set, move_a, move_b) is Outcome.FIRST_WINS


def losers_against(move_set: MoveSet, move: MoveLike) -> List[Move]:
    """Moves that the given move beats."""
    return [other for other in move_set if beats(move_set, move, other)]


def winners_against(move_set: MoveSet, move: MoveLike) -> List[Move]:
    """Moves that beat the given move."""
    return [other for other in move_set if beats(move_set, other, move)]


def generate_table(move_set: MoveSet) -> List[List[Outcome]]:
    """
    Build the full outcome grid.

    Cell [row][col] is resolve(row, col); the diagonal is always DRAW.

    Args:
        move_set: Moves in play

    Returns:
        n x n list of outcomes, rows and columns in canonical order
    """
    moves = move_set.moves
    return [[resolve(move_set, row, col) for col in moves] for row in moves]
