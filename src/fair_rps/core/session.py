"""
One game between a human and the computer.

The session owns the move set and the computer's commitment and enforces
the protocol order:
1. start() commits to the computer's move and returns the public tag
2. play() takes the human's move, resolves the round and reveals the key

play() before start() is refused: the tag has to be out before the human
is asked for a move.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from .commitment import Commitment
from .errors import ProtocolError
from .moves import Move, MoveLike, MoveSet
from .rules import Outcome, resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """Resolved round, including the revealed key."""

    human_move: Move
    computer_move: Move
    outcome: Outcome  # human is the first move
    secret_key: str
    tag: str

    @property
    def message(self) -> str:
        """Outcome text for the human player."""
        if self.outcome is Outcome.FIRST_WINS:
            return "You win!"
        if self.outcome is Outcome.SECOND_WINS:
            return "Computer wins!"
        return "Draw"


class GameSession:
    """Single-round game state passed explicitly to the shell."""

    def __init__(self, move_set: MoveSet):
        self.move_set = move_set
        self._commitment: Optional[Commitment] = None
        self._result: Optional[RoundResult] = None
        self._started = False
        self._abandoned = False

    @property
    def started(self) -> bool:
        return self._started

    @property
    def finished(self) -> bool:
        return self._result is not None or self._abandoned

    @property
    def result(self) -> Optional[RoundResult]:
        return self._result

    def start(self) -> str:
        """
        Commit to the computer's move.

        Returns:
            Public HMAC tag to show before asking for the human's move
        """
        if self.started or self.finished:
            raise ProtocolError("A session commits exactly once")
        self._started = True
        self._commitment = Commitment.create(self.move_set)
        logger.info(f"Game started with {len(self.move_set)} moves")
        return self._commitment.tag

    def play(self, choice: MoveLike) -> RoundResult:
        """
        Resolve the round against the human's move.

        Args:
            choice: Human's move (Move, label or 0-based index)

        Returns:
            RoundResult with both moves, the outcome and the revealed key

        Raises:
            ProtocolError: if the tag has not been published or the round is over
            InvalidMove: if choice is not in the move set
        """
        if self.finished:
            raise ProtocolError("Round already finished")
        if self._commitment is None:
            raise ProtocolError("Commitment must be published before the human moves")

        human_move = self.move_set.resolve_move(choice)
        secret_key, computer_move = self._commitment.reveal()
        outcome = resolve(self.move_set, human_move, computer_move)

        self._result = RoundResult(
            human_move=human_move,
            computer_move=computer_move,
            outcome=outcome,
            secret_key=secret_key,
            tag=self._commitment.tag,
        )
        logger.info(f"Round resolved: {human_move} vs {computer_move} -> {outcome.value}")
        return self._result

    def abandon(self) -> None:
        """Drop the commitment without revealing it."""
        self._abandoned = True
        self._commitment = None
        logger.info("Game abandoned, key discarded")
