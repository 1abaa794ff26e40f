"""Core game: move sets, rules and the move commitment."""

from .errors import ConfigurationError, InvalidInput, InvalidMove, ProtocolError
from .moves import Move, MoveSet, MIN_MOVES
from .rules import (
    Outcome,
    resolve,
    beats,
    cyclic_distance,
    winners_against,
    losers_against,
    generate_table,
)
from .commitment import Commitment, generate_key, choose_move, commit, verify, KEY_BYTES
from .session import GameSession, RoundResult

__all__ = [
    "ConfigurationError",
    "InvalidInput",
    "InvalidMove",
    "ProtocolError",
    "Move",
    "MoveSet",
    "MIN_MOVES",
    "Outcome",
    "resolve",
    "beats",
    "cyclic_distance",
    "winners_against",
    "losers_against",
    "generate_table",
    "Commitment",
    "generate_key",
    "choose_move",
    "commit",
    "verify",
    "KEY_BYTES",
    "GameSession",
    "RoundResult",
]
