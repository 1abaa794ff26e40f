"""
HMAC commitment to the computer's move.

Before the human chooses, the computer:
1. Generates a 256-bit secret key (hex encoded)
2. Picks a move uniformly at random
3. Publishes HMAC-SHA256(key, move label)

After the round the key and move are revealed, so anyone can recompute the
HMAC and check it against the tag shown at the start. The HMAC key is the
UTF-8 text of the hex key exactly as displayed, which lets a stock HMAC
calculator reproduce the tag.

All randomness comes from the secrets module (OS CSPRNG).
"""

import hashlib
import hmac
import logging
import secrets
from dataclasses import dataclass
from typing import Tuple, Union

from .moves import Move, MoveSet

logger = logging.getLogger(__name__)

KEY_BYTES = 32  # 256 bits


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    """
    Generate a random secret key.

    Args:
        num_bytes: Key entropy in bytes (at least 32)

    Returns:
        Hex string of 2 * num_bytes characters
    """
    if num_bytes < KEY_BYTES:
        raise ValueError(f"Key must be at least {KEY_BYTES} bytes, got {num_bytes}")
    return secrets.token_hex(num_bytes)


def choose_move(move_set: MoveSet) -> Move:
    """Pick a move uniformly at random."""
    # randbelow rejection-samples, so there is no modulo bias for any n
    return move_set.move_at(secrets.randbelow(len(move_set)))


def commit(secret_key: str, move: Union[Move, str]) -> str:
    """
    Compute the commitment tag for a move.

    Args:
        secret_key: Hex key from generate_key()
        move: Move or its label

    Returns:
        HMAC-SHA256 hex digest (64 characters)
    """
    label = move.label if isinstance(move, Move) else move
    return hmac.new(
        secret_key.encode("utf-8"),
        label.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def verify(tag: str, secret_key: str, move: Union[Move, str]) -> bool:
    """Check a published tag against a revealed key and move."""
    return hmac.compare_digest(
        tag.strip().lower().encode("utf-8"),
        commit(secret_key, move).encode("ascii"),
    )


@dataclass(frozen=True, repr=False)
class Commitment:
    """
    A committed move.

    secret_key and move stay private until reveal(); tag is public.
    """

    secret_key: str
    move: Move
    tag: str

    @classmethod
    def create(cls, move_set: MoveSet) -> "Commitment":
        """Generate a key, pick a move and compute its tag."""
        secret_key = generate_key()
        move = choose_move(move_set)
        tag = commit(secret_key, move)
        logger.debug(f"Committed to one of {len(move_set)} moves, tag {tag}")
        return cls(secret_key=secret_key, move=move, tag=tag)

    def reveal(self) -> Tuple[str, Move]:
        """Disclose the key and the committed move."""
        return self.secret_key, self.move

    def verify(self) -> bool:
        """Recompute the tag from the key and move."""
        return verify(self.tag, self.secret_key, self.move)

    def __repr__(self) -> str:
        # key and move must not leak before reveal
        return f"Commitment(tag={self.tag!r})"
