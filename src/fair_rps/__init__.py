"""Provably fair rock-paper-scissors for any odd number of moves."""

__version__ = "0.1.0"
