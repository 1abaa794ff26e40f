"""Utility modules for the game shell."""

from .rich_display import GameDisplay, build_outcome_table, setup_rich_logging

__all__ = [
    "GameDisplay",
    "build_outcome_table",
    "setup_rich_logging",
]
