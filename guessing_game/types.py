"""
Labels for clarity.
"""

from enum import Enum
from typing import Literal

Bound = int  # inclusive range edge
GameStatus = Literal["active", "won"]


class GuessOutcome(str, Enum):
    """Result of a single guess. Exactly these four, nothing else."""
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"
    OUT_OF_RANGE = "out_of_range"


class InvalidArgumentError(ValueError):
    """Raised when a game (or its secret) cannot be built from the given arguments."""
