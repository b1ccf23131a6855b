"""
Explicit validation & Pydantic models
- GameSettings: the knobs a game can be built from (validated).
- GameSnapshot: public, read-only view of a game. The secret is never included.
"""

from typing import Optional
from pydantic import BaseModel, Field, model_validator

from .types import GameStatus


# 1. Settings used to build a game (bounds + where the secret comes from)
class GameSettings(BaseModel):
    min: int = Field(1, description="Lowest allowed guess (inclusive)")
    max: int = Field(100, description="Highest allowed guess (inclusive)")
    seed: Optional[int] = Field(None, description="Seed for the local generator; None = unseeded")
    use_random_org: bool = Field(False, description="Ask random.org for the secret (falls back to local)")

    @model_validator(mode="after")
    def validate_bounds(self) -> "GameSettings":
        if self.min >= self.max:
            raise ValueError("min must be < max")
        return self


# 2. What a caller is allowed to see about a running game
class GameSnapshot(BaseModel):
    min: int = Field(..., description="Lowest allowed guess")
    max: int = Field(..., description="Highest allowed guess")
    attempts: int = Field(..., description="In-range guesses made so far")
    finished: bool = Field(..., description="True once the secret was found")
    status: GameStatus = Field(..., description="'active' or 'won'")

    model_config = {"frozen": True}
