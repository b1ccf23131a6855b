"""
Single place to read game settings from the environment.

- Load env vars from .env if present
- Turn them into a validated GameSettings

Variables:
  GUESSING_GAME_MIN         lowest allowed guess (default 1)
  GUESSING_GAME_MAX         highest allowed guess (default 100)
  GUESSING_GAME_SEED        seed for the local generator (unset = random every time)
  GUESSING_GAME_RANDOM_ORG  1/true/yes/on to ask random.org for the secret
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from .schemas import GameSettings
from .types import InvalidArgumentError

TRUTHY = ("1", "true", "yes", "on")


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise InvalidArgumentError(f"{name} must be an integer, got {raw!r}") from exc


def load_settings() -> GameSettings:
    # dev convenience; real environments inject env vars directly
    load_dotenv()

    try:
        return GameSettings(
            min=_int_env("GUESSING_GAME_MIN", 1),
            max=_int_env("GUESSING_GAME_MAX", 100),
            seed=_int_env("GUESSING_GAME_SEED", None),
            use_random_org=os.getenv("GUESSING_GAME_RANDOM_ORG", "").strip().lower() in TRUTHY,
        )
    except ValidationError as exc:
        raise InvalidArgumentError(f"Invalid game settings: {exc}") from exc
