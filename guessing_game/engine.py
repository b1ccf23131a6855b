"""
Pure game logic (no console, no storage).

One GuessingGame = one secret, one range, one attempt counter.
Two states only:
- active: keep guessing
- won: the secret was found; every later guess just answers CORRECT and changes nothing

Out-of-range guesses are answered with OUT_OF_RANGE and are NOT counted as attempts.
"""

import logging
from typing import Optional

from .schemas import GameSettings, GameSnapshot
from .secret_source import (
    FixedSecretSource,
    RandomOrgSecretSource,
    RandomSecretSource,
    SecretSource,
)
from .types import Bound, GameStatus, GuessOutcome, InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_MIN = 1
DEFAULT_MAX = 100

# marks "no source given"; None itself is rejected
_DEFAULT_SOURCE = object()


class GuessingGame:
    def __init__(
        self,
        min_value: Bound = DEFAULT_MIN,
        max_value: Bound = DEFAULT_MAX,
        source: Optional[SecretSource] = _DEFAULT_SOURCE,  # type: ignore[assignment]
    ) -> None:
        """
        GuessingGame()                  -> 1..100, random secret
        GuessingGame(source=src)        -> 1..100, secret from src
        GuessingGame(10, 20, src)       -> custom range, secret from src

        Raises InvalidArgumentError if min >= max or the source cannot give
        a secret inside the range. Nothing is half-built on failure.
        """
        if min_value >= max_value:
            raise InvalidArgumentError(f"min must be < max (got {min_value}, {max_value})")

        if source is _DEFAULT_SOURCE:
            source = RandomSecretSource()
        elif source is None:
            raise InvalidArgumentError("A secret source is required")
        if not callable(getattr(source, "next_secret", None)):
            raise InvalidArgumentError("A secret source with next_secret(min, max) is required")

        # Ask the source once; we never keep it around
        try:
            secret = source.next_secret(min_value, max_value)
        except InvalidArgumentError:
            raise
        except ValueError as exc:
            raise InvalidArgumentError(f"Secret source failed: {exc}") from exc

        if not isinstance(secret, int) or isinstance(secret, bool):
            raise InvalidArgumentError(f"secret source returned a non-integer: {secret!r}")
        if secret < min_value or secret > max_value:
            raise InvalidArgumentError(f"secret out of range {min_value}..{max_value}")

        self._min = min_value
        self._max = max_value
        self._secret = secret  # diagnostics/tests only
        self._attempts = 0
        self._finished = False

        logger.debug("New game created, range %d..%d", min_value, max_value)

    @classmethod
    def with_fixed_secret(cls, min_value: Bound, max_value: Bound, fixed: int) -> "GuessingGame":
        """Factory for deterministic tests with a known secret."""
        if min_value >= max_value:
            raise InvalidArgumentError(f"min must be < max (got {min_value}, {max_value})")
        if fixed < min_value or fixed > max_value:
            raise InvalidArgumentError(f"secret {fixed} out of range {min_value}..{max_value}")
        return cls(min_value, max_value, FixedSecretSource(fixed))

    @classmethod
    def from_settings(cls, settings: GameSettings) -> "GuessingGame":
        # Pick the source the settings ask for
        if settings.seed is not None:
            local = RandomSecretSource.seeded(settings.seed)
        else:
            local = RandomSecretSource()

        if settings.use_random_org:
            source: SecretSource = RandomOrgSecretSource(fallback=local)
        else:
            source = local

        return cls(settings.min, settings.max, source)

    def guess(self, value: int) -> GuessOutcome:
        # 1. Already won -> frozen, answer stays CORRECT (even for out-of-range values)
        if self._finished:
            return GuessOutcome.CORRECT

        # 2. Outside the range -> not an attempt
        if value < self._min or value > self._max:
            return GuessOutcome.OUT_OF_RANGE

        # 3. A real attempt
        self._attempts += 1
        if value < self._secret:
            return GuessOutcome.TOO_LOW
        if value > self._secret:
            return GuessOutcome.TOO_HIGH

        self._finished = True
        logger.debug("Secret found in %d attempt(s)", self._attempts)
        return GuessOutcome.CORRECT

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def finished(self) -> bool:
        return self._finished

    def is_finished(self) -> bool:
        return self._finished

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def status(self) -> GameStatus:
        return "won" if self._finished else "active"

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            min=self._min,
            max=self._max,
            attempts=self._attempts,
            finished=self._finished,
            status=self.status,
        )

    def __repr__(self) -> str:
        # never print the secret
        return (
            f"GuessingGame(min={self._min}, max={self._max}, "
            f"attempts={self._attempts}, status={self.status!r})"
        )
