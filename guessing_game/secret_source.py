"""
Where the secret number comes from.

A secret source answers one question: "give me an int between min and max,
both inclusive". The game asks exactly once, when it is created.

- RandomSecretSource: local PRNG. Pass your own random.Random (or use .seeded())
  so tests get the same secret every run.
- FixedSecretSource: always the same value. Handy for tests and demos.
- RandomOrgSecretSource: asks random.org. If anything goes wrong (no internet,
  timeout, bad response), we fall back to the local generator so the game still works.
"""

import logging
import random
from typing import Optional, Protocol

import requests

from .types import Bound, InvalidArgumentError

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"


class SecretSource(Protocol):
    def next_secret(self, min_inclusive: Bound, max_inclusive: Bound) -> int:
        ...


def _check_bounds(min_inclusive: Bound, max_inclusive: Bound) -> None:
    if min_inclusive > max_inclusive:
        raise InvalidArgumentError(f"min > max ({min_inclusive} > {max_inclusive})")


class RandomSecretSource:
    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: int) -> "RandomSecretSource":
        return cls(random.Random(seed))

    def next_secret(self, min_inclusive: Bound, max_inclusive: Bound) -> int:
        _check_bounds(min_inclusive, max_inclusive)
        # randint is inclusive on both ends
        return self._rng.randint(min_inclusive, max_inclusive)


class FixedSecretSource:
    """
    Always returns `value`. Bounds are NOT checked here;
    GuessingGame.with_fixed_secret() does that before building the game.
    """

    def __init__(self, value: int) -> None:
        self.value = value

    def next_secret(self, min_inclusive: Bound, max_inclusive: Bound) -> int:
        return self.value


class RandomOrgSecretSource:
    def __init__(
        self,
        fallback: Optional[SecretSource] = None,
        timeout_seconds: float = 3.0,
    ) -> None:
        self.fallback = fallback if fallback is not None else RandomSecretSource()
        # keep network quick; if it takes too long, we will just fallback
        self.timeout_seconds = timeout_seconds

    def next_secret(self, min_inclusive: Bound, max_inclusive: Bound) -> int:
        # Bad bounds are the caller's mistake, not a network problem: fail before any request
        _check_bounds(min_inclusive, max_inclusive)

        # Parameters to send to random.org
        params = {
            "num": 1,              # we only need one number
            "min": min_inclusive,  # smallest allowed number
            "max": max_inclusive,  # largest allowed number
            "col": 1,
            "base": 10,
            "format": "plain",     # plain text response
            "rnd": "new",
        }

        try:
            response = requests.get(RANDOM_URL, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()

            # The body looks like: "42\n"
            value = int(response.text.strip())
            if value < min_inclusive or value > max_inclusive:
                raise ValueError(f"random.org number {value} out of range {min_inclusive}..{max_inclusive}.")
            return value

        except (requests.RequestException, ValueError) as exc:
            logger.warning("random.org unavailable (%s); using local generator", exc)
            return self.fallback.next_secret(min_inclusive, max_inclusive)
