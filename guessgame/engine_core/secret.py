"""
Secret Number Generator - Picks the number players have to guess.
"""

from __future__ import annotations
import random

MAX_SECRET_NUMBER = 10


class SecretNumberGenerator:
    """
    Uniform secret numbers in [1, max_secret_number].

    The random source is injectable; pass a seeded `random.Random`
    for reproducible games.
    """

    def __init__(
        self,
        max_secret_number: int = MAX_SECRET_NUMBER,
        rng: random.Random | None = None,
    ):
        if max_secret_number < 1:
            raise ValueError(f"max_secret_number must be at least 1, got {max_secret_number}")
        self.max_secret_number = max_secret_number
        self._rng = rng or random.Random()

    def generate(self) -> int:
        return self._rng.randint(1, self.max_secret_number)
