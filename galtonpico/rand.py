"""Small multiplicative congruential generator producing left/right steps."""

from __future__ import annotations

from collections.abc import Iterator

MULTIPLIER = 75
MODULUS = 65537
SEED = 11152


class PseudoRandom:
    """Lehmer generator that yields +1 or -1 depending on a threshold.

    ``percentage`` is the fraction of the modulus below which a step is -1,
    so 0.5 gives roughly even odds.
    """

    def __init__(self, percentage: float = 0.5, seed: int = SEED) -> None:
        self.threshold = int(percentage * MODULUS)
        self.state = seed

    def next_sign(self) -> int:
        """Advance the generator and return +1 or -1."""
        self.state = (self.state * MULTIPLIER) % MODULUS
        return 1 if self.state > self.threshold else -1

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next_sign()