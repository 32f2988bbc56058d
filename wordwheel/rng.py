"""Seeded 64-bit linear congruential random source for reproducible generation."""

from dataclasses import dataclass
from typing import Iterable, List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")

MULTIPLIER = 6364136223846793005
INCREMENT = 1442695040888963407
MASK64 = (1 << 64) - 1


def lcg_next(state: int) -> int:
    return (state * MULTIPLIER + INCREMENT) & MASK64


def derive_seed(level_number: int, attempt: int, seed: Optional[int] = None) -> int:
    """
    Seed for one generation attempt.

    Without a caller seed this is level * 1000 + attempt, so every level has
    its own reproducible run of attempts. A caller seed is folded in through
    one LCG step so that nearby seeds still diverge.
    """
    base = (level_number * 1000 + attempt) & MASK64
    if seed is None:
        return base
    return (lcg_next(seed & MASK64) ^ base) & MASK64


@dataclass
class SeededRandom:
    """Linear congruential stream over a single 64-bit state."""
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK64

    def next(self) -> int:
        self.state = lcg_next(self.state)
        return self.state

    def randbelow(self, n: int) -> int:
        """
        Uniform integer in [0, n).

        Takes the high 64 bits of next() * n, rejecting the few products that
        would bias the result.
        """
        if n <= 0:
            raise ValueError(f"randbelow() requires n > 0, got {n}")
        threshold = (MASK64 + 1 - n) % n
        while True:
            product = self.next() * n
            if product & MASK64 >= threshold:
                return product >> 64

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.randbelow(len(seq))]

    def shuffle(self, items: MutableSequence[T]) -> None:
        # Fisher-Yates, in place
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]

    def shuffled(self, items: Iterable[T]) -> List[T]:
        result = list(items)
        self.shuffle(result)
        return result
