"""
Deterministic random sources for grid generation.

The grid engine only needs `integer`. SeededRandom adds the extras a
renderer wants: probability draws, shuffles and scoped reseeding.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that can draw an inclusive integer range."""

    def integer(self, minimum: int, maximum: int) -> int: ...


class SeededRandom:
    """
    Seeded generator with a stack of saved states.

    Usage:
        rng = SeededRandom("my sketch")
        rng.push("palette")      # reseed from base seed + label
        colors = rng.shuffle(colors)
        rng.pop()                # back to where we were
    """

    def __init__(self, seed: str | int | None = None) -> None:
        if seed is None:
            seed = random.getrandbits(64)
        self.seed = seed
        self._random = random.Random(seed)
        self._stack: list[tuple[str, object]] = []

    def integer(self, minimum: int, maximum: int) -> int:
        if minimum > maximum:
            raise ValueError(
                f"Invalid integer range: [{minimum}, {maximum}]\n"
                f"  minimum must not exceed maximum"
            )
        return self._random.randint(minimum, maximum)

    def boolean(self, chance: float = 0.5) -> bool:
        """True with probability `chance`."""
        return self._random.random() < chance

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy of `items`."""
        result = list(items)
        self._random.shuffle(result)
        return result

    def push(self, label: str, seed: str | int | None = None) -> None:
        """
        Save the current state and reseed.

        Without an explicit seed, the new seed is derived from the base seed
        and the label, so the same label always gives the same sequence.
        """
        self._stack.append((label, self._random.getstate()))
        new_seed = seed if seed is not None else f"{self.seed}:{label}"
        logger.debug("push %r (depth=%d, seed=%r)", label, len(self._stack), new_seed)
        self._random.seed(new_seed)

    def pop(self) -> str:
        """Restore the state saved by the matching push. Returns its label."""
        if not self._stack:
            raise ValueError("pop() called with no matching push()")
        label, state = self._stack.pop()
        self._random.setstate(state)  # type: ignore[arg-type]
        logger.debug("pop %r (depth=%d)", label, len(self._stack))
        return label

    @property
    def depth(self) -> int:
        return len(self._stack)
