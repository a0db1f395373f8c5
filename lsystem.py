#!/usr/bin/env python3
"""lsystem.py

Context-free, deterministic L-systems over an arbitrary alphabet.

An L-system is defined here by:
- an axiom: a sequence of symbols (generation 0)
- a production rule: a function mapping one symbol to a sequence of symbols

Any Python values can serve as the alphabet; enums work best. Lindenmayer's
algae model, where A reproduces and B grows:

    class Algae(enum.Enum):
        A = "A"
        B = "B"

    def algae_rule(cell: Algae) -> list[Algae]:
        if cell is Algae.A:
            return [Algae.A, Algae.B]
        return [Algae.A]

    algae = LSystem([Algae.B], algae_rule)
    algae.generation(4)  # [A, B, A, A, B]

Iterating an LSystem yields every generation in turn, starting with the
axiom. The iterator never ends, so bound it yourself (itertools.islice,
a break, ...).
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

ProductionRule = Callable[[T], Iterable[T]]


# -------------------------
# Grammar definition
# -------------------------


@dataclass(frozen=True)
class LSystem(Generic[T]):
    axiom: tuple[T, ...]
    rule: ProductionRule[T]

    def __post_init__(self) -> None:
        # Own a copy; later changes to the caller's sequence are not seen.
        object.__setattr__(self, "axiom", tuple(self.axiom))

    def iter(self) -> LSystemIterator[T]:
        """Return a fresh iterator positioned before generation 0."""
        return LSystemIterator(self.axiom, self.rule)

    def __iter__(self) -> LSystemIterator[T]:
        return self.iter()

    def generation(self, n: int) -> list[T]:
        """Return generation n (0 is the axiom)."""
        if n < 0:
            raise ValueError(f"generation must be >= 0; got {n}")
        return next(itertools.islice(self.iter(), n, None))


# -------------------------
# Generation producer
# -------------------------


class LSystemIterator(Generic[T]):
    """Infinite iterator over the generations of an L-system.

    The first call to next() returns the axiom; every later call rewrites the
    current generation and returns the result. Each returned list is a new
    object, so callers may mutate it freely.
    """

    def __init__(self, axiom: Iterable[T], rule: ProductionRule[T]) -> None:
        self._state: list[T] = list(axiom)
        self._rule = rule
        self._zeroth = True
        self._generation = -1

    @property
    def generation(self) -> int:
        """Index of the last generation returned; -1 before the first."""
        return self._generation

    def __iter__(self) -> LSystemIterator[T]:
        return self

    def __next__(self) -> list[T]:
        if self._zeroth:
            self._zeroth = False
            self._generation = 0
            return list(self._state)

        # Children of symbol i must all precede those of symbol i + 1.
        new_state: list[T] = []
        for symbol in self._state:
            new_state.extend(self._rule(symbol))

        self._state = new_state
        self._generation += 1
        return list(self._state)
