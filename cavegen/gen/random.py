"""Seeded random source and the draw helpers used by the walker.

Every draw goes through an explicit :class:`random.Random` so that a seed
fully determines a cave and separate runs never share state.
"""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

_T = TypeVar("_T")


def get_rng(seed: int | None = None) -> random.Random:
    """Return a private random source; ``None`` seeds it from the OS."""

    return random.Random(seed)


def rand_choice(rng: random.Random, candidates: Sequence[_T]) -> _T:
    """Pick one of ``candidates``; callers handle the empty case themselves."""

    if not candidates:
        raise IndexError("no candidates to choose from")
    return rng.choice(candidates)


def rand_int(rng: random.Random, low: int, high: int) -> int:
    """Draw an integer in the inclusive range ``[low, high]``."""

    return rng.randint(low, high)


def rand_chance(rng: random.Random, probability: float) -> bool:
    """Return ``True`` with the given ``probability`` (one draw from ``rng``)."""

    return rng.random() < probability
