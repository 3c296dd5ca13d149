"""Walker parameters, randomness helpers and the random-march walker."""

from .params import CaveGenParams, WalkerParams
from .random import get_rng, rand_chance, rand_choice, rand_int
from .walker import DIRECTIONS, RandomMarchWalker

__all__ = [
    "CaveGenParams",
    "WalkerParams",
    "DIRECTIONS",
    "RandomMarchWalker",
    "get_rng",
    "rand_chance",
    "rand_choice",
    "rand_int",
]
