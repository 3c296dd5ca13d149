"""Random-march walker that carves floor corridors through a cave grid."""
from __future__ import annotations

import logging
import random
from typing import Tuple

from cavegen.gen.params import WalkerParams
from cavegen.gen.random import rand_chance, rand_choice, rand_int
from cavegen.grid import CaveGrid
from cavegen.tiles import Tile


logger = logging.getLogger(__name__)

Vector = Tuple[int, int]

# Order matters: it fixes which direction a given random draw selects.
DIRECTIONS: Tuple[Vector, ...] = (
    (0, 1),
    (0, -1),
    (-1, 0),
    (1, 0),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)
_STAY: Vector = (0, 0)


def _clamp(value: int, low: int, high: int) -> int:
    if value < low:
        return low
    if value > high:
        return high
    return value


class RandomMarchWalker:
    """Carve a randomised path of floor tiles starting from the grid centre.

    Each step picks one of eight directions, then advances up to
    ``max_step_length`` tiles, occasionally stepping backwards. The carved
    position always stays one tile inside the outer ring, and every carved
    tile is widened by one tile on each side perpendicular to travel.
    """

    def __init__(self, params: WalkerParams, width: int, height: int) -> None:
        self.params = params
        self.width = width
        self.height = height
        self.position: Vector = (width // 2, height // 2)

    def walk(self, grid: CaveGrid, rng: random.Random) -> None:
        """Carve ``walk_steps`` randomised moves into ``grid`` and classify it.

        Random draws are consumed in a fixed order per step: direction,
        step length, then one backtrack draw per sub-step.
        """

        for _ in range(self.params.walk_steps):
            direction = self._choose_direction(rng)
            step_length = rand_int(rng, 1, self.params.max_step_length)
            for _ in range(step_length):
                self._advance(direction, rng)
                x, y = self.position
                grid.set(x, y, Tile.FLOOR)
                self._widen(grid, direction)

        logger.debug("Walker finished at %s after %d steps", self.position, self.params.walk_steps)
        grid.detect_edges()
        grid.identify_islands()

    def _choose_direction(self, rng: random.Random) -> Vector:
        x, y = self.position
        candidates = list(DIRECTIONS)
        if x <= 0:
            candidates = [d for d in candidates if d[0] != -1]
        if x >= self.width - 1:
            candidates = [d for d in candidates if d[0] != 1]
        if y <= 0:
            candidates = [d for d in candidates if d[1] != -1]
        if y >= self.height - 1:
            candidates = [d for d in candidates if d[1] != 1]
        if not candidates:
            return _STAY
        return rand_choice(rng, candidates)

    def _advance(self, direction: Vector, rng: random.Random) -> None:
        dx, dy = direction
        x, y = self.position
        if rand_chance(rng, self.params.backtrack_probability):
            x, y = x - dx, y - dy
        else:
            x, y = x + dx, y + dy
        self.position = (
            _clamp(x, 1, self.width - 2),
            _clamp(y, 1, self.height - 2),
        )

    def _widen(self, grid: CaveGrid, direction: Vector) -> None:
        x, y = self.position
        # Diagonals take the horizontal branch.
        if direction[0] != 0:
            grid.set(x, y + 1, Tile.FLOOR)
            grid.set(x, y - 1, Tile.FLOOR)
        elif direction[1] != 0:
            grid.set(x + 1, y, Tile.FLOOR)
            grid.set(x - 1, y, Tile.FLOOR)


__all__ = ["DIRECTIONS", "RandomMarchWalker"]
