from __future__ import annotations

import logging
import random

from cavegen.events import CaveCleared, CaveGenerated, EventBus, GenerateCave
from cavegen.gen import CaveGenParams, RandomMarchWalker, WalkerParams, get_rng
from cavegen.grid import CaveGrid
from cavegen.tiles import Tile


logger = logging.getLogger(__name__)


def run_walkers(
    grid: CaveGrid,
    rng: random.Random,
    walker_count: int,
    walker_params: WalkerParams,
) -> CaveGrid:
    """Run ``walker_count`` walkers over ``grid`` in order, drawing from ``rng``.

    Each walker starts from the centre and classifies the whole grid when it
    finishes, so later walkers may tunnel through earlier edges and islands.
    """

    if walker_count < 0:
        raise ValueError("walker_count must not be negative")
    width, height = grid.dimensions()
    for index in range(walker_count):
        walker = RandomMarchWalker(walker_params, width, height)
        walker.walk(grid, rng)
        logger.debug("Walker %d/%d done", index + 1, walker_count)
    return grid


def generate(
    width: int,
    height: int,
    seed: int | None,
    walker_count: int,
    walker_params: WalkerParams,
) -> CaveGrid:
    """Seed a fresh random source and return a newly carved, classified grid."""

    rng = get_rng(seed)
    grid = CaveGrid(width, height)
    run_walkers(grid, rng, walker_count, walker_params)
    logger.info(
        "Generated %dx%d cave (seed=%s walkers=%d floor=%d islands=%d)",
        grid.width,
        grid.height,
        seed,
        walker_count,
        grid.count(Tile.FLOOR),
        grid.count(Tile.ISLAND),
    )
    return grid


def generate_cave(params: CaveGenParams) -> CaveGrid:
    """Run the random-march pipeline described by ``params``."""

    return generate(
        params.width,
        params.height,
        params.seed,
        params.walker_count,
        params.walker,
    )


class CaveGeneratorSystem:
    """Listen for :class:`GenerateCave` events and rebuild the active cave.

    The random source is seeded once, so successive requests yield different
    caves while the whole sequence stays reproducible for a given seed. Each
    request tears the old cave down before the new one is built.
    """

    def __init__(self, *, event_bus: EventBus, params: CaveGenParams) -> None:
        self._bus = event_bus
        self.params = params
        self._rng = get_rng(params.seed)
        self.grid: CaveGrid | None = None
        self.generation = 0
        self._bus.subscribe(GenerateCave.topic, self._on_generate_requested)

    def regenerate(self, params: CaveGenParams | None = None) -> CaveGrid:
        """Replace the current cave, continuing the system's random stream."""

        if params is not None:
            self.params = params
        self._teardown()
        try:
            grid = CaveGrid(self.params.width, self.params.height)
            run_walkers(grid, self._rng, self.params.walker_count, self.params.walker)
        except Exception:
            logger.exception(
                "Cave generation failed for params: size=%sx%s walkers=%s seed=%s",
                self.params.width,
                self.params.height,
                self.params.walker_count,
                self.params.seed,
            )
            raise
        self.grid = grid
        self.generation += 1
        CaveGenerated(grid=grid, generation=self.generation).publish(self._bus)
        return grid

    def _teardown(self) -> None:
        previous, self.grid = self.grid, None
        CaveCleared(grid=previous).publish(self._bus)

    def _on_generate_requested(self, *, params: CaveGenParams | None = None, **_: object) -> None:
        self.regenerate(params)


__all__ = ["CaveGeneratorSystem", "generate", "generate_cave", "run_walkers"]
