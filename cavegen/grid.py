"""Tile storage for generated caves and its classification passes."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from cavegen.tiles import Tile


TileRows = List[List[Tile]]
Snapshot = Tuple[Tuple[Tile, ...], ...]

_CARDINALS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(slots=True)
class CaveGrid:
    """Rectangular tile map, created solid and carved in place.

    Reads outside the grid report :attr:`Tile.SOLID` and writes outside the
    grid are ignored, so callers can treat everything beyond the border as
    rock without special-casing the boundary. Non-positive dimensions produce
    an empty grid.
    """

    width: int
    height: int
    tiles: TileRows = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.width = max(0, self.width)
        self.height = max(0, self.height)
        self.tiles = [
            [Tile.SOLID for _ in range(self.width)]
            for _ in range(self.height)
        ]

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        """Return ``True`` when ``(x, y)`` lies within the grid bounds."""

        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Tile:
        """Return the tile at ``(x, y)``, or solid rock when out of bounds."""

        if not self.in_bounds(x, y):
            return Tile.SOLID
        return self.tiles[y][x]

    def set(self, x: int, y: int, tile: Tile) -> None:
        """Write ``tile`` at ``(x, y)``; out-of-bounds writes are dropped."""

        if self.in_bounds(x, y):
            self.tiles[y][x] = tile

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def is_floor(self, x: int, y: int) -> bool:
        return self.get(x, y) is Tile.FLOOR

    def is_solid(self, x: int, y: int) -> bool:
        return self.get(x, y) is Tile.SOLID

    is_wall = is_solid

    def is_edge(self, x: int, y: int) -> bool:
        return self.get(x, y) is Tile.EDGE

    def is_island(self, x: int, y: int) -> bool:
        return self.get(x, y) is Tile.ISLAND

    def cells(self) -> Iterator[tuple[int, int, Tile]]:
        """Yield ``(x, y, tile)`` for every cell, row by row."""

        for y, row in enumerate(self.tiles):
            for x, tile in enumerate(row):
                yield x, y, tile

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self.tiles)

    def snapshot(self) -> Snapshot:
        """Return an immutable copy of the tiles, indexed ``[y][x]``."""

        return tuple(tuple(row) for row in self.tiles)

    # ------------------------------------------------------------------
    # Classification passes
    # ------------------------------------------------------------------
    def detect_edges(self) -> None:
        """Promote solid tiles orthogonally adjacent to floor into edges.

        Only ``SOLID -> EDGE`` promotions happen, so the scan order cannot
        cascade and repeating the pass changes nothing.
        """

        for y in range(self.height):
            for x in range(self.width):
                if self.tiles[y][x] is not Tile.FLOOR:
                    continue
                for dx, dy in _CARDINALS:
                    nx, ny = x + dx, y + dy
                    if self.in_bounds(nx, ny) and self.tiles[ny][nx] is Tile.SOLID:
                        self.tiles[ny][nx] = Tile.EDGE

    def identify_islands(self) -> None:
        """Mark rock that cannot reach the border without crossing floor.

        A breadth-first fill seeded from every border cell walks through
        solid and edge tiles; floor and existing islands stop it. Rock the
        fill never reached becomes :attr:`Tile.ISLAND`.
        """

        visited = [[False for _ in range(self.width)] for _ in range(self.height)]
        for x in range(self.width):
            self._flood_fill((x, 0), visited)
            self._flood_fill((x, self.height - 1), visited)
        for y in range(self.height):
            self._flood_fill((0, y), visited)
            self._flood_fill((self.width - 1, y), visited)

        for y in range(self.height):
            for x in range(self.width):
                if visited[y][x]:
                    continue
                if self.tiles[y][x] in (Tile.SOLID, Tile.EDGE):
                    self.tiles[y][x] = Tile.ISLAND

    def _flood_fill(self, start: tuple[int, int], visited: List[List[bool]]) -> None:
        queue: deque[tuple[int, int]] = deque([start])
        while queue:
            x, y = queue.popleft()
            # Neighbours are queued unfiltered; discard strays here.
            if not self.in_bounds(x, y):
                continue
            if visited[y][x] or self.tiles[y][x] in (Tile.FLOOR, Tile.ISLAND):
                continue
            visited[y][x] = True
            for dx, dy in _CARDINALS:
                queue.append((x + dx, y + dy))


__all__ = ["CaveGrid", "Snapshot", "TileRows"]
