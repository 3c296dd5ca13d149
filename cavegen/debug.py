"""Renderer-agnostic text views of a cave grid, used for debugging."""
from __future__ import annotations

from typing import Dict, Mapping

from cavegen.grid import CaveGrid
from cavegen.tiles import DEBUG_PALETTE, Tile, TileDescriptor


def render_ascii(
    grid: CaveGrid,
    palette: Mapping[Tile, TileDescriptor] = DEBUG_PALETTE,
) -> str:
    """Return one line of glyphs per row, with the top row (``y = height - 1``) first."""

    lines = []
    for y in reversed(range(grid.height)):
        lines.append("".join(palette[grid.get(x, y)].glyph for x in range(grid.width)))
    return "\n".join(lines)


def tile_counts(grid: CaveGrid) -> Dict[Tile, int]:
    """Return how many cells carry each tile kind."""

    return {tile: grid.count(tile) for tile in Tile}


__all__ = ["render_ascii", "tile_counts"]
