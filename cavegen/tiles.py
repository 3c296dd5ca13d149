"""Tile kinds stored in a cave grid and their debug presentation."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class Tile(str, Enum):
    """Classification of a single grid cell."""

    SOLID = "solid"
    FLOOR = "floor"
    EDGE = "edge"
    ISLAND = "island"


@dataclass(frozen=True)
class TileDescriptor:
    """Describes how a debug view should draw a tile kind."""

    tile: Tile
    glyph: str
    colour: str

    def __post_init__(self) -> None:
        if len(self.glyph) != 1:
            raise ValueError("glyph must be a single character")


# Debug palette matching the colours used by the level preview.
DEBUG_PALETTE: Dict[Tile, TileDescriptor] = {
    Tile.SOLID: TileDescriptor(tile=Tile.SOLID, glyph="#", colour="black"),
    Tile.ISLAND: TileDescriptor(tile=Tile.ISLAND, glyph="%", colour="green"),
    Tile.FLOOR: TileDescriptor(tile=Tile.FLOOR, glyph=".", colour="white"),
    Tile.EDGE: TileDescriptor(tile=Tile.EDGE, glyph="+", colour="grey"),
}


__all__ = ["Tile", "TileDescriptor", "DEBUG_PALETTE"]
