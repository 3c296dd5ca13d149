from __future__ import annotations

from cavegen.debug import render_ascii, tile_counts
from cavegen.grid import CaveGrid
from cavegen.tiles import DEBUG_PALETTE, Tile


def test_palette_covers_every_tile():
    assert set(DEBUG_PALETTE) == set(Tile)
    assert DEBUG_PALETTE[Tile.SOLID].colour == "black"
    assert DEBUG_PALETTE[Tile.ISLAND].colour == "green"
    assert DEBUG_PALETTE[Tile.FLOOR].colour == "white"
    assert DEBUG_PALETTE[Tile.EDGE].colour == "grey"
    assert len({descriptor.glyph for descriptor in DEBUG_PALETTE.values()}) == len(Tile)


def test_render_ascii_puts_top_row_first():
    grid = CaveGrid(3, 2)
    grid.set(0, 0, Tile.FLOOR)
    grid.set(2, 1, Tile.ISLAND)
    grid.detect_edges()

    assert render_ascii(grid) == "+#%\n.+#"


def test_render_ascii_of_empty_grid_is_empty():
    assert render_ascii(CaveGrid(0, 0)) == ""


def test_tile_counts_report_every_kind():
    grid = CaveGrid(4, 4)
    grid.set(1, 1, Tile.FLOOR)
    grid.detect_edges()

    assert tile_counts(grid) == {Tile.SOLID: 11, Tile.FLOOR: 1, Tile.EDGE: 4, Tile.ISLAND: 0}
