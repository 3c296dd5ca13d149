"""Random-march cave generation on a classified 2D tile grid."""

from .grid import CaveGrid
from .tiles import DEBUG_PALETTE, Tile, TileDescriptor

__all__ = ["CaveGrid", "Tile", "TileDescriptor", "DEBUG_PALETTE"]
__version__ = "0.1.0"
