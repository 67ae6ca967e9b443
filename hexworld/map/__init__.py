"""Map bounds and tile storage."""

from .context import HexMapContext
from .tile import Occupant, Tile, TileView
from .tile_map import HexMap, TileMap

__all__ = ["HexMap", "HexMapContext", "Occupant", "Tile", "TileMap", "TileView"]
