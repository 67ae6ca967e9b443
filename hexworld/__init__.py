"""Hexagonal grid coordinates, neighbourhoods and tile storage."""

from .config import MapSettings
from .coord import (
    Coord,
    HexCoord,
    HexDisk,
    HexRing,
    PixelLayout,
    RelativeHexCoord,
    RelativeHexDisk,
    RelativeHexRing,
)
from .errors import HexWorldError, InvalidDistanceError
from .map import HexMap, HexMapContext, Tile, TileMap, TileView

__version__ = "0.1.0"

__all__ = [
    "Coord",
    "HexCoord",
    "HexDisk",
    "HexMap",
    "HexMapContext",
    "HexRing",
    "HexWorldError",
    "InvalidDistanceError",
    "MapSettings",
    "PixelLayout",
    "RelativeHexCoord",
    "RelativeHexDisk",
    "RelativeHexRing",
    "Tile",
    "TileMap",
    "TileView",
    "__version__",
]
