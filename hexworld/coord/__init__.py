from .base import Coord
from .hex import CENTER_TO_POINT, SQRT3, HexCoord, RelativeHexCoord
from .integers import I8_MAX, I8_MIN, U8_MAX, wrap_i8, wrap_u8
from .layout import PixelLayout
from .rings import (
    MAX_DISTANCE,
    HexDisk,
    HexRing,
    RelativeHexDisk,
    RelativeHexRing,
    disk_size,
    ring_size,
)

__all__ = [
    "CENTER_TO_POINT",
    "Coord",
    "HexCoord",
    "HexDisk",
    "HexRing",
    "I8_MAX",
    "I8_MIN",
    "MAX_DISTANCE",
    "PixelLayout",
    "RelativeHexCoord",
    "RelativeHexDisk",
    "RelativeHexRing",
    "SQRT3",
    "U8_MAX",
    "disk_size",
    "ring_size",
    "wrap_i8",
    "wrap_u8",
]
