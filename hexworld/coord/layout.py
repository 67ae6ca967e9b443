"""Scale unit-space hex math into a front end's pixel or cell space."""

from __future__ import annotations

from dataclasses import dataclass

from .hex import HexCoord


@dataclass(frozen=True)
class PixelLayout:
    """Affine mapping between unit hex space and screen space.

    ``size_x``/``size_y`` are the screen extents of one unit.  Terminal
    cells are taller than wide, so the two usually differ.
    """

    size_x: float = 1.0
    size_y: float = 1.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def __post_init__(self) -> None:
        if self.size_x <= 0 or self.size_y <= 0:
            raise ValueError("layout sizes must be positive")

    def to_pixel(self, coord: HexCoord) -> tuple[float, float]:
        x, y = coord.to_linear()
        return x * self.size_x + self.origin_x, y * self.size_y + self.origin_y

    def from_pixel(self, x: float, y: float) -> HexCoord:
        px = (x - self.origin_x) / self.size_x
        py = (y - self.origin_y) / self.size_y
        return HexCoord.from_linear(px, py)


__all__ = ["PixelLayout"]
