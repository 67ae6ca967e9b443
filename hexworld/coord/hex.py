"""Axial hex coordinates with cubic accessors, rotation and pixel conversion.

Absolute positions (:class:`HexCoord`) live in an unsigned 8-bit domain and
relative displacements (:class:`RelativeHexCoord`) in a signed 8-bit one.
Every operation that produces a coordinate wraps into its target domain, so
arithmetic never raises on overflow.

The cubic triple is derived as ``(x, y, z) = (q, -q - r, r)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import floor, sqrt
from typing import TYPE_CHECKING, ClassVar

from .integers import check_i8, check_u8, wrap_i8, wrap_u8

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..map.context import HexMapContext
    from .rings import HexDisk, HexRing, RelativeHexDisk, RelativeHexRing

SQRT3 = sqrt(3.0)
# Apothem to circumradius ratio of a unit hex.
CENTER_TO_POINT = 1.0 / SQRT3


def _axial_to_linear(q: int, r: int) -> tuple[float, float]:
    x = CENTER_TO_POINT * (SQRT3 * q + SQRT3 / 2.0 * r)
    y = CENTER_TO_POINT * (3.0 / 2.0 * r)
    return x, y


def _cubic_distance(dx: int, dy: int, dz: int) -> int:
    return max(abs(dx), abs(dy), abs(dz))


@dataclass(frozen=True, slots=True, order=True)
class HexCoord:
    """Absolute axial position on the grid."""

    q: int
    r: int

    def __post_init__(self) -> None:
        check_u8("q", self.q)
        check_u8("r", self.r)

    # ------------------------------------------------------------------
    # Representations

    def to_axial_tuple(self) -> tuple[int, int]:
        return self.q, self.r

    def x(self) -> int:
        return self.q

    def y(self) -> int:
        return -self.x() - self.z()

    def z(self) -> int:
        return self.r

    def to_cubic_tuple(self) -> tuple[int, int, int]:
        return self.x(), self.y(), self.z()

    @classmethod
    def from_linear(cls, x: float, y: float) -> "HexCoord":
        """Return the cell whose tile contains the continuous point ``(x, y)``.

        Each of the three floors carries a ``+1`` bias, so a boundary point
        always resolves to the same neighbour and small float error on an
        exact centre cannot move the result to another cell.
        """

        segment = floor(x + SQRT3 * y + 1.0)
        q = floor((floor(2.0 * x + 1.0) + segment) / 3.0)
        r = floor((segment + floor(-x + SQRT3 * y + 1.0)) / 3.0)
        return cls(wrap_u8(q - r), wrap_u8(r))

    def to_linear(self) -> tuple[float, float]:
        """Return the centre point of this cell in unit space."""

        return _axial_to_linear(self.q, self.r)

    # ------------------------------------------------------------------
    # Relations

    def relative_position(
        self, other: "HexCoord", map_context: "HexMapContext | None" = None
    ) -> "RelativeHexCoord":
        """Offset that moves ``self`` onto ``other``."""

        return other - self

    def distance_to(self, other: "HexCoord", map_context: "HexMapContext | None" = None) -> int:
        return _cubic_distance(*(self - other).to_cubic_tuple())

    def offset_by(
        self, offset: "RelativeHexCoord", map_context: "HexMapContext"
    ) -> "HexCoord | None":
        """Apply ``offset`` and bring the result back onto the map.

        The r-axis never wraps: leaving ``[0, height]`` yields ``None``.  The
        q-axis is taken modulo ``width + 1`` on wrapping maps and rejected
        when out of range otherwise.
        """

        span = map_context.width + 1
        q = self.q + offset.q
        r = self.r + offset.r
        if r < 0 or r > map_context.height:
            return None
        if map_context.wrap_x:
            q %= span
        elif q < 0 or q > map_context.width:
            return None
        return HexCoord(q, r)

    # ------------------------------------------------------------------
    # Validity

    def is_technically_valid(self, map_context: "HexMapContext") -> bool:
        """True when the address is usable, possibly after wrapping q."""

        if self.r > map_context.height:
            return False
        return self.q <= map_context.width or map_context.wrap_x

    def is_fully_valid(self, map_context: "HexMapContext") -> bool:
        """True when the address needs no repair at all."""

        return self.q <= map_context.width and self.r <= map_context.height

    def revalidate(self, map_context: "HexMapContext") -> "HexCoord | None":
        """Repair a technically valid coordinate into a fully valid one."""

        if self.is_fully_valid(map_context):
            return self
        if map_context.wrap_x and self.is_technically_valid(map_context):
            return HexCoord(self.q % (map_context.width + 1), self.r)
        return None

    def idx(self, map_context: "HexMapContext") -> int | None:
        """Dense storage index for this coordinate, or ``None``."""

        valid = self.revalidate(map_context)
        if valid is None:
            return None
        return valid.q + valid.r * map_context.width

    # ------------------------------------------------------------------
    # Neighbourhoods

    def iter_neighbors_full(
        self, size: int, map_context: "HexMapContext | None" = None
    ) -> "HexDisk":
        from .rings import HexDisk

        return HexDisk(self, size)

    def iter_neighbors_ring(
        self, size: int, map_context: "HexMapContext | None" = None
    ) -> "HexRing":
        from .rings import HexRing

        return HexRing(self, size)

    # ------------------------------------------------------------------
    # Arithmetic

    def __add__(self, other: object) -> "HexCoord":
        if isinstance(other, RelativeHexCoord):
            return HexCoord(wrap_u8(self.q + other.q), wrap_u8(self.r + other.r))
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, RelativeHexCoord):
            return HexCoord(wrap_u8(self.q - other.q), wrap_u8(self.r - other.r))
        if isinstance(other, HexCoord):
            return RelativeHexCoord(wrap_i8(self.q - other.q), wrap_i8(self.r - other.r))
        return NotImplemented


@dataclass(frozen=True, slots=True, order=True)
class RelativeHexCoord:
    """Signed axial displacement: a direction, offset or rotation result."""

    q: int
    r: int

    DIRECTIONS: ClassVar[tuple["RelativeHexCoord", ...]]

    def __post_init__(self) -> None:
        check_i8("q", self.q)
        check_i8("r", self.r)

    def to_axial_tuple(self) -> tuple[int, int]:
        return self.q, self.r

    def x(self) -> int:
        return self.q

    def y(self) -> int:
        return wrap_i8(-self.q - self.r)

    def z(self) -> int:
        return self.r

    def to_cubic_tuple(self) -> tuple[int, int, int]:
        return self.x(), self.y(), self.z()

    def to_linear(self) -> tuple[float, float]:
        return _axial_to_linear(self.q, self.r)

    def distance_to(self, other: "RelativeHexCoord") -> int:
        return _cubic_distance(*(self - other).to_cubic_tuple())

    def scale(self, factor: int) -> "RelativeHexCoord":
        return RelativeHexCoord(wrap_i8(self.q * factor), wrap_i8(self.r * factor))

    def rotate_clockwise(self) -> "RelativeHexCoord":
        """Rotate 60 degrees clockwise: ``(x, y, z) -> (-z, -x, -y)``."""

        _x, y, z = (-self).to_cubic_tuple()
        return RelativeHexCoord(z, y)

    def rotate_counter_clockwise(self) -> "RelativeHexCoord":
        """Rotate 60 degrees counter-clockwise: ``(x, y, z) -> (-y, -z, -x)``."""

        x, y, _z = (-self).to_cubic_tuple()
        return RelativeHexCoord(y, x)

    cw = rotate_clockwise
    ccw = rotate_counter_clockwise

    @staticmethod
    def iter_neighbors_ring(distance: int) -> "RelativeHexRing":
        from .rings import RelativeHexRing

        return RelativeHexRing(distance)

    @staticmethod
    def iter_neighbors(distance: int) -> "RelativeHexDisk":
        from .rings import RelativeHexDisk

        return RelativeHexDisk(distance)

    def __neg__(self) -> "RelativeHexCoord":
        return RelativeHexCoord(wrap_i8(-self.q), wrap_i8(-self.r))

    def __add__(self, other: object):
        if isinstance(other, RelativeHexCoord):
            return RelativeHexCoord(wrap_i8(self.q + other.q), wrap_i8(self.r + other.r))
        if isinstance(other, HexCoord):
            return HexCoord(wrap_u8(self.q + other.q), wrap_u8(self.r + other.r))
        return NotImplemented

    def __sub__(self, other: object):
        if isinstance(other, RelativeHexCoord):
            return RelativeHexCoord(wrap_i8(self.q - other.q), wrap_i8(self.r - other.r))
        if isinstance(other, HexCoord):
            return HexCoord(wrap_u8(self.q - other.q), wrap_u8(self.r - other.r))
        return NotImplemented


# Ring-walk order: start east and turn clockwise.
RelativeHexCoord.DIRECTIONS = (
    RelativeHexCoord(1, 0),
    RelativeHexCoord(0, 1),
    RelativeHexCoord(-1, 1),
    RelativeHexCoord(-1, 0),
    RelativeHexCoord(0, -1),
    RelativeHexCoord(1, -1),
)


__all__ = ["CENTER_TO_POINT", "SQRT3", "HexCoord", "RelativeHexCoord"]
