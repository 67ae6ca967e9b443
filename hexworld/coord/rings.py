"""Lazy ring and disk traversals around a hex.

A ring of radius ``d`` is walked side by side: each side starts at the
corner ``side * d`` and steps ``d`` times along the direction pointing at
the next corner, after which ``side`` turns 60 degrees clockwise.  Six
sides give exactly ``6 * d`` cells; radius zero yields only the origin.

A disk concatenates the rings ``0, 1, ..., d`` and therefore yields
``3 * (d * d + d) + 1`` cells.

The iterators carry no bounds checks; pair the absolute ones with
:meth:`HexCoord.revalidate` or :meth:`HexCoord.offset_by` as needed.
"""

from __future__ import annotations

from typing import Iterator

from ..errors import InvalidDistanceError
from .hex import HexCoord, RelativeHexCoord
from .integers import I8_MAX

MAX_DISTANCE = I8_MAX

_ORIGIN = RelativeHexCoord(0, 0)
_SIDES = 6


def ring_size(distance: int) -> int:
    return _SIDES * distance if distance > 0 else 1


def disk_size(distance: int) -> int:
    return 3 * (distance * distance + distance) + 1


def _check_distance(distance: int) -> int:
    if not 0 <= distance <= MAX_DISTANCE:
        raise InvalidDistanceError(distance, MAX_DISTANCE)
    return distance


class RelativeHexRing(Iterator[RelativeHexCoord]):
    """Every offset at exactly ``distance`` steps from the origin."""

    __slots__ = ("distance", "_side", "_side_count", "_offset", "_emitted")

    def __init__(self, distance: int) -> None:
        self.distance = _check_distance(distance)
        self._side = RelativeHexCoord.DIRECTIONS[0]
        self._offset = 0
        self._emitted = 0
        # The origin is a single-cell ring: start on the last side.
        self._side_count = 0 if distance > 0 else _SIDES - 1

    def has_next(self) -> bool:
        return self._side_count < _SIDES

    def __iter__(self) -> "RelativeHexRing":
        return self

    def __next__(self) -> RelativeHexCoord:
        if not self.has_next():
            raise StopIteration
        if self.distance == 0:
            self._side_count = _SIDES
            self._emitted += 1
            return _ORIGIN

        corner = self._side.scale(self.distance)
        step = (-self._side).rotate_counter_clockwise().scale(self._offset)
        self._offset += 1
        if self._offset >= self.distance:
            self._offset = 0
            self._side = self._side.rotate_clockwise()
            self._side_count += 1
        self._emitted += 1
        return corner + step

    def __length_hint__(self) -> int:
        return ring_size(self.distance) - self._emitted


class RelativeHexDisk(Iterator[RelativeHexCoord]):
    """Every offset within ``distance`` steps, nearest rings first."""

    __slots__ = ("distance", "_ring")

    def __init__(self, distance: int) -> None:
        self.distance = _check_distance(distance)
        self._ring = RelativeHexRing(0)

    def has_next(self) -> bool:
        return self._ring.has_next() or self._ring.distance < self.distance

    def __iter__(self) -> "RelativeHexDisk":
        return self

    def __next__(self) -> RelativeHexCoord:
        if not self._ring.has_next():
            if self._ring.distance >= self.distance:
                raise StopIteration
            self._ring = RelativeHexRing(self._ring.distance + 1)
        return next(self._ring)

    def __length_hint__(self) -> int:
        remaining = self._ring.__length_hint__()
        if self._ring.distance < self.distance:
            remaining += disk_size(self.distance) - disk_size(self._ring.distance)
        return remaining


class HexRing(Iterator[HexCoord]):
    """Ring of absolute cells around ``center``, unfiltered."""

    __slots__ = ("center", "_offsets")

    def __init__(self, center: HexCoord, distance: int) -> None:
        self.center = center
        self._offsets = RelativeHexRing(distance)

    @property
    def distance(self) -> int:
        return self._offsets.distance

    def has_next(self) -> bool:
        return self._offsets.has_next()

    def __iter__(self) -> "HexRing":
        return self

    def __next__(self) -> HexCoord:
        return self.center + next(self._offsets)

    def __length_hint__(self) -> int:
        return self._offsets.__length_hint__()


class HexDisk(Iterator[HexCoord]):
    """Filled disk of absolute cells around ``center``, unfiltered."""

    __slots__ = ("center", "_offsets")

    def __init__(self, center: HexCoord, distance: int) -> None:
        self.center = center
        self._offsets = RelativeHexDisk(distance)

    @property
    def distance(self) -> int:
        return self._offsets.distance

    def has_next(self) -> bool:
        return self._offsets.has_next()

    def __iter__(self) -> "HexDisk":
        return self

    def __next__(self) -> HexCoord:
        return self.center + next(self._offsets)

    def __length_hint__(self) -> int:
        return self._offsets.__length_hint__()


__all__ = [
    "MAX_DISTANCE",
    "HexDisk",
    "HexRing",
    "RelativeHexDisk",
    "RelativeHexRing",
    "disk_size",
    "ring_size",
]
