"""Topology-agnostic coordinate capability.

Map-level code (tile storage, game rules) talks to coordinates only through
:class:`Coord`, so a different topology can be dropped in without touching
it.  :class:`~hexworld.coord.hex.HexCoord` is the hex implementation.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, TypeVar, runtime_checkable

C = TypeVar("C", bound="Coord")


@runtime_checkable
class Coord(Protocol):
    """Operations every grid coordinate type provides.

    ``map_context`` is whatever parameter object the topology uses to
    describe its bounds; operations that can fail return ``None``.
    """

    @classmethod
    def from_linear(cls: type[C], x: float, y: float) -> C:
        ...

    def to_linear(self) -> tuple[float, float]:
        ...

    def relative_position(self, other: Any, map_context: Any = None) -> Any:
        ...

    def distance_to(self, other: Any, map_context: Any = None) -> int:
        ...

    def offset_by(self, offset: Any, map_context: Any) -> Any | None:
        ...

    def is_technically_valid(self, map_context: Any) -> bool:
        ...

    def is_fully_valid(self, map_context: Any) -> bool:
        ...

    def revalidate(self, map_context: Any) -> Any | None:
        ...

    def idx(self, map_context: Any) -> int | None:
        ...

    def iter_neighbors_full(self, size: int, map_context: Any = None) -> Iterator[Any]:
        ...

    def iter_neighbors_ring(self, size: int, map_context: Any = None) -> Iterator[Any]:
        ...


__all__ = ["Coord"]
