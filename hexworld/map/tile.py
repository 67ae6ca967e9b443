"""Per-cell occupant sets."""

from __future__ import annotations

from typing import AbstractSet, Hashable, Iterator

Occupant = Hashable


class Tile:
    """Set of occupant identifiers standing on one cell.

    Identifiers are opaque handles owned by the entity system; a tile only
    records references to them.
    """

    __slots__ = ("_occupants",)

    def __init__(self) -> None:
        self._occupants: set[Occupant] = set()

    def add(self, occupant: Occupant) -> bool:
        """Add ``occupant`` and return ``True`` if it was not present yet."""

        if occupant in self._occupants:
            return False
        self._occupants.add(occupant)
        return True

    def remove(self, occupant: Occupant) -> bool:
        """Remove ``occupant`` and return ``True`` if it was present."""

        if occupant not in self._occupants:
            return False
        self._occupants.discard(occupant)
        return True

    def contains(self, occupant: Occupant) -> bool:
        return occupant in self._occupants

    def clear(self) -> None:
        self._occupants.clear()

    @property
    def occupants(self) -> AbstractSet[Occupant]:
        return frozenset(self._occupants)

    def view(self) -> "TileView":
        return TileView(self)

    def __contains__(self, occupant: object) -> bool:
        return occupant in self._occupants

    def __iter__(self) -> Iterator[Occupant]:
        return iter(self._occupants)

    def __len__(self) -> int:
        return len(self._occupants)

    def __repr__(self) -> str:
        return f"Tile(occupants={set(self._occupants)!r})"


class TileView:
    """Read-only access to a :class:`Tile`."""

    __slots__ = ("_tile",)

    def __init__(self, tile: Tile) -> None:
        self._tile = tile

    def contains(self, occupant: Occupant) -> bool:
        return self._tile.contains(occupant)

    @property
    def occupants(self) -> AbstractSet[Occupant]:
        return self._tile.occupants

    def __contains__(self, occupant: object) -> bool:
        return occupant in self._tile

    def __iter__(self) -> Iterator[Occupant]:
        return iter(self._tile.occupants)

    def __len__(self) -> int:
        return len(self._tile)

    def __repr__(self) -> str:
        return f"TileView({self._tile!r})"


__all__ = ["Occupant", "Tile", "TileView"]
