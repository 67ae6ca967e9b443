"""Dense tile storage addressed through a coordinate's index."""

from __future__ import annotations

import logging
from typing import Iterator, Protocol, TypeVar

from ..coord.base import Coord
from ..coord.hex import HexCoord
from .context import HexMapContext
from .tile import Tile, TileView

logger = logging.getLogger(__name__)

CoordT = TypeVar("CoordT", bound=Coord, contravariant=True)


class TileMap(Protocol[CoordT]):
    """Tile lookup that only relies on the :class:`Coord` capability."""

    @property
    def context(self) -> object:
        ...

    def get_tile(self, coord: CoordT) -> TileView | None:
        ...

    def get_tile_mut(self, coord: CoordT) -> Tile | None:
        ...


class HexMap:
    """Flat array of ``width * height`` tiles for a hex grid.

    The context is fixed for the lifetime of the map; resizing means
    building a new one.
    """

    def __init__(self, width: int, height: int, wrap_x: bool) -> None:
        self._context = HexMapContext(width=width, height=height, wrap_x=wrap_x)
        self._tiles: list[Tile] = [Tile() for _ in range(self._context.storage_size)]
        logger.debug(
            "Built hex map %sx%s (wrap_x=%s) with %d tiles",
            width,
            height,
            wrap_x,
            len(self._tiles),
        )

    @classmethod
    def from_context(cls, context: HexMapContext) -> "HexMap":
        return cls(context.width, context.height, context.wrap_x)

    @property
    def context(self) -> HexMapContext:
        return self._context

    def _index(self, coord: HexCoord) -> int | None:
        index = coord.idx(self._context)
        # The last q of each row can index past the end of storage.
        if index is None or index >= len(self._tiles):
            return None
        return index

    def get_tile(self, coord: HexCoord) -> TileView | None:
        index = self._index(coord)
        if index is None:
            return None
        return self._tiles[index].view()

    def get_tile_mut(self, coord: HexCoord) -> Tile | None:
        index = self._index(coord)
        if index is None:
            return None
        return self._tiles[index]

    def iter_tiles(self) -> Iterator[tuple[int, Tile]]:
        return iter(enumerate(self._tiles))

    def __len__(self) -> int:
        return len(self._tiles)


__all__ = ["HexMap", "TileMap"]
