"""Bounds of a hex map."""

from __future__ import annotations

from dataclasses import dataclass

from ..coord.integers import check_u8


@dataclass(frozen=True, slots=True)
class HexMapContext:
    """Bounds shared by every coordinate check and index on one map.

    ``width`` and ``height`` are the largest valid q and r (inclusive).
    With ``wrap_x`` the q-axis is cylindrical, taken modulo ``width + 1``.
    """

    width: int
    height: int
    wrap_x: bool

    def __post_init__(self) -> None:
        check_u8("width", self.width)
        check_u8("height", self.height)

    @property
    def storage_size(self) -> int:
        return self.width * self.height


__all__ = ["HexMapContext"]
