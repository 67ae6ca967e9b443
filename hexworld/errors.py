"""Exceptions raised by :mod:`hexworld` for programmer errors."""

from __future__ import annotations


class HexWorldError(Exception):
    """Base class for all hexworld errors."""


class InvalidDistanceError(HexWorldError, ValueError):
    """Raised when a ring or disk is requested with an unsupported radius."""

    def __init__(self, distance: int, maximum: int) -> None:
        self.distance = distance
        self.maximum = maximum
        super().__init__(f"distance must be within 0..{maximum}, got {distance}")


__all__ = ["HexWorldError", "InvalidDistanceError"]
