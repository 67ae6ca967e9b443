"""Fixed-width integer helpers for coordinate components."""

from __future__ import annotations

U8_MAX = 255
I8_MIN = -128
I8_MAX = 127


def wrap_u8(value: int) -> int:
    """Wrap ``value`` into ``0..255``."""

    return value & 0xFF


def wrap_i8(value: int) -> int:
    """Wrap ``value`` into ``-128..127`` with two's-complement semantics."""

    return ((value + 128) & 0xFF) - 128


def _check_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def check_u8(name: str, value: int) -> None:
    _check_int(name, value)
    if not 0 <= value <= U8_MAX:
        raise ValueError(f"{name} must be within 0..{U8_MAX}, got {value}")


def check_i8(name: str, value: int) -> None:
    _check_int(name, value)
    if not I8_MIN <= value <= I8_MAX:
        raise ValueError(f"{name} must be within {I8_MIN}..{I8_MAX}, got {value}")


__all__ = ["I8_MAX", "I8_MIN", "U8_MAX", "check_i8", "check_u8", "wrap_i8", "wrap_u8"]
