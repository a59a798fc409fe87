"""Deterministic integer hashing used as the generator's random source.

The arithmetic follows signed 32-bit integer semantics: intermediate values
wrap around, and remainders take the sign of the dividend.
"""

from __future__ import annotations

__all__ = ["random_hash", "hash_in_range"]

_INT_BITS = 32
_INT_SPAN = 1 << _INT_BITS
_INT_HALF = 1 << (_INT_BITS - 1)


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer with wrap-around."""
    return (value + _INT_HALF) % _INT_SPAN - _INT_HALF


def _abs32(value: int) -> int:
    """Absolute value in 32-bit arithmetic (the most negative value stays negative)."""
    return value if value >= 0 else _wrap32(-value)


def _trunc_mod(dividend: int, divisor: int) -> int:
    """Remainder of a division that truncates toward zero."""
    remainder = abs(dividend) % divisor
    return -remainder if dividend < 0 else remainder


def random_hash(value: int) -> int:
    """Hash ``value`` to an integer, normally in the range 0..255."""
    mixed = _wrap32(100 * value * value + 24 * value + 47)
    return _trunc_mod(_trunc_mod(_abs32(mixed), 257), 256)


def hash_in_range(maximum: int, value: int) -> int:
    """Hash ``value`` to an integer in the range ``0 <= result < maximum``."""
    if maximum <= 0:
        raise ValueError(f"maximum must be positive, got {maximum}")
    out = random_hash(value)
    value = _wrap32(value + 1)
    while out < maximum:
        out = _wrap32(
            out + random_hash(value + 2) * random_hash(value) * random_hash(value + 1)
        )
        value = _wrap32(value + 3)
    return _trunc_mod(_abs32(out), maximum)