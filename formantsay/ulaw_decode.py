"""Decoding of 8-bit mu-law codes to 16-bit linear PCM samples."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["ulaw_to_linear", "decode"]

# Sample magnitudes of the eight mu-law segments, quietest level first.
# Each line holds one segment of sixteen quantisation levels.
_MAGNITUDES: tuple[int, ...] = (
    0, 8, 16, 24, 32, 40, 48, 56, 64, 72, 80, 88, 96, 104, 112, 120,
    132, 148, 164, 180, 196, 212, 228, 245, 261, 277, 293, 309, 325, 341, 357, 373,
    397, 429, 461, 494, 526, 558, 590, 622, 654, 686, 718, 751, 783, 815, 847, 879,
    927, 992, 1056, 1120, 1184, 1249, 1313, 1377,
    1441, 1506, 1570, 1634, 1698, 1763, 1827, 1891,
    1988, 2116, 2245, 2373, 2502, 2630, 2759, 2887,
    3016, 3144, 3273, 3402, 3530, 3659, 3787, 3916,
    4108, 4365, 4623, 4880, 5137, 5394, 5651, 5908,
    6165, 6422, 6679, 6936, 7193, 7450, 7707, 7964,
    8350, 8864, 9378, 9892, 10406, 10920, 11435, 11949,
    12463, 12977, 13491, 14005, 14519, 15033, 15548, 16062,
    16833, 17861, 18889, 19918, 20946, 21974, 23002, 24031,
    25059, 26087, 27115, 28143, 29172, 30200, 31228, 32256,
)


def _build_table() -> tuple[int, ...]:
    # Codes 0x00..0x7F are the negative half, loudest first; codes
    # 0x80..0xFF mirror them with positive sign.
    loudest_first = tuple(reversed(_MAGNITUDES))
    return tuple(-m for m in loudest_first) + loudest_first


_TABLE: tuple[int, ...] = _build_table()


def ulaw_to_linear(code: int) -> int:
    """Return the 16-bit linear sample for a mu-law code.

    Only the low eight bits of ``code`` are used, as with a byte cast.
    """
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"mu-law code must be an int, not {type(code).__name__}")
    return _TABLE[code & 0xFF]


def decode(data: bytes | bytearray | memoryview | Iterable[int]) -> list[int]:
    """Decode a sequence of mu-law codes into a list of linear samples."""
    if isinstance(data, str):
        raise TypeError("mu-law data must be bytes or integers, not str")
    if isinstance(data, memoryview):
        data = data.tobytes()
    return [ulaw_to_linear(code) for code in data]