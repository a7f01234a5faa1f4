"""Encoding of 16-bit linear PCM samples to 8-bit mu-law codes.

Samples are reduced to 13 bits (an arithmetic shift right by three) and
each 13-bit bin is mapped to the mu-law code whose segment and step hold
the bin's representative value. The decision levels follow the same
curve as the decoding table, so codes decode back to the nearest level.
"""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["linear_to_ulaw", "encode"]

# Scale between the 14-bit biased mu-law domain and 16-bit output.
_SCALE_NUM = 8031
_SCALE_DEN = 32256
_BIAS = 33
_BINS = 1 << 13
_HALF_BINS = _BINS // 2


def _magnitude_code(magnitude: int) -> int:
    """Return the 7-bit segment/step code for a non-negative magnitude."""
    biased = magnitude * _SCALE_NUM + _BIAS * _SCALE_DEN
    for segment in range(8):
        if biased < (64 << segment) * _SCALE_DEN:
            step = biased // (_SCALE_DEN << (segment + 1)) - 16
            return (segment << 4) | step
    return 0x7F


def _code_for_bin(index: int) -> int:
    """Return the mu-law code for the 13-bit bin ``index`` (-4096..4095)."""
    value = index * 8 + 3
    if value < 0:
        return _magnitude_code(-value) ^ 0x7F
    return _magnitude_code(value) ^ 0xFF


_TABLE: bytes = bytes(_code_for_bin(i - _HALF_BINS) for i in range(_BINS))


def _as_short(sample: int | float) -> int:
    if isinstance(sample, bool) or not isinstance(sample, (int, float)):
        raise TypeError(
            f"sample must be an int or float, not {type(sample).__name__}"
        )
    value = int(sample)
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def linear_to_ulaw(sample: int | float) -> int:
    """Return the mu-law code for a 16-bit linear sample.

    The sample is first narrowed to a signed 16-bit value, as with a cast
    to ``short``; floats are truncated toward zero.
    """
    return _TABLE[(_as_short(sample) >> 3) + _HALF_BINS]


def encode(samples: Iterable[int | float]) -> bytes:
    """Encode a sequence of linear samples into mu-law bytes."""
    if isinstance(samples, (str, bytes, bytearray, memoryview)):
        raise TypeError("samples must be an iterable of numbers")
    return bytes(linear_to_ulaw(sample) for sample in samples)