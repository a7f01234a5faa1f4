"""A mu-law codec object built on the encoding and decoding tables."""

from __future__ import annotations

from collections.abc import Iterable

from formantsay.ulaw_decode import decode as _decode
from formantsay.ulaw_encode import encode as _encode

__all__ = ["UlawCodec"]


class UlawCodec:
    """Converts between 16-bit linear PCM samples and 8-bit mu-law codes."""

    __slots__ = ()

    def encode(self, samples: Iterable[int | float]) -> bytes:
        """Encode linear samples into mu-law bytes.

        Each sample is narrowed to a signed 16-bit value before encoding.
        """
        return _encode(samples)

    def decode(self, data: bytes | bytearray | memoryview | Iterable[int]) -> list[int]:
        """Decode mu-law codes into a list of linear samples."""
        return _decode(data)

    def quantize(self, samples: Iterable[int | float]) -> list[int]:
        """Return the samples as they come back after a mu-law round trip."""
        return _decode(_encode(samples))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"