"""
Forward-only bit cursor.

Bits are held in a contiguous tuple and consumed by advancing an index.
The position never moves backwards and there is no peeking: the decoder
only needs fixed-width reads and the ability to carve an exact-length
group off the front of the stream.
"""

from typing import Iterable

from bitspkt.errors import TruncatedError


MAX_READ_BITS = 64


class BitCursor:
    """
    Reads unsigned integers MSB-first from a finite sequence of bits.

    A cursor produced by take_sub_cursor() owns a copy of the bits it
    was given, so parent and child advance independently afterwards.
    """

    __slots__ = ("_bits", "_position")

    def __init__(self, bits: Iterable[bool]):
        self._bits = tuple(bool(b) for b in bits)
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bits consumed so far."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of unread bits."""
        return len(self._bits) - self._position

    def __len__(self) -> int:
        return len(self._bits)

    def __str__(self) -> str:
        return "".join("1" if b else "0" for b in self._bits[self._position:])

    def __repr__(self) -> str:
        return f"BitCursor(position={self._position}, length={len(self._bits)})"

    def has_more(self) -> bool:
        return self._position < len(self._bits)

    def read_bits(self, n: int) -> int:
        """
        Consume the next n bits and return them as an unsigned integer.

        Args:
            n: Width of the read, 1 to 64

        Returns:
            Integer value, most significant bit first

        Raises:
            ValueError: If n is outside 1..64
            TruncatedError: If fewer than n bits remain
        """
        if not 1 <= n <= MAX_READ_BITS:
            raise ValueError(f"read width must be 1..{MAX_READ_BITS}, got {n}")
        self._require(n)

        value = 0
        for bit in self._bits[self._position:self._position + n]:
            value = (value << 1) | bit
        self._position += n
        return value

    def take_sub_cursor(self, length: int) -> "BitCursor":
        """
        Consume exactly `length` bits and return them as a new cursor.

        Raises:
            TruncatedError: If fewer than `length` bits remain
        """
        if length < 0:
            raise ValueError(f"sub-cursor length must be non-negative, got {length}")
        self._require(length)

        sub = BitCursor(self._bits[self._position:self._position + length])
        self._position += length
        return sub

    def _require(self, n: int) -> None:
        if n > self.remaining:
            raise TruncatedError(
                f"Need {n} bit(s) at position {self._position}, "
                f"only {self.remaining} remain"
            )


__all__ = ["BitCursor", "MAX_READ_BITS"]
