"""Hexadecimal transmission text to bits."""

from typing import List

from bitspkt.errors import InvalidDigitError


_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_hex(text: str) -> List[bool]:
    """
    Expand hex text into bits, four per character, MSB first.

    Whitespace is not trimmed; the caller is expected to pass a clean
    transmission.

    Raises:
        InvalidDigitError: On the first character outside 0-9a-fA-F
    """
    bits: List[bool] = []
    for position, char in enumerate(text):
        if char not in _HEX_DIGITS:
            raise InvalidDigitError(char, position)
        nibble = int(char, 16)
        bits.extend(bool((nibble >> shift) & 1) for shift in (3, 2, 1, 0))
    return bits


__all__ = ["decode_hex"]
