"""
Shared fixtures for building transmissions bit by bit.

Tests describe malformed or edge-case packets as '0'/'1' strings and
convert them to hex here, so every case states its wire layout exactly.
"""

import pytest


def _bits_to_hex(bits: str) -> str:
    """Pad a '0'/'1' string with zeros to a whole hex digit and convert it."""
    bits = bits + "0" * (-len(bits) % 4)
    return "".join(format(int(bits[i:i + 4], 2), "X") for i in range(0, len(bits), 4))


def _encode_literal_bits(value: int, version: int = 0) -> str:
    """Encode a literal packet (header plus 5-bit groups) as a bit string."""
    nibbles = []
    while True:
        nibbles.append(value & 0xF)
        value >>= 4
        if value == 0:
            break
    nibbles.reverse()

    groups = []
    for i, nibble in enumerate(nibbles):
        flag = "1" if i < len(nibbles) - 1 else "0"
        groups.append(flag + format(nibble, "04b"))
    return format(version, "03b") + "100" + "".join(groups)


def _operator_header_bits(type_id: int, version: int = 0) -> str:
    return format(version, "03b") + format(type_id, "03b")


@pytest.fixture
def bits_to_hex():
    return _bits_to_hex


@pytest.fixture
def encode_literal_bits():
    return _encode_literal_bits


@pytest.fixture
def count_delimited_bits():
    """Build an operator packet whose children are counted."""
    def build(type_id, children, version=0):
        return (
            _operator_header_bits(type_id, version)
            + "1"
            + format(len(children), "011b")
            + "".join(children)
        )
    return build


@pytest.fixture
def length_delimited_bits():
    """Build an operator packet whose children are framed by a bit length."""
    def build(type_id, children, version=0, declared_length=None):
        body = "".join(children)
        length = len(body) if declared_length is None else declared_length
        return (
            _operator_header_bits(type_id, version)
            + "0"
            + format(length, "015b")
            + body
        )
    return build
