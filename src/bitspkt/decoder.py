"""
Packet decoder (hex transmission -> Packet tree).

Wire layout of a packet, MSB first:

    version        3 bits
    type id        3 bits
    literal (type id 4):
        repeated 5-bit groups, leading bit 1 = more groups follow,
        0 = last group; the low 4 bits are appended to the value
    operator (any other type id):
        length type id 1 bit
        0 -> 15-bit total length in bits of the child packets
        1 -> 11-bit number of child packets

The root packet has no length prefix. Bits left after it are padding
and are ignored.
"""

import logging
from typing import List, Optional

from bitspkt.bitcursor import BitCursor
from bitspkt.config import DecoderConfig, DEFAULT_CONFIG
from bitspkt.errors import (
    FramingMismatchError,
    LiteralOverflowError,
    MalformedInputError,
    TruncatedError,
)
from bitspkt.model import (
    CHILD_COUNT_BITS,
    LENGTH_TYPE_BITS,
    LITERAL_GROUP_BITS,
    LITERAL_LIMIT,
    TOTAL_LENGTH_BITS,
    TYPE_ID_BITS,
    VERSION_BITS,
    LiteralValue,
    Operands,
    Packet,
    TypeTag,
    check_arity,
)
from bitspkt.transcoder import decode_hex

logger = logging.getLogger(__name__)

LENGTH_DELIMITED = 0
COUNT_DELIMITED = 1

_CONTINUATION_FLAG = 1 << (LITERAL_GROUP_BITS - 1)
_GROUP_VALUE_MASK = _CONTINUATION_FLAG - 1


def _decode_literal(cursor: BitCursor) -> LiteralValue:
    """Decode continuation groups into a single unsigned value."""
    value = 0
    while True:
        group = cursor.read_bits(LITERAL_GROUP_BITS)
        value = (value << 4) | (group & _GROUP_VALUE_MASK)
        if value >= LITERAL_LIMIT:
            raise LiteralOverflowError(
                f"Literal exceeds 64 bits at position {cursor.position}"
            )
        if not group & _CONTINUATION_FLAG:
            return LiteralValue(value)


def _decode_length_delimited(cursor: BitCursor, depth: int, config: DecoderConfig) -> List[Packet]:
    """Decode children packed into an exact number of bits."""
    total_bits = cursor.read_bits(TOTAL_LENGTH_BITS)
    group = cursor.take_sub_cursor(total_bits)
    logger.debug(f"Length-delimited group of {total_bits} bits at depth {depth}")

    children: List[Packet] = []
    try:
        while group.has_more():
            children.append(_decode_packet(group, depth + 1, config))
    except TruncatedError as e:
        raise FramingMismatchError(
            f"Child packets overrun their declared length of {total_bits} bits: {e}"
        ) from e
    return children


def _decode_count_delimited(cursor: BitCursor, depth: int, config: DecoderConfig) -> List[Packet]:
    """Decode a fixed number of children straight from the parent cursor."""
    count = cursor.read_bits(CHILD_COUNT_BITS)
    logger.debug(f"Count-delimited group of {count} packets at depth {depth}")
    children: List[Packet] = []
    for _ in range(count):
        children.append(_decode_packet(cursor, depth + 1, config))
    return children


def _decode_operands(cursor: BitCursor, type_tag: TypeTag, depth: int, config: DecoderConfig) -> Operands:
    length_type = cursor.read_bits(LENGTH_TYPE_BITS)
    if length_type == LENGTH_DELIMITED:
        children = _decode_length_delimited(cursor, depth, config)
    else:
        children = _decode_count_delimited(cursor, depth, config)

    check_arity(type_tag, len(children))
    return Operands(tuple(children))


def _decode_packet(cursor: BitCursor, depth: int, config: DecoderConfig) -> Packet:
    if depth > config.max_depth:
        raise MalformedInputError(
            f"Packet nesting exceeds maximum depth {config.max_depth} "
            f"at position {cursor.position}"
        )

    start = cursor.position
    version = cursor.read_bits(VERSION_BITS)
    type_tag = TypeTag.from_type_id(cursor.read_bits(TYPE_ID_BITS))

    if type_tag is TypeTag.LITERAL:
        payload = _decode_literal(cursor)
    else:
        payload = _decode_operands(cursor, type_tag, depth, config)

    packet = Packet(version=version, type_tag=type_tag, payload=payload)
    logger.debug(
        f"Decoded {type_tag.name} packet v{version} at bit {start} "
        f"({cursor.position - start} bits, depth {depth})"
    )
    return packet


def decode_packet(cursor: BitCursor, config: Optional[DecoderConfig] = None) -> Packet:
    """
    Decode one packet (and its subtree) from the cursor.

    The cursor is advanced past the packet; anything after it is left
    unread.

    Args:
        cursor: BitCursor positioned at the start of a packet
        config: Decoder settings (defaults to DEFAULT_CONFIG)

    Returns:
        The decoded Packet

    Raises:
        TruncatedError: If the bits run out mid-packet
        FramingMismatchError: If a length-delimited group is overrun
        LiteralOverflowError: If a literal exceeds 64 bits
        UnknownTypeIdError: If a type id is undefined
        ArityError: If a comparison does not have two operands
        MalformedInputError: If nesting exceeds config.max_depth or the
            interpreter stack
    """
    config = config or DEFAULT_CONFIG
    try:
        return _decode_packet(cursor, 0, config)
    except RecursionError:
        raise MalformedInputError(
            f"Packet nesting exceeds the interpreter stack "
            f"(max_depth={config.max_depth} is too large for this input)"
        ) from None


def decode_transmission(text: str, config: Optional[DecoderConfig] = None) -> Packet:
    """
    Decode a hexadecimal transmission into its root packet.

    Args:
        text: Hex digits only, case-insensitive, no whitespace
        config: Decoder settings (defaults to DEFAULT_CONFIG)

    Returns:
        Root Packet. Trailing padding bits are ignored.

    Raises:
        InvalidDigitError: If text contains a non-hex character
        DecodeError: Any of the failures listed on decode_packet()
    """
    cursor = BitCursor(decode_hex(text))
    packet = decode_packet(cursor, config)
    logger.debug(f"Transmission decoded: {cursor.position} bits used, {cursor.remaining} padding")
    return packet


def decode_transmission_file(filepath: str, config: Optional[DecoderConfig] = None) -> Packet:
    """
    Decode the transmission on the first line of a text file.

    Surrounding whitespace (including the newline) is stripped before
    decoding.

    Raises:
        FileNotFoundError: If the file doesn't exist
        DecodeError: If the transmission is malformed
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            line = f.readline()
    except FileNotFoundError:
        raise FileNotFoundError(f"Transmission file not found: {filepath}")

    return decode_transmission(line.strip(), config)


__all__ = [
    "decode_packet",
    "decode_transmission",
    "decode_transmission_file",
    "LENGTH_DELIMITED",
    "COUNT_DELIMITED",
]
