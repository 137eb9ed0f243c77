"""
Core Packet Model

Defines the data structures produced by the decoder and consumed by the
evaluator:
    - TypeTag (the closed set of eight packet kinds)
    - LiteralValue (payload of a literal packet)
    - Operands (payload of an operator packet)
    - Packet (one node of the tree)

ARCHITECTURAL RULE:
    These objects:
        - Are immutable once built
        - Know nothing about bits, cursors or hex text
        - Represent structure, not behavior
    Evaluation belongs in bitspkt.evaluator, decoding in bitspkt.decoder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from bitspkt.errors import ArityError, UnknownTypeIdError


# Wire layout field widths, in bits
VERSION_BITS = 3
TYPE_ID_BITS = 3
LITERAL_GROUP_BITS = 5
LENGTH_TYPE_BITS = 1
TOTAL_LENGTH_BITS = 15
CHILD_COUNT_BITS = 11

LITERAL_LIMIT = 1 << 64
U64_MAX = LITERAL_LIMIT - 1
MAX_VERSION = (1 << VERSION_BITS) - 1


class TypeTag(Enum):
    """
    Packet kinds. Each value is the 3-bit type id used on the wire.

    Every one of the eight ids is defined, so an unknown id can only
    come from outside the 3-bit field.
    """

    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    LITERAL = 4
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7

    @classmethod
    def from_type_id(cls, type_id: int) -> "TypeTag":
        """
        Resolve a wire type id.

        Raises:
            UnknownTypeIdError: If the id is not one of the eight defined kinds
        """
        try:
            return cls(type_id)
        except ValueError:
            raise UnknownTypeIdError(type_id) from None

    @property
    def is_literal(self) -> bool:
        return self is TypeTag.LITERAL

    @property
    def is_comparison(self) -> bool:
        return self in _COMPARISONS


_COMPARISONS = frozenset({TypeTag.GREATER_THAN, TypeTag.LESS_THAN, TypeTag.EQUAL_TO})


def check_arity(type_tag: TypeTag, count: int) -> None:
    """
    Enforce operand counts.

    Comparisons take exactly two operands. The other operators accept
    any count, including zero; whether zero operands can be evaluated
    is decided by the evaluator.

    Raises:
        ArityError: If a comparison has other than two operands
    """
    if type_tag.is_comparison and count != 2:
        raise ArityError(type_tag, count)


@dataclass(frozen=True)
class LiteralValue:
    """
    Payload of a literal packet.

    Properties:
        value: Unsigned integer, 0 <= value < 2**64
    """

    value: int

    def __post_init__(self):
        if not 0 <= self.value <= U64_MAX:
            raise ValueError(f"Literal value out of unsigned 64-bit range: {self.value}")


@dataclass(frozen=True)
class Operands:
    """
    Payload of an operator packet.

    Properties:
        packets: Child packets in wire order

    IMPORTANT:
        Order matters. Comparisons read packets[0] as the left-hand
        side and packets[1] as the right-hand side.
    """

    packets: Tuple["Packet", ...] = ()

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "packets", tuple(self.packets))

    def __len__(self) -> int:
        return len(self.packets)


Payload = Union[LiteralValue, Operands]


@dataclass(frozen=True)
class Packet:
    """
    One decoded node of a transmission.

    Example:
        "D2FE28" decodes to

        Packet(version=6, type_tag=TypeTag.LITERAL, payload=LiteralValue(2021))

    Properties:
        version:
            3-bit version field (0-7). Carries no semantics of its own;
            it only feeds the version-sum diagnostic.

        type_tag:
            TypeTag of the packet

        payload:
            LiteralValue for TypeTag.LITERAL, Operands for every operator

    INVARIANTS:
        - type_tag is LITERAL iff payload is a LiteralValue
        - comparison tags have exactly two operands
        - the tree is strictly hierarchical (no sharing, no cycles)
    """

    version: int
    type_tag: TypeTag
    payload: Payload

    def __post_init__(self):
        if not 0 <= self.version <= MAX_VERSION:
            raise ValueError(f"Packet version must be 0..{MAX_VERSION}, got {self.version}")
        if self.type_tag.is_literal != isinstance(self.payload, LiteralValue):
            raise TypeError(
                f"{self.type_tag.name} packet cannot carry {type(self.payload).__name__} payload"
            )
        if isinstance(self.payload, Operands):
            check_arity(self.type_tag, len(self.payload))

    @classmethod
    def literal(cls, value: int, version: int = 0) -> "Packet":
        """Build a literal packet."""
        return cls(version=version, type_tag=TypeTag.LITERAL, payload=LiteralValue(value))

    @classmethod
    def operator(cls, type_tag: TypeTag, operands, version: int = 0) -> "Packet":
        """Build an operator packet from an iterable of child packets."""
        return cls(version=version, type_tag=type_tag, payload=Operands(tuple(operands)))

    @property
    def is_literal(self) -> bool:
        return self.type_tag.is_literal

    @property
    def value(self) -> int:
        """
        Literal value of this packet.

        Raises:
            TypeError: If this is an operator packet
        """
        if not isinstance(self.payload, LiteralValue):
            raise TypeError(f"{self.type_tag.name} packet has no literal value")
        return self.payload.value

    @property
    def children(self) -> Tuple["Packet", ...]:
        """Child packets; empty for a literal."""
        if isinstance(self.payload, Operands):
            return self.payload.packets
        return ()


__all__ = [
    "TypeTag",
    "LiteralValue",
    "Operands",
    "Payload",
    "Packet",
    "check_arity",
    "VERSION_BITS",
    "TYPE_ID_BITS",
    "LITERAL_GROUP_BITS",
    "LENGTH_TYPE_BITS",
    "TOTAL_LENGTH_BITS",
    "CHILD_COUNT_BITS",
    "LITERAL_LIMIT",
    "U64_MAX",
    "MAX_VERSION",
]
