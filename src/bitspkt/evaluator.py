"""
Packet tree evaluation.

Two independent folds over an immutable Packet tree:
    - evaluate_packet: the numeric value of the expression
    - sum_versions: the sum of every version field in the tree

All arithmetic is checked against the unsigned 64-bit range. Python
integers never wrap, so the checks are explicit: any intermediate sum
or product above U64_MAX raises ArithmeticOverflowError.
"""

import logging
from typing import Callable, Dict, List

from bitspkt.errors import ArithmeticOverflowError, EmptyOperatorError
from bitspkt.model import Packet, TypeTag, U64_MAX

logger = logging.getLogger(__name__)


def _checked(value: int, what: str) -> int:
    if value > U64_MAX:
        raise ArithmeticOverflowError(f"{what} overflows unsigned 64-bit range")
    return value


def _sum(values: List[int]) -> int:
    total = 0
    for v in values:
        total = _checked(total + v, "Sum")
    return total


def _product(values: List[int]) -> int:
    total = 1
    for v in values:
        total = _checked(total * v, "Product")
    return total


def _minimum(values: List[int]) -> int:
    if not values:
        raise EmptyOperatorError("MINIMUM packet has no operands")
    return min(values)


def _maximum(values: List[int]) -> int:
    if not values:
        raise EmptyOperatorError("MAXIMUM packet has no operands")
    return max(values)


# Comparisons always have exactly two operands (enforced by the model)
_REDUCERS: Dict[TypeTag, Callable[[List[int]], int]] = {
    TypeTag.SUM: _sum,
    TypeTag.PRODUCT: _product,
    TypeTag.MINIMUM: _minimum,
    TypeTag.MAXIMUM: _maximum,
    TypeTag.GREATER_THAN: lambda v: int(v[0] > v[1]),
    TypeTag.LESS_THAN: lambda v: int(v[0] < v[1]),
    TypeTag.EQUAL_TO: lambda v: int(v[0] == v[1]),
}


def evaluate_packet(packet: Packet) -> int:
    """
    Compute the value of a packet tree.

    Args:
        packet: Root of a decoded (or hand-built) tree

    Returns:
        Unsigned integer value. Comparisons yield 1 or 0.

    Raises:
        EmptyOperatorError: If MINIMUM/MAXIMUM has no operands
        ArithmeticOverflowError: If a SUM/PRODUCT leaves the 64-bit range
    """
    if packet.is_literal:
        return packet.value

    reducer = _REDUCERS[packet.type_tag]
    values = [evaluate_packet(child) for child in packet.children]
    result = reducer(values)
    logger.debug(f"{packet.type_tag.name}{values} = {result}")
    return result


def sum_versions(packet: Packet) -> int:
    """Sum the version field of the packet and every descendant."""
    total = packet.version
    for child in packet.children:
        total = _checked(total + sum_versions(child), "Version sum")
    return total


__all__ = ["evaluate_packet", "sum_versions"]
