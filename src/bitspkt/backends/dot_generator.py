"""
Graphviz DOT diagram generator for packet trees.

Converts a Packet tree into Graphviz DOT format for visualization.

Supports two modes:
    - SIMPLE: Operator symbols and literal values only
    - DETAILED: Adds versions and the evaluated value of every node
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

from bitspkt.errors import EvaluationError
from bitspkt.evaluator import evaluate_packet
from bitspkt.model import Packet, TypeTag


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"
    DETAILED = "detailed"


_OPERATOR_SYMBOLS: Dict[TypeTag, str] = {
    TypeTag.SUM: "+",
    TypeTag.PRODUCT: "*",
    TypeTag.MINIMUM: "min",
    TypeTag.MAXIMUM: "max",
    TypeTag.GREATER_THAN: ">",
    TypeTag.LESS_THAN: "<",
    TypeTag.EQUAL_TO: "==",
}

_INFIX = frozenset({
    TypeTag.SUM,
    TypeTag.PRODUCT,
    TypeTag.GREATER_THAN,
    TypeTag.LESS_THAN,
    TypeTag.EQUAL_TO,
})


def _escape_dot_string(s: str) -> str:
    """Escape special characters for DOT labels."""
    if not s:
        return '""'
    s = s.replace('\\', '\\\\')
    s = s.replace('"', '\\"')
    s = s.replace('\n', '\\n')
    return f'"{s}"'


def format_expression(packet: Packet) -> str:
    """
    Render a packet tree as readable text.

    Examples:
        ((1 + 3) == (2 * 2))
        min(7, 8, 9)
        sum()
    """
    if packet.is_literal:
        return str(packet.value)

    parts = [format_expression(child) for child in packet.children]
    symbol = _OPERATOR_SYMBOLS[packet.type_tag]

    if packet.type_tag in _INFIX and parts:
        return "(" + f" {symbol} ".join(parts) + ")"
    name = packet.type_tag.name.lower() if not packet.children else symbol
    return f"{name}({', '.join(parts)})"


def _collect_results(packet: Packet, results: Dict[int, str]) -> Tuple[Optional[int], Optional[str]]:
    """
    Evaluate every operator node once, bottom-up.

    Each operator is evaluated over its children's already computed
    values; a failing child fails its ancestors with the same error.
    Results are keyed by id() of the node.
    """
    if packet.is_literal:
        return packet.value, None

    values: List[int] = []
    error: Optional[str] = None
    for child in packet.children:
        child_value, child_error = _collect_results(child, results)
        if error is None:
            error = child_error
        values.append(child_value)

    value: Optional[int] = None
    if error is None:
        shallow = Packet.operator(packet.type_tag, [Packet.literal(v) for v in values])
        try:
            value = evaluate_packet(shallow)
        except EvaluationError as e:
            error = type(e).__name__

    results[id(packet)] = f"= {value}" if error is None else f"error: {error}"
    return value, error


def _node_label(packet: Packet, mode: DotMode, results: Dict[int, str]) -> str:
    label = str(packet.value) if packet.is_literal else _OPERATOR_SYMBOLS[packet.type_tag]

    if mode == DotMode.DETAILED:
        info = [f"v{packet.version}"]
        if not packet.is_literal:
            info.append(results[id(packet)])
        label = f"{label}\n({', '.join(info)})"

    return label


def generate_dot(packet: Packet, mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for a packet tree.

    Nodes are numbered in pre-order (root is p0); edges follow operand
    order.

    Args:
        packet: Root packet to visualize
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    lines: List[str] = []

    lines.append("digraph packet {")
    lines.append("  rankdir=TB;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    results: Dict[int, str] = {}
    if mode == DotMode.DETAILED:
        _collect_results(packet, results)

    counter = 0
    stack = [(packet, None)]
    while stack:
        node, parent_id = stack.pop()
        node_id = f"p{counter}"
        counter += 1

        attrs = f"label={_escape_dot_string(_node_label(node, mode, results))}"
        if node.is_literal:
            attrs += ", shape=ellipse, fillcolor=lightgreen"
        lines.append(f"  {node_id} [{attrs}];")

        if parent_id is not None:
            lines.append(f"  {parent_id} -> {node_id};")

        # Reversed so children pop in operand order
        for child in reversed(node.children):
            stack.append((child, node_id))

    lines.append("}")

    return "\n".join(lines)


def save_dot_file(packet: Packet, filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        packet: Packet tree to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(packet, mode=mode)
    with open(filename, 'w') as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file", "format_expression"]
