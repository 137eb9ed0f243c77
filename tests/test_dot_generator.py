"""
Tests for the DOT diagram generator and text rendering.

These tests verify that packet trees are correctly converted to
Graphviz DOT format and to readable expression text.

Tests cover:
    - One node per packet, one edge per operand
    - Operator symbols and literal labels
    - Detailed mode versions and values
    - DOT syntax validity
"""

import pytest
from bitspkt import decode_transmission
from bitspkt.backends.dot_generator import (
    DotMode,
    format_expression,
    generate_dot,
    save_dot_file,
)
from bitspkt.examples import SAMPLE_COUNT_DELIMITED, build_example_equality_packet
from bitspkt.model import Packet, TypeTag


class TestDotBasicStructure:
    """Test basic DOT graph structure."""

    def test_single_literal(self):
        dot = generate_dot(Packet.literal(2021))
        assert dot.startswith("digraph packet {")
        assert dot.endswith("}")
        assert 'p0 [label="2021"' in dot
        assert "->" not in dot

    def test_node_and_edge_counts(self):
        """Seven packets give seven nodes and six edges."""
        dot = generate_dot(build_example_equality_packet())
        assert dot.count("[label=") == 7
        assert dot.count("->") == 6

    def test_edges_follow_preorder(self):
        dot = generate_dot(decode_transmission(SAMPLE_COUNT_DELIMITED))
        assert "p0 -> p1;" in dot
        assert "p0 -> p2;" in dot
        assert "p0 -> p3;" in dot

    def test_operator_symbols(self):
        dot = generate_dot(build_example_equality_packet())
        assert 'label="=="' in dot
        assert 'label="+"' in dot
        assert 'label="*"' in dot

    def test_literals_styled_differently(self):
        dot = generate_dot(Packet.operator(TypeTag.SUM, [Packet.literal(1)]))
        assert "shape=ellipse" in dot


class TestDotDetailedMode:
    """Test the detailed visualization mode."""

    def test_versions_and_values(self):
        dot = generate_dot(build_example_equality_packet(), mode=DotMode.DETAILED)
        assert "v4" in dot
        assert "= 4" in dot  # both sides of the comparison
        assert "= 1" in dot  # the comparison itself

    def test_evaluation_error_shown(self):
        dot = generate_dot(Packet.operator(TypeTag.MINIMUM, []), mode=DotMode.DETAILED)
        assert "EmptyOperatorError" in dot

    def test_error_propagates_to_ancestors(self):
        """A failing operand marks every enclosing operator, not its siblings."""
        packet = Packet.operator(TypeTag.SUM, [
            Packet.operator(TypeTag.PRODUCT, [Packet.literal(3), Packet.literal(5)]),
            Packet.operator(TypeTag.MAXIMUM, []),
        ])
        dot = generate_dot(packet, mode=DotMode.DETAILED)
        assert dot.count("error: EmptyOperatorError") == 2
        assert "= 15" in dot

    def test_each_operator_evaluated_once(self, monkeypatch):
        """Deep chains are evaluated bottom-up, one evaluation per operator."""
        from bitspkt.backends import dot_generator

        calls = []
        real_evaluate = dot_generator.evaluate_packet

        def counting_evaluate(packet):
            calls.append(packet)
            return real_evaluate(packet)

        monkeypatch.setattr(dot_generator, "evaluate_packet", counting_evaluate)

        packet = Packet.literal(7)
        for _ in range(60):
            packet = Packet.operator(TypeTag.SUM, [packet, Packet.literal(1)])

        dot = generate_dot(packet, mode=DotMode.DETAILED)
        assert len(calls) == 60
        assert "= 67" in dot
        assert "= 8" in dot

    def test_save_dot_file(self, tmp_path):
        path = tmp_path / "packet.dot"
        save_dot_file(Packet.literal(3), str(path), mode=DotMode.DETAILED)
        assert path.read_text().startswith("digraph")


class TestFormatExpression:
    """Test the text rendering of packet trees."""

    def test_nested_infix(self):
        assert format_expression(build_example_equality_packet()) == "((1 + 3) == (2 * 2))"

    def test_min_max_as_calls(self):
        assert format_expression(decode_transmission(SAMPLE_COUNT_DELIMITED)) == "max(1, 2, 3)"

    @pytest.mark.parametrize("tag,expected", [
        (TypeTag.SUM, "sum()"),
        (TypeTag.MINIMUM, "minimum()"),
    ])
    def test_empty_operators(self, tag, expected):
        assert format_expression(Packet.operator(tag, [])) == expected
