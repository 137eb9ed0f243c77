"""
Tests for the Transmission Analyzer.

Tests verify that the analyzer correctly:
    - Accounts for consumed and padding bits
    - Inventories packets by type
    - Measures tree depth
    - Reports version sum and value
    - Flags suspicious input without failing
"""

import logging

import pytest
from bitspkt.analyzer import analyze_packet, analyze_transmission
from bitspkt.errors import InvalidDigitError, TruncatedError
from bitspkt.examples import (
    SAMPLE_COUNT_DELIMITED,
    SAMPLE_LENGTH_DELIMITED,
    SAMPLE_LITERAL,
    build_example_equality_packet,
)
from bitspkt.model import Packet, TypeTag


def test_literal_transmission():
    """Analyze D2FE28: one literal, three padding bits."""
    report = analyze_transmission(SAMPLE_LITERAL)

    assert report.total_bits == 24
    assert report.consumed_bits == 21
    assert report.padding_bits == 3
    assert report.padding_is_zero
    assert report.packet_count == 1
    assert report.literal_count == 1
    assert report.operator_counts == {}
    assert report.max_depth == 0
    assert report.version_sum == 6
    assert report.value == 2021
    assert report.warnings == []


def test_length_delimited_transmission():
    report = analyze_transmission(SAMPLE_LENGTH_DELIMITED)

    assert report.consumed_bits == 49
    assert report.padding_bits == 7
    assert report.packet_count == 3
    assert report.operator_counts == {"LESS_THAN": 1}
    assert report.max_depth == 1
    assert report.version_sum == 9
    assert report.value == 1


def test_count_delimited_transmission():
    report = analyze_transmission(SAMPLE_COUNT_DELIMITED)

    assert report.consumed_bits == 51
    assert report.padding_bits == 5
    assert report.literal_count == 3
    assert report.version_sum == 14
    assert report.value == 3


def test_non_zero_padding_flagged():
    """Trailing one-bits are ignored by decoding but reported here."""
    report = analyze_transmission("D2FE2F")

    assert report.value == 2021
    assert not report.padding_is_zero
    assert any("Non-zero padding" in w for w in report.warnings)


def test_evaluation_failure_is_warning(count_delimited_bits, bits_to_hex):
    """An empty MINIMUM still produces a structural report."""
    report = analyze_transmission(bits_to_hex(count_delimited_bits(2, [], version=3)))

    assert report.value is None
    assert report.version_sum == 3
    assert report.operator_counts == {"MINIMUM": 1}
    assert any("Evaluation failed" in w for w in report.warnings)
    assert any("no operands" in w for w in report.warnings)


def test_warnings_are_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="bitspkt.analyzer"):
        analyze_transmission("D2FE2F")
    assert "Non-zero padding" in caplog.text


def test_decode_errors_propagate():
    with pytest.raises(InvalidDigitError):
        analyze_transmission("ZZ")
    with pytest.raises(TruncatedError):
        analyze_transmission("D2FE")


def test_packet_metrics():
    metrics = analyze_packet(build_example_equality_packet())

    assert metrics.depth == 2
    assert metrics.packet_count == 7
    assert metrics.literal_count == 4
    assert metrics.empty_operators == 0
    assert metrics.operator_counts == {"EQUAL_TO": 1, "SUM": 1, "PRODUCT": 1}


def test_packet_metrics_counts_repeated_operators():
    inner = Packet.operator(TypeTag.SUM, [Packet.literal(1)])
    packet = Packet.operator(TypeTag.SUM, [inner, Packet.operator(TypeTag.SUM, [inner])])
    metrics = analyze_packet(packet)

    assert metrics.operator_counts == {"SUM": 4}
    assert metrics.depth == 3
