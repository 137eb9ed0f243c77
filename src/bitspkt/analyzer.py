"""
Transmission Analyzer: diagnostics and inventory of decoded packets.

This module provides lightweight analysis of a transmission:
    - Bit accounting (consumed vs. padding)
    - Packet inventory by type
    - Tree depth
    - Version sum and value
    - Warning flags for suspicious input

IMPORTANT: This is read-only. It never alters a packet tree.
Decode errors propagate; evaluation errors are recorded as warnings
so the structural report is still produced.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from bitspkt.bitcursor import BitCursor
from bitspkt.config import DecoderConfig
from bitspkt.decoder import decode_packet
from bitspkt.errors import EvaluationError
from bitspkt.evaluator import evaluate_packet, sum_versions
from bitspkt.model import Packet, TypeTag
from bitspkt.transcoder import decode_hex

logger = logging.getLogger(__name__)


@dataclass
class PacketMetrics:
    """Structural metrics about a packet tree."""
    depth: int = 0
    packet_count: int = 0
    literal_count: int = 0
    empty_operators: int = 0
    operator_counts: Dict[str, int] = field(default_factory=dict)

    def add(self, other: PacketMetrics) -> None:
        self.depth = max(self.depth, other.depth)
        self.packet_count += other.packet_count
        self.literal_count += other.literal_count
        self.empty_operators += other.empty_operators
        for name, count in other.operator_counts.items():
            self.operator_counts[name] = self.operator_counts.get(name, 0) + count


def analyze_packet(packet: Packet) -> PacketMetrics:
    """Recursively measure a packet tree. A lone literal has depth 0."""
    metrics = PacketMetrics(packet_count=1)

    if packet.type_tag is TypeTag.LITERAL:
        metrics.literal_count = 1
        return metrics

    metrics.operator_counts[packet.type_tag.name] = 1
    if not packet.children:
        metrics.empty_operators = 1

    for child in packet.children:
        child_metrics = analyze_packet(child)
        child_metrics.depth += 1
        metrics.add(child_metrics)

    return metrics


@dataclass
class TransmissionReport:
    """Analysis report for one transmission."""

    transmission: str

    # Bit accounting
    total_bits: int = 0
    consumed_bits: int = 0
    padding_bits: int = 0
    padding_is_zero: bool = True

    # Structure
    packet_count: int = 0
    literal_count: int = 0
    operator_counts: Dict[str, int] = field(default_factory=dict)
    max_depth: int = 0

    # Results
    version_sum: int = 0
    value: Optional[int] = None

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)
            logger.warning(msg)


def analyze_transmission(text: str, config: Optional[DecoderConfig] = None) -> TransmissionReport:
    """
    Decode and analyze a hex transmission.

    Checks for:
    - Padding that is not all zeros
    - Operators with no operands
    - Evaluation failures

    Returns a TransmissionReport with metrics and warnings.

    Raises:
        DecodeError: If the transmission cannot be decoded
    """
    report = TransmissionReport(transmission=text)

    cursor = BitCursor(decode_hex(text))
    report.total_bits = len(cursor)
    packet = decode_packet(cursor, config)

    # =========================================================================
    # 1. BIT ACCOUNTING
    # =========================================================================

    report.consumed_bits = cursor.position
    report.padding_bits = cursor.remaining
    padding = str(cursor.take_sub_cursor(cursor.remaining))
    report.padding_is_zero = "1" not in padding

    # =========================================================================
    # 2. STRUCTURE
    # =========================================================================

    metrics = analyze_packet(packet)
    report.packet_count = metrics.packet_count
    report.literal_count = metrics.literal_count
    report.operator_counts = dict(metrics.operator_counts)
    report.max_depth = metrics.depth

    # =========================================================================
    # 3. RESULTS
    # =========================================================================

    report.version_sum = sum_versions(packet)
    try:
        report.value = evaluate_packet(packet)
    except EvaluationError as e:
        report.add_warning(f"Evaluation failed: {e}")

    # =========================================================================
    # 4. WARNING FLAGS
    # =========================================================================

    if not report.padding_is_zero:
        report.add_warning(f"Non-zero padding bits: {padding}")

    if metrics.empty_operators:
        report.add_warning(f"Operators with no operands: {metrics.empty_operators}")

    return report


__all__ = ["PacketMetrics", "TransmissionReport", "analyze_packet", "analyze_transmission"]
