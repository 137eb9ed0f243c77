#!/usr/bin/env python3
"""
Demo: Decode a transmission, evaluate it and print the analysis report.

Usage:
    python demo_transmission.py [input_file]

With no argument the bundled sample transmissions are used.
"""

import logging
import sys

from bitspkt import decode_transmission, evaluate_packet, sum_versions
from bitspkt.analyzer import analyze_transmission
from bitspkt.backends import format_expression
from bitspkt.decoder import decode_transmission_file
from bitspkt.examples import SAMPLE_VALUES, SAMPLE_VERSION_SUMS
from bitspkt.logging_utils import setup_logging


def print_report(report):
    """Pretty-print a TransmissionReport."""
    print()
    print("=" * 70)
    print(f"TRANSMISSION: {report.transmission[:60]}")
    print("=" * 70)
    print(f"  Bits (total/used/pad): {report.total_bits}/{report.consumed_bits}/{report.padding_bits}")
    print(f"  Packets:               {report.packet_count} ({report.literal_count} literal)")
    print(f"  Max Depth:             {report.max_depth}")
    for name, count in sorted(report.operator_counts.items()):
        print(f"    {name}: {count}")
    print(f"  Version Sum:           {report.version_sum}")
    print(f"  Value:                 {report.value}")
    if report.warnings:
        print("  Warnings:")
        for i, warning in enumerate(report.warnings, 1):
            print(f"    {i}. {warning}")


def main(argv):
    setup_logging(level=logging.WARNING)

    if len(argv) > 1:
        packet = decode_transmission_file(argv[1])
        print(f"Part 1: {sum_versions(packet)}")
        print(f"Part 2: {evaluate_packet(packet)}")
        return 0

    for text in list(SAMPLE_VERSION_SUMS) + list(SAMPLE_VALUES):
        print_report(analyze_transmission(text))
        print(f"  Expression:            {format_expression(decode_transmission(text))}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
