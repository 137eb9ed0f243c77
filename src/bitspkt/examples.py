"""
Example transmissions and hand-built packet trees.

The sample transmissions are the canonical worked examples for the
format, keyed to their expected version sums and values. The builder
constructs the tree behind "9C0141080250320F1802104A08" without going
through the decoder.
"""
from bitspkt.model import Packet, TypeTag


SAMPLE_LITERAL = "D2FE28"  # literal 2021
SAMPLE_LENGTH_DELIMITED = "38006F45291200"  # LESS_THAN(10, 20)
SAMPLE_COUNT_DELIMITED = "EE00D40C823060"  # MAXIMUM(1, 2, 3)

SAMPLE_VERSION_SUMS = {
    "8A004A801A8002F478": 16,
    "620080001611562C8802118E34": 12,
    "C0015000016115A2E0802F182340": 23,
    "A0016C880162017C3686B18A3D4780": 31,
}

SAMPLE_VALUES = {
    "C200B40A82": 3,  # 1 + 2
    "04005AC33890": 54,  # 6 * 9
    "880086C3E88112": 7,  # min(7, 8, 9)
    "CE00C43D881120": 9,  # max(7, 8, 9)
    "D8005AC2A8F0": 1,  # 5 < 15
    "F600BC2D8F": 0,  # 5 > 15
    "9C005AC2F8F0": 0,  # 5 == 15
    "9C0141080250320F1802104A08": 1,  # 1 + 3 == 2 * 2
}


def build_example_equality_packet() -> Packet:
    """Build (1 + 3) == (2 * 2) with the versions used on the wire."""
    left = Packet.operator(TypeTag.SUM, [Packet.literal(1, version=2), Packet.literal(3, version=4)], version=2)
    right = Packet.operator(TypeTag.PRODUCT, [Packet.literal(2, version=0), Packet.literal(2, version=2)], version=6)
    return Packet.operator(TypeTag.EQUAL_TO, [left, right], version=4)
