"""
BITS Packet Decoder Package

Decodes hexadecimal "BITS" transmissions into an immutable tree of
packets and evaluates that tree.

Entry points:
    decode_transmission(text) -> Packet
    evaluate_packet(packet)   -> int
    sum_versions(packet)      -> int

Failures on malformed input are raised as subclasses of
bitspkt.errors.BitsError.

Decoding and evaluation do no I/O and the package configures no
logging handlers; see bitspkt.logging_utils for that.
"""

from bitspkt.decoder import decode_transmission
from bitspkt.evaluator import evaluate_packet, sum_versions

__version__ = "0.1.0"

__all__ = ["decode_transmission", "evaluate_packet", "sum_versions", "__version__"]
