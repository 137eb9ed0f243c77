"""
Decoder configuration.

Immutable settings passed to the decoder and analyzer. Format constants
(field widths, the 64-bit literal limit) are fixed by the wire layout
and live in bitspkt.model, not here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderConfig:
    """
    Settings for packet decoding.

    Attributes:
        max_depth: Deepest packet nesting accepted before decoding fails
            with MalformedInputError. The root packet is depth 0.
    """
    # Each nesting level costs three decoder frames; 250 levels stays
    # inside the default interpreter recursion limit of 1000.
    max_depth: int = 250

    def __post_init__(self):
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")


DEFAULT_CONFIG = DecoderConfig()
