"""
Exception taxonomy for BITS decoding and evaluation.

Every failure caused by the input transmission is raised as a subclass
of BitsError, split into decode-time (DecodeError) and evaluate-time
(EvaluationError) failures.

Errors are raised where the violation is detected and propagate to the
caller unchanged. The single translation happens in the decoder: a
TruncatedError inside a length-delimited group becomes a
FramingMismatchError, because the declared boundary was exceeded rather
than the end of the input.
"""


class BitsError(Exception):
    """Base class for all BITS input failures."""
    pass


class DecodeError(BitsError):
    """Raised when a transmission cannot be decoded into a packet tree."""
    pass


class InvalidDigitError(DecodeError):
    """Raised when the transmission contains a non-hexadecimal character."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid hex digit {char!r} at position {position}")


class TruncatedError(DecodeError):
    """Raised when a read runs past the available bits."""
    pass


class FramingMismatchError(DecodeError):
    """Raised when a length-delimited child group overruns its declared length."""
    pass


class LiteralOverflowError(DecodeError):
    """Raised when a literal value does not fit in 64 bits."""
    pass


class UnknownTypeIdError(DecodeError):
    """Raised for a packet type id outside the defined set."""

    def __init__(self, type_id: int):
        self.type_id = type_id
        super().__init__(f"Unknown packet type id: {type_id}")


class ArityError(DecodeError):
    """Raised when a comparison packet does not have exactly two operands."""

    def __init__(self, type_tag, count: int):
        self.type_tag = type_tag
        self.count = count
        super().__init__(
            f"{type_tag.name} packet requires exactly 2 operands, got {count}"
        )


class MalformedInputError(DecodeError):
    """Raised when packet nesting exceeds the configured maximum depth."""
    pass


class EvaluationError(BitsError):
    """Raised when a decoded packet tree cannot be evaluated."""
    pass


class EmptyOperatorError(EvaluationError):
    """Raised when MINIMUM or MAXIMUM is applied to zero operands."""
    pass


class ArithmeticOverflowError(EvaluationError):
    """Raised when evaluation leaves the unsigned 64-bit range."""
    pass


__all__ = [
    "BitsError",
    "DecodeError",
    "InvalidDigitError",
    "TruncatedError",
    "FramingMismatchError",
    "LiteralOverflowError",
    "UnknownTypeIdError",
    "ArityError",
    "MalformedInputError",
    "EvaluationError",
    "EmptyOperatorError",
    "ArithmeticOverflowError",
]
