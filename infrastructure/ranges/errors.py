from __future__ import annotations


class TstzRangeError(ValueError):
    """Base class for range decoding and conversion failures."""


class MalformedRangeLiteral(TstzRangeError):
    """The text is not a valid ``tstzrange`` literal."""

    def __init__(self, literal: str, reason: str) -> None:
        super().__init__(f"Invalid tstzrange literal {literal!r}: {reason}")
        self.literal = literal
        self.reason = reason


class UnsupportedScalarShape(TstzRangeError):
    """A scalar handed to the adapter is not a non-null text value."""
