"""
Error taxonomy for fixture generation and validation.

Every error is terminal for the run that raised it. Validation errors carry
the stage that failed and, once the pipeline has started, the partially
filled report so callers can print what was checked before the failure.
"""

from typing import Optional


class FixtureError(Exception):
    """Base class for all generator and validator failures."""

    def __init__(self, message: str, stage=None, report=None):
        super().__init__(message)
        self.stage = stage
        self.report = report


class ArgumentError(FixtureError):
    """Malformed or missing command-line input."""


class FixtureIOError(FixtureError, OSError):
    """A fixture file could not be read or written."""


class FormatError(FixtureError):
    """Compressed stream failed the structural or header-length check."""


class SizeMismatchError(FixtureError):
    """Declared or decompressed length disagrees with the expected size."""

    def __init__(
        self,
        message: str,
        expected: int,
        actual: int,
        stage=None,
        report=None
    ):
        super().__init__(
            f"{message} (expected={expected}, actual={actual})",
            stage=stage,
            report=report
        )
        self.expected = expected
        self.actual = actual


class DecompressionError(FixtureError):
    """The reference decoder rejected the stream during full decode."""


class ContentMismatchError(FixtureError):
    """Decoded bytes differ from the reference input."""

    def __init__(self, message: str, offset: Optional[int], stage=None, report=None):
        super().__init__(message, stage=stage, report=report)
        self.offset = offset


class CodecError(FixtureError):
    """Compression itself failed. Never expected from the reference codec."""
