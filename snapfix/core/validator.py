"""
Stage-by-stage validation of a compressed artifact against an expected size.

The pipeline answers one question: is this file a well-formed Snappy stream
that decodes to exactly ``expected_size`` bytes? Each stage gates the next,
so a stream rejected by the structural check is never handed to the decoder,
and a wrong declared length is reported before a full decode is attempted.

    1. load             read the whole file
    2. structure        codec's well-formedness check
    3. declared length  header length vs. expected size
    4. decompress       full decode, decoded length vs. expected size
    5. content          decoded bytes vs. reference (only if supplied)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

import numpy as np

from snapfix.core.codec import ReferenceCodec
from snapfix.errors import (
    ArgumentError,
    ContentMismatchError,
    DecompressionError,
    FixtureError,
    FixtureIOError,
    FormatError,
    SizeMismatchError,
)
from snapfix.io.fixtures import read_fixture
from snapfix.utils.metrics import compression_factor, format_factor


class Stage(Enum):
    LOAD = 1
    STRUCTURE = 2
    DECLARED_LENGTH = 3
    DECOMPRESS = 4
    CONTENT = 5

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", " ")

    def __str__(self) -> str:
        return f"stage {self.value} ({self.label})"


class Verdict(Enum):
    PASS = "pass"
    FAIL = "fail"


@dataclass
class ValidationReport:
    """Everything learned about one artifact, filled in as stages pass."""

    source_file: Path
    expected_size: int
    compressed_size: Optional[int] = None
    structurally_valid: bool = False
    declared_uncompressed_size: Optional[int] = None
    decompressed_size: Optional[int] = None
    ratio: Optional[float] = None
    content_matches: Optional[bool] = None
    verdict: Verdict = Verdict.FAIL
    failure_stage: Optional[Stage] = None

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.PASS


def parse_expected_size(text: str) -> int:
    """
    Parses an expected uncompressed size supplied as text.

    Raises:
        ArgumentError: If ``text`` is not a non-negative integer
    """
    digits = text.strip() if isinstance(text, str) else ""
    # ASCII decimal digits only: no sign, underscores or non-ASCII numerals
    if not (digits.isascii() and digits.isdigit()):
        raise ArgumentError(f"Expected size must be a non-negative integer, got {text!r}")
    return int(digits)


def first_difference(actual: bytes, expected: bytes) -> Optional[int]:
    """Offset of the first differing byte, or None if the sequences are equal."""
    common = min(len(actual), len(expected))
    a = np.frombuffer(actual, dtype=np.uint8, count=common)
    b = np.frombuffer(expected, dtype=np.uint8, count=common)
    mismatches = np.flatnonzero(a != b)
    if mismatches.size:
        return int(mismatches[0])
    if len(actual) != len(expected):
        return common
    return None


class FixtureValidator:
    """
    Runs the validation pipeline for one artifact at a time.

    The validator holds no state between runs; the same instance can check
    any number of files.

    Args:
        codec: Reference codec used for every stage
        log: Callable receiving one checklist line per passed stage

    Example:
        >>> validator = FixtureValidator(SnappyCodec())
        >>> report = validator.validate("fixtures/hello.snappy", 13)
        >>> report.passed
        True
    """

    def __init__(self, codec: ReferenceCodec, log: Callable[[str], None] = print):
        self.codec = codec
        self.log = log

    def validate(
        self,
        path: Union[str, Path],
        expected_size: int,
        expected_data: Optional[bytes] = None
    ) -> ValidationReport:
        """
        Validates one compressed artifact.

        Args:
            path: Compressed file to check
            expected_size: Number of bytes the stream must decode to
            expected_data: Optional original input for a byte-for-byte check

        Returns:
            Passing report

        Raises:
            ArgumentError: Invalid expected size or reference
            FixtureError: The first failing stage's error, with ``error.report``
                holding the partially filled report
        """
        if isinstance(expected_size, bool) or not isinstance(expected_size, int) or expected_size < 0:
            raise ArgumentError(f"Expected size must be a non-negative integer, got {expected_size!r}")
        if expected_data is not None and len(expected_data) != expected_size:
            raise ArgumentError(
                f"Reference data is {len(expected_data)} bytes but expected size is {expected_size}"
            )

        report = ValidationReport(source_file=Path(path), expected_size=expected_size)

        try:
            data = self._load(report)
            self._check_structure(data, report)
            self._check_declared_length(data, report)
            decoded = self._decompress(data, report)
            if expected_data is not None:
                self._check_content(decoded, expected_data, report)
        except FixtureError as e:
            report.verdict = Verdict.FAIL
            report.failure_stage = e.stage
            e.report = report
            raise

        report.verdict = Verdict.PASS
        self.log("\n✅ ALL CHECKS PASSED - compressed data is valid!")
        return report

    def _load(self, report: ValidationReport) -> bytes:
        try:
            data = read_fixture(report.source_file)
        except FixtureIOError as e:
            e.stage = Stage.LOAD
            raise

        report.compressed_size = len(data)
        self.log(f"File: {report.source_file}")
        self.log(f"Compressed size: {len(data):,} bytes")
        return data

    def _check_structure(self, data: bytes, report: ValidationReport):
        if not self.codec.is_valid_compressed(data):
            raise FormatError("Invalid compressed data format", stage=Stage.STRUCTURE)

        report.structurally_valid = True
        self.log("✓ Format validation passed")

    def _check_declared_length(self, data: bytes, report: ValidationReport):
        declared = self.codec.uncompressed_length(data)
        if declared is None:
            raise FormatError(
                "Cannot get uncompressed length from a stream that passed format validation",
                stage=Stage.DECLARED_LENGTH
            )

        report.declared_uncompressed_size = declared
        self.log(f"✓ Uncompressed length: {declared:,} bytes")

        if declared != report.expected_size:
            raise SizeMismatchError(
                "Size mismatch in stream header",
                expected=report.expected_size,
                actual=declared,
                stage=Stage.DECLARED_LENGTH
            )
        self.log(f"✓ Size matches expected: {report.expected_size:,} bytes")

    def _decompress(self, data: bytes, report: ValidationReport) -> bytes:
        decoded = self.codec.decompress(data)
        if decoded is None:
            raise DecompressionError("Decompression failed", stage=Stage.DECOMPRESS)

        report.decompressed_size = len(decoded)
        self.log("✓ Decompression successful")

        if len(decoded) != report.expected_size:
            raise SizeMismatchError(
                "Decompressed size mismatch",
                expected=report.expected_size,
                actual=len(decoded),
                stage=Stage.DECOMPRESS
            )

        report.ratio = compression_factor(len(decoded), len(data))
        self.log(f"✓ Compression ratio: {format_factor(report.ratio)}")
        return decoded

    def _check_content(self, decoded: bytes, expected: bytes, report: ValidationReport):
        offset = first_difference(decoded, expected)
        report.content_matches = offset is None
        if offset is not None:
            raise ContentMismatchError(
                f"Decoded content differs from reference at offset {offset}",
                offset=offset,
                stage=Stage.CONTENT
            )
        self.log("✓ Content matches reference")
