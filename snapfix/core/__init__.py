"""Reference codec capability, fixture corpus, generator and validator."""

from ..errors import (
    ArgumentError,
    CodecError,
    ContentMismatchError,
    DecompressionError,
    FixtureError,
    FixtureIOError,
    FormatError,
    SizeMismatchError,
)
from .codec import ReferenceCodec, SnappyCodec
from .corpus import TestCase, build_corpus, corpus_names
from .generator import FixtureGenerator, FixtureResult
from .validator import FixtureValidator, Stage, ValidationReport, Verdict

__all__ = [
    "ReferenceCodec",
    "SnappyCodec",
    "TestCase",
    "build_corpus",
    "corpus_names",
    "FixtureGenerator",
    "FixtureResult",
    "FixtureValidator",
    "Stage",
    "ValidationReport",
    "Verdict",
    "ArgumentError",
    "CodecError",
    "ContentMismatchError",
    "DecompressionError",
    "FixtureError",
    "FixtureIOError",
    "FormatError",
    "SizeMismatchError",
]
