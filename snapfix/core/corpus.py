"""
Fixed catalog of named inputs used to produce the shared Snappy fixtures.

The catalog is data: an ordered list of ``TestCase`` records. Order and names
are part of the fixture contract, since independent implementations look the
files up by name. Each input is chosen to cover one edge of the format:

- degenerate sizes (empty, one byte)
- literal-only streams (short text, the printable ASCII range)
- back-references at unit and non-unit distances
- block boundaries (inputs larger than Snappy's 64 KiB block)
- size classes up to ~10 MiB
"""

from dataclasses import dataclass
from typing import Callable, List, Tuple

import numpy as np


SIZE_100KB = 100_000
SIZE_1MB = 1_048_576
LARGE_10MB_RUNS = 10_485_760 // 100

QUICK_BROWN_FOX = b"The quick brown fox jumps over the lazy dog."


@dataclass(frozen=True)
class TestCase:
    """A named fixture input. Identity is ``name``."""

    __test__ = False  # not a pytest test class

    name: str
    data: bytes
    description: str = ""

    @property
    def size(self) -> int:
        return len(self.data)


def repeat_byte(value: str, count: int) -> bytes:
    """Returns ``count`` copies of a single-character byte."""
    return np.full(count, ord(value), dtype=np.uint8).tobytes()


def repeat_to_size(chunk: bytes, size: int) -> bytes:
    """Repeats ``chunk`` cyclically and cuts the result at exactly ``size`` bytes."""
    pattern = np.frombuffer(chunk, dtype=np.uint8)
    return np.resize(pattern, size).tobytes()


def _ascii_range() -> bytes:
    return np.arange(32, 127, dtype=np.uint8).tobytes()


def _numbers() -> bytes:
    return "".join(f"{i} " for i in range(100)).encode("ascii")


def _longer_text() -> bytes:
    return b" ".join([QUICK_BROWN_FOX] * 4)


def _large_100kb() -> bytes:
    return repeat_to_size(QUICK_BROWN_FOX + b" ", SIZE_100KB)


def _large_1mb() -> bytes:
    """
    Structured pseudo-log lines with a 50-byte burst every tenth line.

    The text runs out before 1 MiB; the remainder is NUL padding, so the case
    also covers a long zero run after mixed-compressibility content.
    """
    parts = []
    for i in range(10_000):
        parts.append(
            f"Line {i}: Lorem ipsum dolor sit amet, consectetur adipiscing elit. ".encode("ascii")
        )
        if i % 10 == 0:
            parts.append(repeat_byte(chr(ord("A") + i % 26), 50))
    text = b"".join(parts)
    return text[:SIZE_1MB].ljust(SIZE_1MB, b"\x00")


def _large_10mb() -> bytes:
    return repeat_byte("X", LARGE_10MB_RUNS * 100)


# (name, builder, description) in fixture order
CATALOG: List[Tuple[str, Callable[[], bytes], str]] = [
    ("empty", lambda: b"", "zero-length input"),
    ("single_byte", lambda: b"A", "smallest non-trivial input"),
    ("hello", lambda: b"Hello, World!", "short literal text, no repetition"),
    ("repeated", lambda: repeat_byte("a", 100), "100-byte run of one byte"),
    ("pattern", lambda: b"abcdefgh" * 20, "8-byte pattern repeated 20 times"),
    ("longer_text", _longer_text, "repeated natural-language sentence"),
    ("ascii", _ascii_range, "bytes 32..126 exactly once"),
    ("large", lambda: repeat_byte("x", 10_000), "10,000-byte uniform block"),
    ("mixed", lambda: b"AAAAAAAbbbbbCCCCCdddEEFF1234567890", "short runs of distinct bytes"),
    ("numbers", _numbers, "decimal numbers 0..99 separated by spaces"),
    ("large_100kb", _large_100kb, "repeated phrase cut at exactly 100,000 bytes"),
    ("large_1mb", _large_1mb, "pseudo-log lines with bursts, exactly 1 MiB"),
    ("large_10mb", _large_10mb, "~10 MiB of 100-byte runs of one character"),
]


def build_corpus() -> List[TestCase]:
    """
    Builds the full, ordered fixture corpus.

    Returns a fresh list on every call; inputs are deterministic.
    """
    return [
        TestCase(name=name, data=builder(), description=description)
        for name, builder, description in CATALOG
    ]


def corpus_names() -> List[str]:
    """Names of every case in fixture order, without building the inputs."""
    return [name for name, _, _ in CATALOG]


def select_cases(names: List[str]) -> List[TestCase]:
    """
    Builds only the named cases, keeping catalog order.

    Raises:
        KeyError: If a name is not in the catalog
    """
    known = set(corpus_names())
    unknown = [name for name in names if name not in known]
    if unknown:
        raise KeyError(f"Unknown test case(s): {', '.join(unknown)}")

    wanted = set(names)
    return [
        TestCase(name=name, data=builder(), description=description)
        for name, builder, description in CATALOG
        if name in wanted
    ]
