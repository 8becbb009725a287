"""
Tests for the fixture corpus catalog.

Names and inputs are shared with independent codec implementations, so the
exact sizes and contents are pinned here.
"""

import pytest

from snapfix.core.corpus import (
    SIZE_100KB,
    SIZE_1MB,
    build_corpus,
    corpus_names,
    repeat_to_size,
    select_cases,
)


EXPECTED_ORDER = [
    "empty",
    "single_byte",
    "hello",
    "repeated",
    "pattern",
    "longer_text",
    "ascii",
    "large",
    "mixed",
    "numbers",
    "large_100kb",
    "large_1mb",
    "large_10mb",
]


@pytest.fixture(scope="module")
def corpus():
    return {case.name: case for case in build_corpus()}


def test_names_are_unique_and_ordered():
    names = corpus_names()
    assert names == EXPECTED_ORDER
    assert len(set(names)) == len(names)
    assert [case.name for case in build_corpus()] == names


def test_small_cases_match_literals(corpus):
    assert corpus["empty"].data == b""
    assert corpus["single_byte"].data == b"A"
    assert corpus["hello"].data == b"Hello, World!"
    assert corpus["repeated"].data == b"a" * 100
    assert corpus["pattern"].data == b"abcdefgh" * 20
    assert corpus["mixed"].data == b"AAAAAAAbbbbbCCCCCdddEEFF1234567890"
    assert corpus["large"].data == b"x" * 10000


def test_longer_text(corpus):
    sentence = b"The quick brown fox jumps over the lazy dog."
    data = corpus["longer_text"].data
    assert data == b" ".join([sentence] * 4)
    assert len(data) == 179
    assert not data.endswith(b" ")


def test_ascii_covers_printable_range_once(corpus):
    data = corpus["ascii"].data
    assert len(data) == 95
    assert list(data) == list(range(32, 127))


def test_numbers(corpus):
    text = corpus["numbers"].data.decode("ascii")
    assert text.startswith("0 1 2 ")
    assert text.endswith("98 99 ")
    assert len(text) == 290
    for i in range(100):
        assert f"{i} " in text


def test_large_100kb_is_exact_and_truncated(corpus):
    data = corpus["large_100kb"].data
    assert len(data) == SIZE_100KB
    chunk = b"The quick brown fox jumps over the lazy dog. "
    assert data.startswith(chunk * 3)
    # 100000 = 2222 * 45 + 10, so the last repetition is cut mid-phrase
    assert data.endswith(chunk * 2 + chunk[:10])


def test_large_1mb_layout(corpus):
    data = corpus["large_1mb"].data
    assert len(data) == SIZE_1MB
    first_line = b"Line 0: Lorem ipsum dolor sit amet, consectetur adipiscing elit. "
    assert data.startswith(first_line + b"A" * 50 + b"Line 1: ")
    assert b"Line 9999: " in data
    assert b"K" * 50 in data  # burst for i == 10
    text_length = 728890
    assert data[text_length:] == b"\x00" * (SIZE_1MB - text_length)
    assert data[text_length - 1:text_length] == b" "


def test_large_10mb_is_uniform(corpus):
    data = corpus["large_10mb"].data
    assert len(data) == 10485700
    assert data.count(b"X") == len(data)


def test_redundancy_classes(corpus):
    assert corpus["empty"].size == 0
    assert corpus["single_byte"].size == 1
    assert len(set(corpus["repeated"].data)) == 1
    assert len(set(corpus["ascii"].data)) == corpus["ascii"].size
    assert corpus["large"].size > 0 and len(set(corpus["large"].data)) == 1
    # larger than a single 64 KiB Snappy block
    for name in ("large_100kb", "large_1mb", "large_10mb"):
        assert corpus[name].size > 65536


def test_every_case_has_a_description(corpus):
    assert all(case.description for case in corpus.values())


def test_build_corpus_is_deterministic():
    first = build_corpus()
    second = build_corpus()
    assert first == second
    assert first is not second


def test_repeat_to_size():
    assert repeat_to_size(b"abc", 7) == b"abcabca"
    assert repeat_to_size(b"abc", 2) == b"ab"
    assert repeat_to_size(b"abc", 0) == b""


def test_select_cases_keeps_catalog_order():
    cases = select_cases(["repeated", "hello"])
    assert [case.name for case in cases] == ["hello", "repeated"]


def test_select_cases_rejects_unknown_names():
    with pytest.raises(KeyError, match="nope"):
        select_cases(["hello", "nope"])
