"""
Validate a Snappy-compressed file with the reference decoder.

Checks that a file produced by an independent encoder is a well-formed Snappy
stream of exactly the expected uncompressed size.

Usage:
    python -m bin.validate <compressed_file> <expected_size>
"""

import argparse
import sys

from snapfix.core import FixtureValidator, SnappyCodec
from snapfix.core.validator import parse_expected_size
from snapfix.errors import ArgumentError, FixtureError
from snapfix.io import read_fixture


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        description="Validate a Snappy-compressed file against its expected size",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m bin.validate test.snappy 100

  # Also compare the decoded bytes with the original input
  python -m bin.validate hello.snappy 13 --expected-file hello.txt
"""
    )

    parser.add_argument(
        "compressed_file",
        type=str,
        help="Path to compressed file"
    )
    parser.add_argument(
        "expected_size",
        type=str,
        help="Expected uncompressed size in bytes"
    )
    parser.add_argument(
        "--expected-file",
        type=str,
        default=None,
        help="Original input to compare the decoded bytes against"
    )

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        expected_size = parse_expected_size(args.expected_size)
        expected_data = None
        if args.expected_file:
            expected_data = read_fixture(args.expected_file)
    except ArgumentError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except FixtureError as e:
        print(f"ERROR: Cannot read expected file: {e}", file=sys.stderr)
        return 1

    validator = FixtureValidator(SnappyCodec())
    try:
        validator.validate(args.compressed_file, expected_size, expected_data=expected_data)
    except FixtureError as e:
        where = f"{e.stage}: " if e.stage is not None else ""
        print(f"ERROR: {where}{e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
