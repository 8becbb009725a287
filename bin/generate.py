"""
Generate the shared Snappy fixture corpus.

Usage:
    python -m bin.generate
    python -m bin.generate --output-dir Tests/TestData --verify
"""

import argparse
import sys
from pathlib import Path

from snapfix.core import FixtureGenerator, SnappyCodec, build_corpus, corpus_names
from snapfix.core.corpus import select_cases
from snapfix.errors import FixtureError
from snapfix.io import FixtureStore
from snapfix.utils.config import load_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate Snappy test fixtures with the reference codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate every fixture into ./fixtures
  python -m bin.generate

  # Generate into a test bundle and round-trip check each fixture
  python -m bin.generate --output-dir Tests/TestData --verify

  # Regenerate only a few cases
  python -m bin.generate --only hello --only repeated
"""
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write fixtures to (default: from config, 'fixtures')"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--only",
        action="append",
        default=None,
        metavar="NAME",
        help=f"Generate only this case (repeatable). Known: {', '.join(corpus_names())}"
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Validate every fixture against its input after writing"
    )
    parser.add_argument(
        "--no-manifest",
        action="store_true",
        help="Do not write manifest.json"
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar"
    )

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Error: Cannot load config: {e}", file=sys.stderr)
        return 1

    fixture_config = config['fixtures']
    output_dir = Path(args.output_dir or fixture_config['output_dir'])

    try:
        cases = select_cases(args.only) if args.only else build_corpus()
    except KeyError as e:
        print(f"Error: {e.args[0]}", file=sys.stderr)
        return 1

    store = FixtureStore(
        output_dir,
        extension=fixture_config['extension'],
        manifest_name=fixture_config['manifest']
    )
    codec = SnappyCodec()

    print("=" * 70)
    print("Snappy Fixture Generation")
    print("=" * 70)
    print(f"Codec: {codec.name} (python-snappy {codec.version})")
    print(f"Output: {output_dir}")
    print(f"Cases: {len(cases)}")
    print()

    generator = FixtureGenerator(codec, store)
    try:
        generator.run(
            cases=cases,
            verify=args.verify,
            write_manifest=not args.no_manifest,
            show_progress=args.progress
        )
    except FixtureError as e:
        print(f"\nERROR: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
