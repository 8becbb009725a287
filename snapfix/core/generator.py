"""
Fixture generation: compress every corpus case with the reference codec and
persist the result under a deterministic, name-keyed path.

Generation is all-or-nothing. The first compression or write failure aborts
the run with an error naming the case; a partial corpus is never reported as
complete.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from tqdm import tqdm

from snapfix.core.codec import ReferenceCodec
from snapfix.core.corpus import TestCase, build_corpus, corpus_names
from snapfix.core.validator import FixtureValidator
from snapfix.errors import CodecError, FixtureError
from snapfix.io.fixtures import FixtureStore
from snapfix.utils.metrics import compression_factor, format_factor


@dataclass(frozen=True)
class FixtureResult:
    """Summary of one written fixture."""

    name: str
    input_size: int
    compressed_size: int
    ratio: Optional[float]
    path: Path


class FixtureGenerator:
    """
    Writes one fixture per corpus case.

    Args:
        codec: Reference codec whose ``compress`` produces the fixtures
        store: Destination fixture store
        log: Callable receiving console lines (default: print)

    Example:
        >>> generator = FixtureGenerator(SnappyCodec(), FixtureStore("fixtures"))
        >>> results = generator.run()
    """

    def __init__(
        self,
        codec: ReferenceCodec,
        store: FixtureStore,
        log: Callable[[str], None] = print
    ):
        self.codec = codec
        self.store = store
        self.log = log

    def generate_case(self, case: TestCase) -> FixtureResult:
        """
        Compresses and writes a single case.

        Raises:
            CodecError: If the codec fails to compress the input
            FixtureIOError: If the fixture cannot be written
        """
        try:
            compressed = self.codec.compress(case.data)
        except Exception as e:
            raise CodecError(f"Compression failed for case '{case.name}': {e}") from e

        path = self.store.write(case.name, compressed)

        return FixtureResult(
            name=case.name,
            input_size=case.size,
            compressed_size=len(compressed),
            ratio=compression_factor(case.size, len(compressed)),
            path=path
        )

    def verify_case(self, case: TestCase, result: FixtureResult):
        """
        Round-trips a written fixture through the validator with the original input.

        Raises:
            FixtureError: The failing stage's error, its message prefixed with
                the case name
        """
        validator = FixtureValidator(self.codec, log=lambda line: None)
        try:
            validator.validate(result.path, case.size, expected_data=case.data)
        except FixtureError as e:
            e.args = (f"Verification failed for case '{case.name}': {e}",) + e.args[1:]
            raise

    def run(
        self,
        cases: Optional[List[TestCase]] = None,
        verify: bool = False,
        write_manifest: bool = True,
        show_progress: bool = False
    ) -> List[FixtureResult]:
        """
        Generates fixtures for every case, in order.

        Args:
            cases: Cases to generate (default: the full corpus)
            verify: Validate each fixture against its input after writing
            write_manifest: Write ``manifest.json`` next to the fixtures
            show_progress: Show a tqdm progress bar over the cases

        Returns:
            One FixtureResult per case, in corpus order

        Raises:
            FixtureError: On the first failing case; nothing after it is written
        """
        if cases is None:
            cases = build_corpus()

        self.log(f"Generating {self.codec.name} test data in {self.store.root}...")
        self.log("")

        iterator = cases
        if show_progress:
            iterator = tqdm(cases, desc="Generating", unit="case")

        results = []
        for case in iterator:
            result = self.generate_case(case)
            if verify:
                self.verify_case(case, result)
            results.append(result)
            self._print_result(result, verified=verify)

        if write_manifest:
            inputs = {case.name: case.data for case in cases}
            manifest_path = self.store.write_manifest(
                results, inputs, codec=self.codec, order=corpus_names()
            )
            self.log(f"Manifest written to: {manifest_path}")

        self.log("Test data generation complete!")
        return results

    def _print_result(self, result: FixtureResult, verified: bool = False):
        self.log(f"{result.name}:")
        self.log(f"  Input size: {result.input_size:,} bytes")
        self.log(f"  Compressed size: {result.compressed_size:,} bytes")
        self.log(f"  Ratio: {format_factor(result.ratio)}")
        self.log(f"  Saved to: {result.path}")
        if verified:
            self.log("  ✓ Round-trip verified")
        self.log("")
