"""
On-disk fixture store.

A fixture is the raw compressed byte stream, with no wrapper beyond the
codec's own framing, stored at ``<root>/<name>.<extension>``. The store also
writes a JSON manifest describing every fixture so a test orchestrator can
look up expected sizes without rebuilding the inputs.
"""

import hashlib
import json
from pathlib import Path
from typing import List, Optional, Union

from snapfix.errors import FixtureIOError


class FixtureStore:
    """
    Directory of named compressed fixtures.

    Args:
        root: Directory the fixtures live in
        extension: File extension without the leading dot
        manifest_name: File name of the manifest inside ``root``

    Example:
        >>> store = FixtureStore("fixtures")
        >>> store.path_for("hello")
        PosixPath('fixtures/hello.snappy')
    """

    def __init__(
        self,
        root: Union[str, Path],
        extension: str = "snappy",
        manifest_name: str = "manifest.json"
    ):
        self.root = Path(root)
        self.extension = extension.lstrip(".")
        self.manifest_name = manifest_name

    def path_for(self, name: str) -> Path:
        """Deterministic fixture path for a case name."""
        return self.root / f"{name}.{self.extension}"

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest_name

    def write(self, name: str, compressed: bytes) -> Path:
        """
        Writes one fixture, creating the root directory if needed.

        Raises:
            FixtureIOError: If the directory or file cannot be written
        """
        path = self.path_for(name)
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                f.write(compressed)
        except OSError as e:
            raise FixtureIOError(f"Cannot write fixture '{name}' to {path}: {e}") from e
        return path

    def read(self, name: str) -> bytes:
        return read_fixture(self.path_for(name))

    def write_manifest(
        self,
        results: List,
        inputs: dict,
        codec=None,
        order: Optional[List[str]] = None
    ) -> Path:
        """
        Writes ``manifest.json`` describing every generated fixture.

        Entries already in an existing manifest are kept unless this run
        regenerated them, so a partial run never drops fixtures still on disk.

        Args:
            results: FixtureResult records in corpus order
            inputs: Mapping of case name to original input bytes (for digests)
            codec: Optional codec, recorded by name and version
            order: Case names in catalog order; entries are sorted by it,
                unlisted names last

        Returns:
            Path of the written manifest
        """
        manifest = {
            'codec': {
                'name': getattr(codec, 'name', None),
                'version': getattr(codec, 'version', None),
            },
            'extension': self.extension,
            'fixtures': self._merge_entries(results, inputs, order),
        }

        path = self.manifest_path
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                json.dump(manifest, f, indent=2)
        except OSError as e:
            raise FixtureIOError(f"Cannot write manifest to {path}: {e}") from e
        return path

    def load_manifest(self) -> dict:
        try:
            with open(self.manifest_path) as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise FixtureIOError(f"Cannot read manifest {self.manifest_path}: {e}") from e

    def _merge_entries(self, results: List, inputs: dict, order: Optional[List[str]]) -> List[dict]:
        entries = {}
        if self.manifest_path.exists():
            for entry in self.load_manifest().get('fixtures', []):
                entries[entry['name']] = entry

        for result in results:
            entries[result.name] = {
                'name': result.name,
                'file': result.path.name,
                'input_size': result.input_size,
                'compressed_size': result.compressed_size,
                'ratio': result.ratio,
                'sha256': hashlib.sha256(inputs[result.name]).hexdigest(),
            }

        rank = {name: index for index, name in enumerate(order or [])}
        names = sorted(entries, key=lambda name: rank.get(name, len(rank)))
        return [entries[name] for name in names]


def read_fixture(path: Union[str, Path]) -> bytes:
    """
    Reads a whole compressed artifact into memory.

    Raises:
        FixtureIOError: If the file is missing or unreadable
    """
    path = Path(path)
    if not path.exists():
        raise FixtureIOError(f"Cannot open file: {path}")
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise FixtureIOError(f"Cannot read file: {path}: {e}") from e
