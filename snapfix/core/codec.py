"""
Reference codec capability used by the fixture generator and validator.

The generator and validator only ever talk to a ``ReferenceCodec``: four
operations, no other coupling to a compression engine. ``SnappyCodec`` is the
trusted implementation backed by Google's Snappy through python-snappy. Test
doubles subclass ``ReferenceCodec`` directly to exercise harness logic without
a real engine.
"""

from abc import ABC, abstractmethod
from importlib.metadata import version as _dist_version, PackageNotFoundError
from typing import Optional

import snappy


# Snappy encodes the uncompressed length as a little-endian base-128 varint
# of at most five bytes holding a value below 2**32.
MAX_VARINT_BYTES = 5
MAX_UNCOMPRESSED_LENGTH = 0xFFFFFFFF


class ReferenceCodec(ABC):
    """
    Capability interface for a trusted compression codec.

    Implementations must be deterministic for a given codec version:
    compressing the same bytes twice yields identical output.
    """

    name = "reference"

    @property
    def version(self) -> str:
        return "unknown"

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Compresses ``data``. Expected to be total over arbitrary bytes."""

    @abstractmethod
    def is_valid_compressed(self, data: bytes) -> bool:
        """Returns whether ``data`` is a well-formed compressed stream."""

    @abstractmethod
    def uncompressed_length(self, data: bytes) -> Optional[int]:
        """Returns the declared uncompressed length, or None if the header is unparseable."""

    @abstractmethod
    def decompress(self, data: bytes) -> Optional[bytes]:
        """Returns the decoded bytes, or None if the decoder rejects the stream."""


class SnappyCodec(ReferenceCodec):
    """
    Google Snappy raw block format via the python-snappy bindings.

    Example:
        >>> codec = SnappyCodec()
        >>> compressed = codec.compress(b"Hello, World!")
        >>> codec.uncompressed_length(compressed)
        13
    """

    name = "snappy"

    @property
    def version(self) -> str:
        try:
            return _dist_version("python-snappy")
        except PackageNotFoundError:
            return "unknown"

    def compress(self, data: bytes) -> bytes:
        return snappy.compress(bytes(data))

    def is_valid_compressed(self, data: bytes) -> bool:
        if self.uncompressed_length(data) is None:
            return False
        return bool(snappy.isValidCompressed(bytes(data)))

    def uncompressed_length(self, data: bytes) -> Optional[int]:
        return read_varint_length(data)

    def decompress(self, data: bytes) -> Optional[bytes]:
        try:
            return snappy.uncompress(bytes(data))
        except snappy.UncompressError:
            return None


def read_varint_length(data: bytes) -> Optional[int]:
    """
    Parses the varint preamble of a raw Snappy stream.

    Only the header is inspected; the payload is not decoded.

    Args:
        data: Compressed stream

    Returns:
        Declared uncompressed length, or None if the preamble is truncated,
        longer than five bytes, or exceeds 2**32 - 1
    """
    result = 0
    shift = 0

    for index in range(min(len(data), MAX_VARINT_BYTES)):
        byte = data[index]
        result |= (byte & 0x7F) << shift
        if byte < 0x80:
            if result > MAX_UNCOMPRESSED_LENGTH:
                return None
            return result
        shift += 7

    return None
