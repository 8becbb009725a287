"""
Size metrics reported for fixtures and validated artifacts.

Ratios are reported as ``uncompressed / compressed`` ("4.00x" means the
compressed form is a quarter of the original). A zero denominator yields
``None`` so callers print ``n/a`` instead of dividing by zero.
"""

from typing import Optional


def compression_factor(
    original_size: int,
    compressed_size: int
) -> Optional[float]:
    """
    Computes compression factor (original size over compressed size).

    Args:
        original_size: Size of uncompressed data in bytes
        compressed_size: Size of compressed data in bytes

    Returns:
        Compression factor (e.g., 4.0 means 4x size reduction), or None when
        the compressed size is zero

    Example:
        >>> compression_factor(original_size=10000, compressed_size=2500)
        4.0
    """
    if compressed_size == 0:
        return None

    return original_size / compressed_size


def format_factor(factor: Optional[float]) -> str:
    """Formats a compression factor for console output."""
    if factor is None:
        return "n/a"
    return f"{factor:.2f}x"
