"""
snappy-fixtures: shared Snappy test vectors for cross-implementation testing.

Generates a fixed corpus of named input/compressed-output pairs with the
reference Snappy codec, and validates compressed artifacts produced by an
independent implementation against expected sizes and content.
"""

__version__ = "0.1.0"
