"""Fixture file storage."""

from .fixtures import FixtureStore, read_fixture

__all__ = ["FixtureStore", "read_fixture"]
