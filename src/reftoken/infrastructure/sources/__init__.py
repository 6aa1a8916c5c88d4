"""In-memory reference sources and their JSON fixture loader."""

from .fixture import FixtureError, ReferenceFixture, load_reference_fixture
from .memory import InMemoryLabelDirectory, InMemoryReferenceStore

__all__ = [
    "FixtureError",
    "InMemoryLabelDirectory",
    "InMemoryReferenceStore",
    "ReferenceFixture",
    "load_reference_fixture",
]
