"""Shared fixtures for reftoken tests."""

import pytest

from reftoken.application.engine import ReferenceEngine, ReferenceSources
from reftoken.config import EngineConfig
from reftoken.domain.events import EventBus
from reftoken.domain.types.tokens import BadgeKind
from reftoken.infrastructure.sources import InMemoryLabelDirectory, InMemoryReferenceStore

FULL_ID = "3f2b9c1e-0000-4000-8000-00000000abc1"


@pytest.fixture
def store() -> InMemoryReferenceStore:
    store = InMemoryReferenceStore(variables=["FOO", "FOOBAR", "HOME", "PATH"])
    store.add_record("abc123", "Example", full_id=FULL_ID)
    store.add_record("abd456", "Another example")
    store.add_record("xyz789", "Nightly export")
    store.add_secret("k7f2a9c1", "s3cr3t", label="prod-db")
    store.add_secret("m1n2b3v4", "hunter2", label="staging-db")
    return store


@pytest.fixture
def labels(store: InMemoryReferenceStore) -> InMemoryLabelDirectory:
    directory = InMemoryLabelDirectory(store)
    directory.set_label(BadgeKind.PAGE, "p1", "Runbook")
    directory.set_label(BadgeKind.COMMAND, "c1", "Deploy")
    return directory


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def engine(store: InMemoryReferenceStore, labels: InMemoryLabelDirectory, event_bus: EventBus) -> ReferenceEngine:
    sources = ReferenceSources(variables=store, ids=store, uuids=store, secrets=store, labels=labels)
    return ReferenceEngine(sources, config=EngineConfig(), event_bus=event_bus)
