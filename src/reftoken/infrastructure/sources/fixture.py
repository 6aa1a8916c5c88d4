"""Reference fixture loader.

Parses JSON files describing variables, records, secrets and badge labels
into the in-memory sources used by the demo host.
"""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from reftoken.domain.types.tokens import BadgeKind
from reftoken.logger import get_logger

from .memory import InMemoryLabelDirectory, InMemoryReferenceStore

logger = get_logger("sources.fixture")


class FixtureError(ValueError):
    """Raised when a fixture file is missing or malformed."""


class RecordEntry(BaseModel):
    id: str = Field(..., min_length=1, description="Short identifier")
    title: str = Field(default="", description="Record title")
    full_id: Optional[str] = Field(default=None, description="Full identifier that rewrites to this record")


class SecretEntry(BaseModel):
    ref_id: str = Field(..., min_length=1)
    value: str
    label: Optional[str] = None


class LabelEntry(BaseModel):
    kind: BadgeKind
    id: str = Field(..., min_length=1)
    label: str


class ReferenceFixture(BaseModel):
    """Everything an in-memory host needs to serve completions and labels."""

    variables: list[str] = Field(default_factory=list)
    records: list[RecordEntry] = Field(default_factory=list)
    secrets: list[SecretEntry] = Field(default_factory=list)
    labels: list[LabelEntry] = Field(default_factory=list)

    def build_sources(self) -> tuple[InMemoryReferenceStore, InMemoryLabelDirectory]:
        store = InMemoryReferenceStore(self.variables)
        for record in self.records:
            store.add_record(record.id, record.title, full_id=record.full_id)
        for secret in self.secrets:
            store.add_secret(secret.ref_id, secret.value, secret.label)

        directory = InMemoryLabelDirectory(store)
        for entry in self.labels:
            directory.set_label(entry.kind, entry.id, entry.label)
        return store, directory

    class Config:
        """Pydantic configuration."""

        frozen = True


def load_reference_fixture(fixture_path: str | Path) -> ReferenceFixture:
    """
    Load a reference fixture from a JSON file.

    Args:
        fixture_path: Path to the JSON fixture

    Returns:
        ReferenceFixture: Parsed fixture

    Raises:
        FixtureError: If the file is missing, is not valid JSON, or has the wrong structure
    """
    path = Path(fixture_path)
    if not path.exists():
        error_msg = f"Reference fixture not found: {path}"
        logger.error(error_msg)
        raise FixtureError(error_msg)

    logger.info(f"Loading reference fixture from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        error_msg = f"Invalid JSON in fixture {path}: {e}"
        logger.error(error_msg)
        raise FixtureError(error_msg) from e

    try:
        fixture = ReferenceFixture(**data)
    except (TypeError, ValidationError) as e:
        error_msg = f"Invalid fixture structure in {path}: {e}"
        logger.error(error_msg)
        raise FixtureError(error_msg) from e

    logger.info(
        f"Loaded {len(fixture.variables)} variable(s), {len(fixture.records)} record(s), "
        f"{len(fixture.secrets)} secret(s)"
    )
    return fixture
