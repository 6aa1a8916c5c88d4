"""
Strategy interfaces for reference completions.

Each trigger family gets its own small strategy so filtering rules stay
focused and testable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from reftoken.domain.types.tokens import Trigger, TriggerKind


@dataclass(slots=True)
class CompletionRequest:
    """Trigger kind and partial query for one suggestion pass."""

    kind: TriggerKind
    query: str

    @classmethod
    def from_trigger(cls, trigger: Trigger) -> "CompletionRequest":
        return cls(trigger.kind, trigger.query)

    @property
    def folded_query(self) -> str:
        """Query folded for case-insensitive comparison."""
        return self.query.casefold()


class CompletionStrategy(Protocol):
    """Contract implemented by all completion strategies."""

    def can_handle(self, request: CompletionRequest) -> bool:
        """Return ``True`` when this strategy should produce candidates."""

        ...

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        """Return matching suggestions in candidate-source order."""

        ...
