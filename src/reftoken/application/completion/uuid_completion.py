"""
Full-identifier completion strategy for ``{uuid:`` triggers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from reftoken.domain.candidates import UuidCandidate
from reftoken.domain.types.tokens import TriggerKind

from .strategy import CompletionRequest, CompletionStrategy


class UuidCompletionStrategy(CompletionStrategy):
    """Matches pairs where either the full or the short id starts with the query."""

    def __init__(self, candidate_provider: Callable[[], Sequence[UuidCandidate]]) -> None:
        self._candidate_provider = candidate_provider

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.kind is TriggerKind.UUID_REF

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        query = request.folded_query
        return [
            candidate.to_suggestion()
            for candidate in self._candidate_provider()
            if not query
            or candidate.full_id.casefold().startswith(query)
            or candidate.short_id.casefold().startswith(query)
        ]
