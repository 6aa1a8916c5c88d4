"""
Record completion strategy for ``{id:`` triggers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from reftoken.domain.candidates import IdCandidate
from reftoken.domain.types.tokens import TriggerKind
from reftoken.logger import get_logger

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("completion.id")


class IdCompletionStrategy(CompletionStrategy):
    """Matches records whose id starts with, or whose title contains, the query."""

    def __init__(self, candidate_provider: Callable[[], Sequence[IdCandidate]]) -> None:
        self._candidate_provider = candidate_provider

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.kind is TriggerKind.ID_REF

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        query = request.folded_query
        candidates = list(self._candidate_provider())
        logger.debug(f"IdCompletionStrategy triggered (query={query!r}, total={len(candidates)})")
        return [
            candidate.to_suggestion()
            for candidate in candidates
            if not query or candidate.id.casefold().startswith(query) or query in candidate.title.casefold()
        ]
