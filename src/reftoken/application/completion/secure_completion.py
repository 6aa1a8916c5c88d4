"""
Secret label completion for ``{secure:`` triggers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from reftoken.domain.types.tokens import TriggerKind

from .strategy import CompletionRequest, CompletionStrategy


class SecureLabelCompletionStrategy(CompletionStrategy):
    """Offers existing secret labels; picking one locks the reference."""

    def __init__(self, label_provider: Callable[[], Sequence[str]]) -> None:
        self._label_provider = label_provider

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.kind is TriggerKind.SECURE_INPUT_REF

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        query = request.folded_query
        return [label for label in self._label_provider() if not query or label.casefold().startswith(query)]
