"""
Variable name completion for ``$`` and ``{var:`` triggers.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from reftoken.domain.types.tokens import TriggerKind

from .strategy import CompletionRequest, CompletionStrategy


class VariableCompletionStrategy(CompletionStrategy):
    """Prefix-matches known variable names."""

    def __init__(self, name_provider: Callable[[], Sequence[str]]) -> None:
        self._name_provider = name_provider

    def can_handle(self, request: CompletionRequest) -> bool:
        return request.kind in (TriggerKind.VARIABLE_REF, TriggerKind.VAR_REF)

    def get_candidates(self, request: CompletionRequest) -> list[str]:
        query = request.folded_query
        return [name for name in self._name_provider() if not query or name.casefold().startswith(query)]
