"""
Suggestion engine: routes a trigger to the strategy that serves it.
"""

from __future__ import annotations

from collections.abc import Sequence

from reftoken.domain.types.tokens import Trigger, TriggerKind
from reftoken.logger import get_logger

from .strategy import CompletionRequest, CompletionStrategy

logger = get_logger("completion.orchestrator")

DEFAULT_MAX_SUGGESTIONS = 10


class SuggestionEngine:
    """Selects the first strategy able to serve the request and caps its output.

    Candidate-source order is preserved; results are never re-sorted. A
    strategy that raises yields an empty list so typing is never blocked.
    """

    def __init__(
        self,
        strategies: Sequence[CompletionStrategy],
        max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    ) -> None:
        self._strategies = list(strategies)
        self._max_suggestions = max_suggestions

    @property
    def max_suggestions(self) -> int:
        return self._max_suggestions

    def suggest(self, kind: TriggerKind, query: str) -> list[str]:
        request = CompletionRequest(kind, query)
        for strategy in self._strategies:
            try:
                if strategy.can_handle(request):
                    logger.debug(f"Strategy {strategy.__class__.__name__} selected for {kind.value}")
                    return strategy.get_candidates(request)[: self._max_suggestions]
            except Exception:
                logger.exception(f"Completion strategy {strategy.__class__.__name__} failed")
                return []
        logger.debug(f"No completion strategy handles {kind.value}")
        return []

    def suggest_for(self, trigger: Trigger | None) -> list[str]:
        if trigger is None:
            return []
        return self.suggest(trigger.kind, trigger.query)
