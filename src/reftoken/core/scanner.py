"""
Token scanner: turns a text buffer into sorted, non-overlapping spans.
"""

from __future__ import annotations

from collections.abc import Iterable

from reftoken.domain.types.tokens import Span, TokenKind
from reftoken.logger import get_logger

from .grammar import DEFAULT_GRAMMAR, TokenGrammar

logger = get_logger("scanner")


class TokenScanner:
    """Applies every grammar pattern over the whole text and merges the matches.

    When matches from different families overlap, the earlier-starting one
    wins, then the longer one; the loser is dropped.
    """

    def __init__(self, grammar: TokenGrammar = DEFAULT_GRAMMAR) -> None:
        self._grammar = grammar

    @property
    def grammar(self) -> TokenGrammar:
        return self._grammar

    def scan(self, text: str, kinds: Iterable[TokenKind] | None = None) -> list[Span]:
        """Return the spans found in ``text``.

        Args:
            text: Buffer contents
            kinds: Restrict the scan to these token kinds (all kinds when None)

        Returns:
            Spans sorted by start offset, never overlapping
        """
        if not text:
            return []

        wanted = set(kinds) if kinds is not None else None
        candidates: list[Span] = []
        for pattern in self._grammar.patterns:
            if wanted is not None and pattern.kind not in wanted:
                continue
            if pattern.compiled is None:
                continue
            for match in pattern.compiled.finditer(text):
                candidates.append(Span(pattern.kind, match.start(), match.end(), match.group(1)))

        candidates.sort(key=lambda span: (span.start, -(span.end - span.start)))

        spans: list[Span] = []
        last_end = -1
        for span in candidates:
            if span.start < last_end:
                logger.debug(f"Dropping {span.kind.value} at {span.start}: overlaps an earlier span")
                continue
            spans.append(span)
            last_end = span.end
        return spans

    def locked_spans(self, text: str) -> list[Span]:
        """Spans of finalized secret references only."""
        return self.scan(text, kinds=(TokenKind.LOCKED_REF,))

