"""
Token grammar for canonical text.

Patterns are compiled once at import time. A pattern that fails to compile is
kept with ``compiled = None`` so every pass that uses it can skip it and pass
the text through unchanged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from reftoken.domain.types.tokens import BadgeKind, TokenKind, TriggerKind
from reftoken.logger import get_logger

logger = get_logger("grammar")

LOCK_GLYPH = "\N{LOCK}"

# Characters that end a ``$NAME`` reference (besides whitespace).
VARIABLE_TERMINATORS = "()[]{}'\"`"


@dataclass(slots=True)
class TokenPattern:
    """One entry of the grammar: a token kind and its regular expression.

    Group 1 of the expression captures the payload.
    """

    kind: TokenKind
    source: str
    compiled: Optional[re.Pattern[str]] = field(default=None, init=False)

    def __post_init__(self) -> None:
        try:
            self.compiled = re.compile(self.source)
        except re.error as exc:
            logger.warning(f"Pattern for {self.kind.value} failed to compile and will be skipped: {exc}")
            self.compiled = None


@dataclass(frozen=True, slots=True)
class TriggerMarker:
    """Opening marker of a trigger family."""

    kind: TriggerKind
    marker: str
    closing: str
    allows_whitespace: bool = False
    forbidden: str = "}"

    def is_open(self, query: str) -> bool:
        """Return True while ``query`` can still grow into a token of this family."""
        if any(ch in self.forbidden for ch in query):
            return False
        if not self.allows_whitespace and any(ch.isspace() for ch in query):
            return False
        return True


class TokenGrammar:
    """The set of token patterns, in precedence order."""

    def __init__(self, patterns: list[TokenPattern]) -> None:
        self._patterns = list(patterns)
        self._by_kind = {pattern.kind: pattern for pattern in self._patterns}

    @property
    def patterns(self) -> list[TokenPattern]:
        return list(self._patterns)

    def pattern_for(self, kind: TokenKind) -> Optional[re.Pattern[str]]:
        """Compiled pattern for ``kind``, or None if missing or uncompilable."""
        pattern = self._by_kind.get(kind)
        return pattern.compiled if pattern else None


def _badge(kind: TokenKind, badge: BadgeKind, with_path: bool = False) -> TokenPattern:
    if with_path:
        return TokenPattern(kind, rf"`{badge.value}@([^`]+(?:\|[^`]+)?)`")
    return TokenPattern(kind, rf"`{badge.value}@([^`]+)`")


DEFAULT_GRAMMAR = TokenGrammar(
    [
        TokenPattern(TokenKind.VARIABLE_REF, r"\$([A-Za-z_][A-Za-z0-9_]*)"),
        TokenPattern(TokenKind.ID_REF, r"\{id:([^}]+)\}"),
        TokenPattern(TokenKind.UUID_REF, r"\{uuid:([^}]+)\}"),
        TokenPattern(TokenKind.VAR_REF, r"\{var:([^}]+)\}"),
        TokenPattern(TokenKind.SECURE_INPUT_REF, r"\{secure:([^}]+)\}"),
        TokenPattern(TokenKind.LOCKED_REF, rf"\{{{LOCK_GLYPH}:([^}}]+)\}}"),
        _badge(TokenKind.BADGE_SECURE, BadgeKind.SECURE),
        _badge(TokenKind.BADGE_PAGE, BadgeKind.PAGE),
        _badge(TokenKind.BADGE_VAR, BadgeKind.VAR),
        _badge(TokenKind.BADGE_COMMAND, BadgeKind.COMMAND, with_path=True),
    ]
)

BADGE_KIND_BY_TOKEN: dict[TokenKind, BadgeKind] = {
    TokenKind.BADGE_SECURE: BadgeKind.SECURE,
    TokenKind.BADGE_PAGE: BadgeKind.PAGE,
    TokenKind.BADGE_VAR: BadgeKind.VAR,
    TokenKind.BADGE_COMMAND: BadgeKind.COMMAND,
}

# ``{secure#label:value}``: plaintext entered together with the label to file it under.
LABELED_SECURE_INPUT = TokenPattern(TokenKind.SECURE_INPUT_REF, r"\{secure#([^:}]+):([^}]+)\}")

# Detection priority order; ``$`` also stops at whitespace and VARIABLE_TERMINATORS.
TRIGGER_MARKERS: tuple[TriggerMarker, ...] = (
    TriggerMarker(TriggerKind.ID_REF, "{id:", "}"),
    TriggerMarker(TriggerKind.UUID_REF, "{uuid:", "}"),
    TriggerMarker(TriggerKind.VAR_REF, "{var:", "}"),
    TriggerMarker(TriggerKind.SECURE_INPUT_REF, "{secure:", "}", allows_whitespace=True),
    TriggerMarker(TriggerKind.VARIABLE_REF, "$", "", forbidden=VARIABLE_TERMINATORS),
)

MARKER_BY_KIND: dict[TriggerKind, TriggerMarker] = {marker.kind: marker for marker in TRIGGER_MARKERS}
