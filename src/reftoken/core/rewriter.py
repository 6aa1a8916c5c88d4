"""
Reference rewriter: ``{uuid:FULL}`` becomes ``{id:SHORT}`` as soon as a mapping exists.
"""

from __future__ import annotations

from dataclasses import dataclass

from reftoken.domain.protocols import UuidToShortIdResolver
from reftoken.domain.types.tokens import TokenKind
from reftoken.logger import get_logger

from .grammar import DEFAULT_GRAMMAR, TokenGrammar

logger = get_logger("rewriter")


@dataclass(frozen=True, slots=True)
class Replacement:
    """One rewritten occurrence, in pre-rewrite offsets."""

    start: int
    end: int
    text: str


@dataclass(frozen=True, slots=True)
class RewriteResult:
    text: str
    cursor: int
    replacements: tuple[Replacement, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.replacements)


def map_cursor(cursor: int, replacements: tuple[Replacement, ...]) -> int:
    """Translate a pre-rewrite cursor offset into the rewritten text.

    Replacements entirely before the cursor shift it by their length delta,
    replacements after it leave it alone, and a cursor that was inside a
    replaced token lands right after the new token. With one replacement
    before the cursor this is ``max(0, cursor - (old_len - new_len))``.
    """
    shift = 0
    for replacement in replacements:
        if replacement.end <= cursor:
            shift += len(replacement.text) - (replacement.end - replacement.start)
        elif replacement.start < cursor:
            return replacement.start + shift + len(replacement.text)
        else:
            break
    return max(0, cursor + shift)


class ReferenceRewriter:
    """Normalizes transient full-identifier references to their short form."""

    def __init__(self, resolver: UuidToShortIdResolver, grammar: TokenGrammar = DEFAULT_GRAMMAR) -> None:
        self._resolver = resolver
        self._pattern = grammar.pattern_for(TokenKind.UUID_REF)

    def rewrite(self, text: str) -> str:
        """Return ``text`` with every resolvable ``{uuid:...}`` replaced."""
        return self.rewrite_with_cursor(text, len(text)).text

    def rewrite_with_cursor(self, text: str, cursor: int) -> RewriteResult:
        """Rewrite ``text`` and carry ``cursor`` over to the new text."""
        if self._pattern is None or "{uuid:" not in text:
            return RewriteResult(text, cursor)

        replacements: list[Replacement] = []
        for match in self._pattern.finditer(text):
            full_id = match.group(1)
            short_id = self._resolve(full_id)
            if short_id:
                replacements.append(Replacement(match.start(), match.end(), f"{{id:{short_id}}}"))

        if not replacements:
            return RewriteResult(text, cursor)

        pieces: list[str] = []
        position = 0
        for replacement in replacements:
            pieces.append(text[position : replacement.start])
            pieces.append(replacement.text)
            position = replacement.end
        pieces.append(text[position:])

        rewritten = "".join(pieces)
        frozen = tuple(replacements)
        new_cursor = min(map_cursor(cursor, frozen), len(rewritten))
        logger.debug(f"Rewrote {len(frozen)} full-id reference(s); cursor {cursor} -> {new_cursor}")
        return RewriteResult(rewritten, new_cursor, frozen)

    def _resolve(self, full_id: str) -> str | None:
        try:
            return self._resolver.short_id_for(full_id)
        except Exception:
            logger.exception(f"Short-id lookup failed for {full_id!r}")
            return None
