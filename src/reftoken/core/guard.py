"""
Protected span guard: locked secret references edit and select as a unit.
"""

from __future__ import annotations

from typing import Optional

from reftoken.domain.types.tokens import Span, TextRange
from reftoken.logger import get_logger

from .scanner import TokenScanner

logger = get_logger("guard")


def edit_range_between(old: str, new: str, cursor: Optional[int] = None) -> Optional[TextRange]:
    """Infer the range of ``old`` that was replaced to produce ``new``.

    Without ``cursor`` the longest common prefix is taken first, then the
    longest common suffix of what remains. With ``cursor`` (the caret in
    ``new`` after the change) the suffix is taken first and stops at the
    cursor, so an edit that could sit at several places in a run of equal
    characters is anchored where the caret is. Returns None when the two
    snapshots are identical.
    """
    if old == new:
        return None

    limit = min(len(old), len(new))
    if cursor is None:
        prefix = _common_prefix(old, new, limit)
        suffix = _common_suffix(old, new, limit - prefix)
    else:
        cursor = max(0, min(cursor, len(new)))
        suffix = _common_suffix(old, new, min(limit, len(new) - cursor))
        prefix = _common_prefix(old, new, limit - suffix)
    return TextRange(prefix, len(old) - suffix)


def _common_prefix(old: str, new: str, limit: int) -> int:
    prefix = 0
    while prefix < limit and old[prefix] == new[prefix]:
        prefix += 1
    return prefix


def _common_suffix(old: str, new: str, limit: int) -> int:
    suffix = 0
    while suffix < limit and old[len(old) - 1 - suffix] == new[len(new) - 1 - suffix]:
        suffix += 1
    return suffix


class ProtectedSpanGuard:
    """Decides whether an edit may touch the text around locked spans."""

    def __init__(self, scanner: TokenScanner) -> None:
        self._scanner = scanner

    def blocking_span(self, edit: TextRange, text: str) -> Optional[Span]:
        """Return the first locked span the edit would cut into, or None."""
        for span in self._scanner.locked_spans(text):
            if _cuts_into(edit, span):
                return span
        return None

    def blocking_change(self, old: str, new: str, cursor: Optional[int] = None) -> Optional[tuple[TextRange, Span]]:
        """Check a whole-value change reported by a host.

        The change is explained both anchored at ``cursor`` and prefix-first;
        it is blocked only when every explanation cuts into a locked span.
        Returns the first blocked edit with its span, or None when allowed.
        """
        blocked: Optional[tuple[TextRange, Span]] = None
        for edit in (edit_range_between(old, new, cursor), edit_range_between(old, new)):
            if edit is None:
                return None
            span = self.blocking_span(edit, old)
            if span is None:
                return None
            blocked = blocked or (edit, span)
        return blocked

    def can_apply(self, edit: TextRange, text: str) -> bool:
        """Return False when ``edit`` overlaps a locked span without covering it.

        A zero-length edit (an insertion) is rejected only when it falls
        strictly inside a locked span; inserting at either boundary is fine.
        Deleting or replacing a whole span is always allowed.
        """
        span = self.blocking_span(edit, text)
        if span is not None:
            logger.info(f"Rejected edit [{edit.start}, {edit.end}) inside locked span [{span.start}, {span.end})")
            return False
        return True

    def expand_selection(self, cursor: int, text: str) -> Optional[TextRange]:
        """Full range of the locked span the cursor sits strictly inside, if any."""
        for span in self._scanner.locked_spans(text):
            if span.start < cursor < span.end:
                return span.range
            if span.start >= cursor:
                break
        return None


def _cuts_into(edit: TextRange, span: Span) -> bool:
    if edit.is_empty:
        return span.start < edit.start < span.end
    overlaps = max(edit.start, span.start) < min(edit.end, span.end)
    return overlaps and not edit.covers(span.range)
