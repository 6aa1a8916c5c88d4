"""
Insertion committer: replaces an open trigger with a finalized reference.
"""

from __future__ import annotations

from dataclasses import dataclass

from reftoken.core.grammar import MARKER_BY_KIND
from reftoken.core.secure import locked_reference
from reftoken.domain.types.tokens import Trigger, TriggerKind
from reftoken.logger import get_logger

logger = get_logger("completion.applier")


@dataclass(slots=True)
class ApplyResult:
    """Result of committing a suggestion."""

    text: str
    cursor: int
    applied: bool = True


def _leading_segment(suggestion: str) -> str:
    """Part of ``"id: title"`` before the first ``:``."""
    return suggestion.split(":", 1)[0].strip()


class InsertionCommitter:
    """Encapsulates the logic for injecting a chosen suggestion into the text."""

    def commit(self, text: str, trigger: Trigger, cursor: int, suggestion: str) -> ApplyResult:
        """Replace ``text[trigger.query_start:cursor]`` with the finalized reference.

        The marker is re-checked against the current text, and the text between
        it and the cursor must still be an open query. If either no longer holds
        (the buffer or caret changed under the suggestion list) nothing is applied.
        """
        marker = MARKER_BY_KIND[trigger.kind]
        marker_start = trigger.query_start - len(marker.marker)
        if (
            marker_start < 0
            or not trigger.query_start <= cursor <= len(text)
            or text[marker_start : trigger.query_start] != marker.marker
        ):
            logger.info(f"Commit skipped: {trigger.kind.value} marker no longer at {marker_start}")
            return ApplyResult(text=text, cursor=min(cursor, len(text)), applied=False)
        if not marker.is_open(text[trigger.query_start : cursor]):
            logger.info(f"Commit skipped: {trigger.kind.value} query at {trigger.query_start} is closed")
            return ApplyResult(text=text, cursor=cursor, applied=False)

        replacement = self._replacement(trigger.kind, suggestion)
        new_text = f"{text[:marker_start]}{replacement}{text[cursor:]}"
        new_cursor = marker_start + len(replacement)
        logger.info(f"Committed {trigger.kind.value} reference {replacement!r} at {marker_start}")
        return ApplyResult(text=new_text, cursor=new_cursor)

    @staticmethod
    def _replacement(kind: TriggerKind, suggestion: str) -> str:
        if kind is TriggerKind.ID_REF:
            return f"{{id:{_leading_segment(suggestion)}}}"
        if kind is TriggerKind.UUID_REF:
            return f"{{uuid:{_leading_segment(suggestion)}}}"
        if kind is TriggerKind.VAR_REF:
            return f"{{var:{suggestion}}}"
        if kind is TriggerKind.SECURE_INPUT_REF:
            return locked_reference(suggestion)
        return f"${suggestion}"
