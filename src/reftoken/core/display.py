"""
Display conversion between canonical text and badge segments.

Canonical text stores references as ```kind@id``` (or ```command@id|path```).
Labels are resolved on demand for display and never written back:
``to_canonical(to_display(text, labels)) == text`` whatever the label source
returns.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from reftoken.domain.protocols import RecordLabelSource
from reftoken.domain.types.segments import BadgeSegment, PlainSegment, Segment
from reftoken.domain.types.tokens import BadgeKind, Span
from reftoken.logger import get_logger

from .grammar import BADGE_KIND_BY_TOKEN
from .scanner import TokenScanner

logger = get_logger("display")


class DisplayConverter:
    """Bidirectional transform between canonical text and display segments."""

    def __init__(self, scanner: TokenScanner) -> None:
        self._scanner = scanner

    def to_display(self, text: str, labels: Optional[RecordLabelSource] = None) -> list[Segment]:
        """Split ``text`` into plain runs and badges with resolved labels."""
        segments: list[Segment] = []
        position = 0
        for span in self._scanner.scan(text, kinds=BADGE_KIND_BY_TOKEN.keys()):
            if span.start > position:
                segments.append(PlainSegment(text[position : span.start]))
            segments.append(self._badge(span, labels))
            position = span.end
        if position < len(text):
            segments.append(PlainSegment(text[position:]))
        return segments

    @staticmethod
    def to_canonical(segments: Sequence[Segment]) -> str:
        """Serialize segments back to storage form, discarding labels."""
        parts: list[str] = []
        for segment in segments:
            if isinstance(segment, BadgeSegment):
                parts.append(segment.canonical)
            else:
                parts.append(segment.text)
        return "".join(parts)

    def to_display_string(self, text: str, labels: Optional[RecordLabelSource] = None) -> str:
        """Flatten badges to ``[label]`` (``[id]`` when unresolved) for one-line previews."""
        parts: list[str] = []
        for segment in self.to_display(text, labels):
            if isinstance(segment, BadgeSegment):
                parts.append(f"[{segment.label if segment.label is not None else segment.ref_id}]")
            else:
                parts.append(segment.text)
        return "".join(parts)

    def _badge(self, span: Span, labels: Optional[RecordLabelSource]) -> BadgeSegment:
        kind = BADGE_KIND_BY_TOKEN[span.kind]
        ref_id, json_path = span.payload, None
        if kind is BadgeKind.COMMAND and "|" in ref_id:
            ref_id, json_path = ref_id.split("|", 1)
        return BadgeSegment(kind, ref_id, self._resolve(labels, kind, ref_id), json_path)

    @staticmethod
    def _resolve(labels: Optional[RecordLabelSource], kind: BadgeKind, ref_id: str) -> Optional[str]:
        if labels is None:
            return None
        try:
            return labels.resolve_label(kind, ref_id) or None
        except Exception:
            logger.exception(f"Label lookup failed for {kind.value}@{ref_id}")
            return None
