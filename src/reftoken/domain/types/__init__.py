"""Shared domain types."""

from reftoken.domain.types.tokens import (
    BadgeKind,
    Span,
    TextRange,
    TokenKind,
    Trigger,
    TriggerKind,
)
from reftoken.domain.types.segments import BadgeSegment, PlainSegment, Segment

__all__ = [
    "BadgeKind",
    "BadgeSegment",
    "PlainSegment",
    "Segment",
    "Span",
    "TextRange",
    "TokenKind",
    "Trigger",
    "TriggerKind",
]
