"""Event types published by the reference engine."""

import time
from dataclasses import dataclass, field

from reftoken.domain.types.tokens import TextRange, TriggerKind


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class TextRewritten(Event):
    """Transient references were normalized before the text was stored."""

    original: str
    rewritten: str
    cursor: int
    """Cursor offset after the rewrite."""


@dataclass
class SuggestionsShown(Event):
    """A suggestion list was shown, replacing any previous one."""

    trigger_kind: TriggerKind
    query: str
    items: list[str]


@dataclass
class SuggestionsHidden(Event):
    """The suggestion list was closed."""

    reason: str
    """One of ``no-trigger``, ``no-matches``, ``cancelled``, ``committed``."""


@dataclass
class ReferenceCommitted(Event):
    """A suggestion replaced an open trigger."""

    trigger_kind: TriggerKind
    suggestion: str
    text: str
    cursor: int


@dataclass
class EditRejected(Event):
    """An edit touched the interior of a locked span and was not applied."""

    edit: TextRange
    locked: TextRange
