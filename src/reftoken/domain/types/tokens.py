"""Token-related domain types.

All offsets are ``str`` indices into the buffer the host owns. Spans are a
transient view over the text: they are recomputed on every mutation and never
persisted.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ["TokenKind", "TriggerKind", "BadgeKind", "Span", "TextRange", "Trigger"]


class TokenKind(Enum):
    """Kinds of tokens recognized in canonical text."""

    VARIABLE_REF = "variable_ref"
    ID_REF = "id_ref"
    UUID_REF = "uuid_ref"
    VAR_REF = "var_ref"
    SECURE_INPUT_REF = "secure_input_ref"
    LOCKED_REF = "locked_ref"
    BADGE_SECURE = "badge_secure"
    BADGE_PAGE = "badge_page"
    BADGE_VAR = "badge_var"
    BADGE_COMMAND = "badge_command"

    @property
    def is_badge(self) -> bool:
        return self.name.startswith("BADGE_")


class TriggerKind(Enum):
    """Open trigger kinds, in detection priority order."""

    ID_REF = "id_ref"
    UUID_REF = "uuid_ref"
    VAR_REF = "var_ref"
    SECURE_INPUT_REF = "secure_input_ref"
    VARIABLE_REF = "variable_ref"


class BadgeKind(str, Enum):
    """Badge kinds as they appear in ``kind@id`` storage form."""

    SECURE = "secure"
    PAGE = "page"
    VAR = "var"
    COMMAND = "command"


@dataclass(frozen=True, slots=True)
class TextRange:
    """Half-open range ``[start, end)``."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def covers(self, other: "TextRange") -> bool:
        """Return True when this range contains all of ``other``."""
        return self.start <= other.start and self.end >= other.end


@dataclass(frozen=True, slots=True)
class Span:
    """A typed token occurrence found by one scan pass."""

    kind: TokenKind
    start: int
    end: int
    payload: str

    @property
    def range(self) -> TextRange:
        return TextRange(self.start, self.end)


@dataclass(frozen=True, slots=True)
class Trigger:
    """The trigger currently open at the cursor.

    Attributes:
        kind: Which marker family opened the trigger
        marker_start: Offset of the first character of the marker
        query_start: Offset right after the marker
        query: Text typed between ``query_start`` and the cursor
    """

    kind: TriggerKind
    marker_start: int
    query_start: int
    query: str

    @property
    def cursor(self) -> int:
        return self.query_start + len(self.query)
