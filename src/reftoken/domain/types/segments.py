"""Display segments produced from canonical text."""

from dataclasses import dataclass
from typing import Optional, Union

from reftoken.domain.types.tokens import BadgeKind

__all__ = ["PlainSegment", "BadgeSegment", "Segment"]


@dataclass(frozen=True, slots=True)
class PlainSegment:
    """Run of plain text shown as-is."""

    text: str


@dataclass(frozen=True, slots=True)
class BadgeSegment:
    """A reference rendered as a badge.

    The label is display-only; ``canonical`` never includes it.
    """

    kind: BadgeKind
    ref_id: str
    label: Optional[str] = None
    json_path: Optional[str] = None

    @property
    def canonical(self) -> str:
        """Storage form: ```kind@id``` or ```kind@id|path```."""
        if self.json_path is not None:
            return f"`{self.kind.value}@{self.ref_id}|{self.json_path}`"
        return f"`{self.kind.value}@{self.ref_id}`"

    @property
    def display_text(self) -> str:
        """Badge caption: ``kind#label`` when resolved, ``kind@id`` otherwise."""
        if self.label is None:
            text = f"{self.kind.value}@{self.ref_id}"
        else:
            text = f"{self.kind.value}#{self.label}"
        if self.json_path:
            return f"{text}|{self.json_path}"
        return text


Segment = Union[PlainSegment, BadgeSegment]
