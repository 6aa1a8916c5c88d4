"""
Trigger detection: which reference (if any) is being typed at the cursor.
"""

from __future__ import annotations

from typing import Optional

from reftoken.domain.types.tokens import Trigger
from reftoken.logger import get_logger

from .grammar import TRIGGER_MARKERS, TriggerMarker

logger = get_logger("triggers")


class TriggerDetector:
    """Classifies the cursor context.

    For each marker family the right-most marker at or before the cursor is
    taken; families are then tried in priority order (``{id:``, ``{uuid:``,
    ``{var:``, ``{secure:``, ``$``) and the first one whose partial query is
    still open wins. A brace query is open while it has no ``}`` and,
    except for ``{secure:``, no whitespace. A ``$`` query
    is open while it has no whitespace and none of ``()[]{}'"```.
    """

    def __init__(self, markers: tuple[TriggerMarker, ...] = TRIGGER_MARKERS) -> None:
        self._markers = markers

    def detect(self, text: str, cursor: int) -> Optional[Trigger]:
        """Return the open trigger at ``cursor``, or None.

        Never raises: a cursor at 0 or past the end of the text means no trigger.
        """
        if cursor <= 0 or cursor > len(text):
            return None

        before_cursor = text[:cursor]
        for marker in self._markers:
            marker_start = before_cursor.rfind(marker.marker)
            if marker_start == -1:
                continue
            query_start = marker_start + len(marker.marker)
            query = before_cursor[query_start:]
            if marker.is_open(query):
                logger.debug(f"Trigger {marker.kind.value} open at {marker_start} (query={query!r})")
                return Trigger(marker.kind, marker_start, query_start, query)
        return None
