"""Engine notifications.

Example:
    ```python
    from reftoken.domain.events import EventBus, SuggestionsShown

    bus = EventBus()
    bus.subscribe(SuggestionsShown, lambda event: print(event.items))
    ```
"""

from .bus import EventBus
from .types import (
    EditRejected,
    Event,
    ReferenceCommitted,
    SuggestionsHidden,
    SuggestionsShown,
    TextRewritten,
)

__all__ = [
    "EventBus",
    "Event",
    "EditRejected",
    "ReferenceCommitted",
    "SuggestionsHidden",
    "SuggestionsShown",
    "TextRewritten",
]
