"""
State of the suggestion list shown under the input.

The host renders it; this object only tracks what is shown and which row is
selected. ``hide`` resets every field so show/hide cycles never leak state.
"""

from __future__ import annotations

from typing import Optional

from reftoken.domain.types.tokens import Trigger


class SuggestionList:
    """Items, selection and the trigger they were computed for."""

    def __init__(self) -> None:
        self._items: list[str] = []
        self._selected_index = 0
        self._trigger: Optional[Trigger] = None

    @property
    def visible(self) -> bool:
        return bool(self._items)

    @property
    def items(self) -> list[str]:
        return list(self._items)

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected(self) -> Optional[str]:
        if not self._items:
            return None
        return self._items[self._selected_index]

    @property
    def trigger(self) -> Optional[Trigger]:
        return self._trigger

    def show(self, items: list[str], trigger: Trigger) -> None:
        """Replace whatever was shown; an empty list hides instead."""
        if not items:
            self.hide()
            return
        self._items = list(items)
        self._selected_index = 0
        self._trigger = trigger

    def hide(self) -> None:
        self._items = []
        self._selected_index = 0
        self._trigger = None

    def move_up(self) -> None:
        if self._items:
            self._selected_index = (self._selected_index - 1) % len(self._items)

    def move_down(self) -> None:
        if self._items:
            self._selected_index = (self._selected_index + 1) % len(self._items)

    def select_current(self) -> Optional[tuple[str, Trigger]]:
        """Return the selected item with the trigger it completes."""
        if not self._items or self._trigger is None:
            return None
        return self._items[self._selected_index], self._trigger
