"""
ReferenceInput - single-line input driven by a ReferenceEngine.

Every change is routed through the engine, which may rewrite the text, move
the cursor or refuse the edit outright. The widget mirrors whatever the
engine decides so the value on screen is always the engine's canonical text.
"""

from textual.binding import Binding
from textual.widgets import Input
from textual.widgets.input import Selection

from reftoken.application.engine import EngineUpdate, ReferenceEngine
from reftoken.domain.types import TextRange
from reftoken.logger import get_logger
from reftoken.presentation.highlighter import ReferenceHighlighter

logger = get_logger("reference_input")


class ReferenceInput(Input):
    """
    Input that keeps locked references atomic and rewrites references in place.

    The engine is the source of truth; ``_synced_value`` is the last text it
    produced, so the ``Changed`` event caused by mirroring it back is ignored.
    """

    BORDER_TITLE = "Reference"

    BINDINGS = [
        Binding("ctrl+s", "wrap_secret", "Mark secret", show=True),
    ]

    def __init__(self, engine: ReferenceEngine, value: str = "", **kwargs):
        self.engine = engine
        self._synced_value: str | None = None
        super().__init__(
            value=value,
            highlighter=ReferenceHighlighter(engine.scanner),
            placeholder="Type {id: {uuid: {var: {secure: or $ to reference",
            **kwargs,
        )

    def on_mount(self) -> None:
        self.apply_update(self.engine.reset(self.value))
        self.watch(self, "selection", self._snap_selection, init=False)
        logger.debug("ReferenceInput mounted")

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input is not self or event.value == self._synced_value:
            return
        update = self.engine.on_text_changed(event.value, self.cursor_position)
        if not update.applied:
            self.app.bell()
        self.apply_update(update)

    def apply_update(self, update: EngineUpdate) -> None:
        """Mirror the engine's text and cursor into the widget."""
        self._synced_value = update.text
        if self.value != update.text:
            self.value = update.text
        if self.cursor_position != update.cursor:
            self.cursor_position = update.cursor

    def action_wrap_secret(self) -> None:
        start, end = sorted(self.selection)
        if start == end:
            return
        self.apply_update(self.engine.wrap_selection_as_secret(TextRange(start, end)))

    def _snap_selection(self, selection: Selection) -> None:
        if not selection.is_empty:
            return
        locked = self.engine.on_selection_changed(selection.end)
        if locked is not None:
            logger.debug(f"Caret inside locked span; selecting [{locked.start}, {locked.end})")
            self.selection = Selection(locked.start, locked.end)
