"""
ReferenceDemoApp - Textual host showing one reference-aware input.

Layout:
┌─────────────────────────────────────────┐
│               Header                    │
├─────────────────────────────────────────┤
│   ReferenceInput (+ autocomplete)       │
│   Display preview                       │
│   Saved form                            │
│   Event log                             │
├─────────────────────────────────────────┤
│               Footer                    │
└─────────────────────────────────────────┘
"""

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Input, RichLog, Static

from reftoken.application.engine import ReferenceEngine
from reftoken.domain.events import (
    EditRejected,
    EventBus,
    ReferenceCommitted,
    TextRewritten,
)
from reftoken.logger import get_logger
from reftoken.presentation.widgets import ReferenceAutoComplete, ReferenceInput

logger = get_logger("demo_app")


class ReferenceDemoApp(App):
    """Interactive playground for the reference engine."""

    TITLE = "reftoken"
    SUB_TITLE = "Reference-aware text input"

    CSS = """
    #body {
        padding: 1 2;
    }
    ReferenceInput {
        border: round $accent;
    }
    .preview {
        height: auto;
        margin: 1 0 0 0;
        color: $text-muted;
    }
    RichLog {
        height: 1fr;
        margin: 1 0 0 0;
        border: round $panel;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+o", "save", "Save"),
    ]

    def __init__(self, engine: ReferenceEngine, event_bus: EventBus | None = None, initial_text: str = ""):
        super().__init__()
        self.engine = engine
        self.event_bus = event_bus
        self.initial_text = initial_text

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="body"):
            input_widget = ReferenceInput(self.engine, value=self.initial_text, id="reference-input")
            yield input_widget
            yield ReferenceAutoComplete(input_widget)
            yield Static("", id="display-preview", classes="preview")
            yield Static("", id="saved-preview", classes="preview")
            yield RichLog(id="event-log", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        if self.event_bus is not None:
            self.event_bus.subscribe(TextRewritten, self._log_event)
            self.event_bus.subscribe(ReferenceCommitted, self._log_event)
            self.event_bus.subscribe(EditRejected, self._log_event)
        self.query_one(ReferenceInput).focus()
        self._refresh_preview()

    def on_unmount(self) -> None:
        if self.event_bus is not None:
            self.event_bus.clear()

    def on_input_changed(self, event: Input.Changed) -> None:
        self._refresh_preview()

    def action_save(self) -> None:
        saved = self.engine.prepare_for_save()
        self.query_one("#saved-preview", Static).update(Text(f"saved: {saved}"))
        logger.info(f"Saved text ({len(saved)} chars)")

    def _refresh_preview(self) -> None:
        self.query_one("#display-preview", Static).update(Text(f"display: {self.engine.display_string()}"))

    def _log_event(self, event) -> None:
        self.query_one("#event-log", RichLog).write(f"{type(event).__name__}: {event}")
