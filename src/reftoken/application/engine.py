"""
ReferenceEngine - the per-field pipeline behind a reference-aware text input.

For every text change the stages run in a fixed order and to completion:
guard check, rewrite, store, scan, detect trigger, suggest, show/hide. The
engine never touches host widgets; it returns an ``EngineUpdate`` describing
the text, cursor, highlight spans and suggestion list the host should show.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from reftoken.application.completion import (
    IdCompletionStrategy,
    InsertionCommitter,
    SecureLabelCompletionStrategy,
    SuggestionEngine,
    UuidCompletionStrategy,
    VariableCompletionStrategy,
)
from reftoken.application.suggestion_list import SuggestionList
from reftoken.config import EngineConfig
from reftoken.core import (
    DEFAULT_GRAMMAR,
    DisplayConverter,
    ProtectedSpanGuard,
    ReferenceRewriter,
    SecureReferenceProcessor,
    TokenGrammar,
    TokenScanner,
    TriggerDetector,
    wrap_selection,
)
from reftoken.domain.events import (
    EditRejected,
    Event,
    EventBus,
    ReferenceCommitted,
    SuggestionsHidden,
    SuggestionsShown,
    TextRewritten,
)
from reftoken.domain.protocols import (
    IdCandidateSource,
    RecordLabelSource,
    SecretLabelSource,
    UuidToShortIdResolver,
    VariableCandidateSource,
)
from reftoken.domain.types import Segment, Span, TextRange, Trigger
from reftoken.logger import get_logger

logger = get_logger("engine")


class EditorCommand(Enum):
    """Keyboard commands the host forwards while the suggestion list is open."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    ACCEPT = "accept"
    CANCEL = "cancel"


@dataclass(slots=True)
class ReferenceSources:
    """Collaborators injected into one engine instance."""

    variables: VariableCandidateSource
    ids: IdCandidateSource
    uuids: UuidToShortIdResolver
    secrets: SecretLabelSource
    labels: Optional[RecordLabelSource] = None


@dataclass(slots=True)
class EngineUpdate:
    """Instructions for the host after an input event."""

    text: str
    cursor: int
    spans: list[Span] = field(default_factory=list)
    trigger: Optional[Trigger] = None
    suggestions: list[str] = field(default_factory=list)
    applied: bool = True

    @property
    def suggestions_visible(self) -> bool:
        return bool(self.suggestions)


@dataclass(slots=True)
class CommandResult:
    """Whether a forwarded key command was consumed, and any resulting update."""

    consumed: bool
    update: Optional[EngineUpdate] = None


class ReferenceEngine:
    """Keeps one input field's canonical text, trigger and suggestion state."""

    def __init__(
        self,
        sources: ReferenceSources,
        config: Optional[EngineConfig] = None,
        event_bus: Optional[EventBus] = None,
        grammar: TokenGrammar = DEFAULT_GRAMMAR,
    ) -> None:
        self._sources = sources
        self._config = config or EngineConfig()
        self._event_bus = event_bus

        self.scanner = TokenScanner(grammar)
        self.detector = TriggerDetector()
        self.guard = ProtectedSpanGuard(self.scanner)
        self.rewriter = ReferenceRewriter(sources.uuids, grammar)
        self.display = DisplayConverter(self.scanner)
        self.secure = SecureReferenceProcessor(sources.secrets, grammar)
        self.committer = InsertionCommitter()
        self.suggestion_engine = SuggestionEngine(
            [
                IdCompletionStrategy(sources.ids.id_candidates),
                UuidCompletionStrategy(sources.uuids.uuid_candidates),
                VariableCompletionStrategy(sources.variables.variable_names),
                SecureLabelCompletionStrategy(sources.secrets.labels),
            ],
            max_suggestions=self._config.max_suggestions,
        )

        self._text = ""
        self._cursor = 0
        self._trigger: Optional[Trigger] = None
        self._suggestion_list: Optional[SuggestionList] = None

    # ------------------------------------------------------------------ state

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def trigger(self) -> Optional[Trigger]:
        return self._trigger

    @property
    def suggestion_list(self) -> Optional[SuggestionList]:
        """The list state, or None until suggestions were first needed."""
        return self._suggestion_list

    @property
    def suggestions_visible(self) -> bool:
        return self._suggestion_list is not None and self._suggestion_list.visible

    def reset(self, text: str = "", cursor: Optional[int] = None) -> EngineUpdate:
        """Load stored text without treating it as an edit (no guard check)."""
        self._text = ""
        self._hide("reset")
        return self._run_pipeline(text, len(text) if cursor is None else cursor)

    # ---------------------------------------------------------- host callbacks

    def on_text_changed(self, text: str, cursor: int) -> EngineUpdate:
        """Process a text-change notification from the host.

        If the change cuts into a locked span the prior text and cursor are
        returned with ``applied=False`` and nothing is stored.
        """
        blocked = self.guard.blocking_change(self._text, text, cursor)
        if blocked is not None:
            edit, span = blocked
            return self._reject(edit, span.range)
        return self._run_pipeline(text, cursor)

    def on_selection_changed(self, cursor: int) -> Optional[TextRange]:
        """Record a caret move; return the range to select if it landed inside a locked span."""
        self._cursor = max(0, min(cursor, len(self._text)))
        trigger = self.detector.detect(self._text, self._cursor)
        if trigger != self._trigger:
            self._trigger = trigger
            self._refresh_suggestions()
        return self.guard.expand_selection(self._cursor, self._text)

    def propose_edit(self, edit: TextRange, replacement: str) -> EngineUpdate:
        """Apply ``replacement`` over ``edit`` unless it would split a locked span."""
        blocking = self.guard.blocking_span(edit, self._text)
        if blocking is not None:
            return self._reject(edit, blocking.range)
        new_text = self._text[: edit.start] + replacement + self._text[edit.end :]
        return self._run_pipeline(new_text, edit.start + len(replacement))

    def handle_command(self, command: EditorCommand) -> CommandResult:
        """Route navigation keys to the suggestion list while it is visible."""
        suggestion_list = self._suggestion_list
        if suggestion_list is None or not suggestion_list.visible:
            return CommandResult(consumed=False)

        if command is EditorCommand.MOVE_UP:
            suggestion_list.move_up()
        elif command is EditorCommand.MOVE_DOWN:
            suggestion_list.move_down()
        elif command is EditorCommand.CANCEL:
            self._hide("cancelled")
        elif command is EditorCommand.ACCEPT:
            chosen = suggestion_list.select_current()
            if chosen is not None:
                suggestion, trigger = chosen
                return CommandResult(consumed=True, update=self._commit(trigger, suggestion))
        return CommandResult(consumed=True)

    def select_suggestion(self, suggestion: str) -> EngineUpdate:
        """Commit ``suggestion`` for the trigger that is currently open."""
        if self._trigger is None:
            logger.info("select_suggestion called with no open trigger")
            self._hide("no-trigger")
            return self._snapshot(applied=False)
        return self._commit(self._trigger, suggestion)

    def wrap_selection_as_secret(self, selection: TextRange) -> EngineUpdate:
        """Turn the selected plaintext into a ``{secure:...}`` input."""
        if selection.is_empty:
            return self._snapshot(applied=False)
        blocking = self.guard.blocking_span(selection, self._text)
        if blocking is not None:
            return self._reject(selection, blocking.range)
        new_text, cursor = wrap_selection(self._text, selection)
        if new_text == self._text:
            return self._snapshot(applied=False)
        return self._run_pipeline(new_text, cursor)

    # --------------------------------------------------- stateless host queries

    def suggestions_at(self, text: str, cursor: int) -> tuple[Optional[Trigger], list[str]]:
        """Trigger and suggestions for an arbitrary text/cursor, without touching state."""
        trigger = self.detector.detect(text, cursor)
        return trigger, self.suggestion_engine.suggest_for(trigger)

    def commit_at(self, text: str, cursor: int, suggestion: str) -> EngineUpdate:
        """Detect the trigger at ``cursor`` in ``text`` and commit ``suggestion`` there."""
        trigger = self.detector.detect(text, cursor)
        self._text, self._cursor = text, max(0, min(cursor, len(text)))
        if trigger is None:
            self._hide("no-trigger")
            return self._snapshot(applied=False)
        return self._commit(trigger, suggestion)

    # ----------------------------------------------------------- text outputs

    def render_display(self, text: Optional[str] = None) -> list[Segment]:
        return self.display.to_display(self._text if text is None else text, self._sources.labels)

    def display_string(self, text: Optional[str] = None) -> str:
        return self.display.to_display_string(self._text if text is None else text, self._sources.labels)

    def prepare_for_save(self) -> str:
        """Canonical text with every plaintext secret encrypted and locked."""
        return self.secure.process_for_save(self._text)

    # ---------------------------------------------------------------- internal

    def _run_pipeline(self, text: str, cursor: int) -> EngineUpdate:
        cursor = max(0, min(cursor, len(text)))

        rewrite = self.rewriter.rewrite_with_cursor(text, cursor)
        if rewrite.changed:
            self._publish(TextRewritten(original=text, rewritten=rewrite.text, cursor=rewrite.cursor))

        self._text, self._cursor = rewrite.text, rewrite.cursor
        spans = self.scanner.scan(self._text)
        self._trigger = self.detector.detect(self._text, self._cursor)
        suggestions = self._refresh_suggestions()
        if self._trigger is None:
            return EngineUpdate(self._text, self._cursor, spans)
        return EngineUpdate(self._text, self._cursor, spans, self._trigger, suggestions)

    def _refresh_suggestions(self) -> list[str]:
        """Show or hide the list for the current trigger."""
        if self._trigger is None:
            self._hide("no-trigger")
            return []
        suggestions = self.suggestion_engine.suggest_for(self._trigger)
        if suggestions:
            self._show(suggestions, self._trigger)
        else:
            self._hide("no-matches")
        return suggestions

    def _commit(self, trigger: Trigger, suggestion: str) -> EngineUpdate:
        result = self.committer.commit(self._text, trigger, self._cursor, suggestion)
        if not result.applied:
            self._trigger = None
            self._hide("no-trigger")
            return self._snapshot(applied=False)

        rewrite = self.rewriter.rewrite_with_cursor(result.text, result.cursor)
        self._text, self._cursor = rewrite.text, rewrite.cursor
        self._trigger = None
        self._hide("committed")
        self._publish(
            ReferenceCommitted(trigger_kind=trigger.kind, suggestion=suggestion, text=self._text, cursor=self._cursor)
        )
        return EngineUpdate(self._text, self._cursor, self.scanner.scan(self._text))

    def _reject(self, edit: TextRange, locked: TextRange) -> EngineUpdate:
        logger.info(f"Edit [{edit.start}, {edit.end}) rejected: locked span [{locked.start}, {locked.end})")
        self._publish(EditRejected(edit=edit, locked=locked))
        return self._snapshot(applied=False)

    def _snapshot(self, applied: bool = True) -> EngineUpdate:
        suggestions = self._suggestion_list.items if self._suggestion_list is not None else []
        return EngineUpdate(
            self._text,
            self._cursor,
            self.scanner.scan(self._text),
            self._trigger,
            suggestions,
            applied=applied,
        )

    def _show(self, suggestions: list[str], trigger: Trigger) -> None:
        if self._suggestion_list is None:
            self._suggestion_list = SuggestionList()
        self._suggestion_list.show(suggestions, trigger)
        self._publish(SuggestionsShown(trigger_kind=trigger.kind, query=trigger.query, items=list(suggestions)))

    def _hide(self, reason: str) -> None:
        if self._suggestion_list is None or not self._suggestion_list.visible:
            return
        self._suggestion_list.hide()
        self._publish(SuggestionsHidden(reason=reason))

    def _publish(self, event: Event) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)
