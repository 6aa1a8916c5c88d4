"""
Autocomplete overlay that asks the ReferenceEngine for its suggestions.
"""

from __future__ import annotations

from textual_autocomplete import AutoComplete, DropdownItem, TargetState

from reftoken.domain.types.tokens import TriggerKind
from reftoken.logger import get_logger
from reftoken.presentation.widgets.reference_input import ReferenceInput

logger = get_logger("reference_autocomplete")

TRIGGER_PREFIXES: dict[TriggerKind, str] = {
    TriggerKind.ID_REF: "# ",
    TriggerKind.UUID_REF: "◆ ",
    TriggerKind.VAR_REF: "ƒ ",
    TriggerKind.SECURE_INPUT_REF: "\N{LOCK} ",
    TriggerKind.VARIABLE_REF: "$ ",
}


class ReferenceAutoComplete(AutoComplete):
    """Dropdown for the open reference trigger; suggestions arrive pre-filtered and capped."""

    def __init__(self, input_widget: ReferenceInput):
        self.input_widget = input_widget
        super().__init__(
            target=input_widget,
            candidates=self._collect_candidates,
            prevent_default_enter=True,
        )

    def _collect_candidates(self, state: TargetState) -> list[DropdownItem]:
        trigger, suggestions = self.input_widget.engine.suggestions_at(state.text, state.cursor_position)
        if trigger is None:
            return []
        prefix = TRIGGER_PREFIXES.get(trigger.kind, "")
        logger.debug(f"Collected {len(suggestions)} suggestion(s) for {trigger.kind.value}")
        return [DropdownItem(main=suggestion, prefix=prefix) for suggestion in suggestions]

    def get_search_string(self, target_state: TargetState) -> str:
        trigger = self.input_widget.engine.detector.detect(target_state.text, target_state.cursor_position)
        return trigger.query if trigger is not None else ""

    def get_matches(
        self,
        target_state: TargetState,
        candidates: list[DropdownItem],
        search_string: str,
    ) -> list[DropdownItem]:
        return candidates

    def apply_completion(self, value: str, state: TargetState) -> None:
        update = self.input_widget.engine.commit_at(state.text, state.cursor_position, value)
        self.input_widget.apply_update(update)
        logger.info(f"Applied completion {value!r}; new cursor={update.cursor}")

    def should_show_dropdown(self, _search_string: str) -> bool:
        if self.option_list.option_count == 0:
            return False
        target = self.input_widget
        return target.engine.detector.detect(target.value, target.cursor_position) is not None
