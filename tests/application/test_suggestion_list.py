from reftoken.application.suggestion_list import SuggestionList
from reftoken.domain.types.tokens import Trigger, TriggerKind

TRIGGER = Trigger(TriggerKind.VARIABLE_REF, 0, 1, "")


def test_new_list_is_hidden() -> None:
    suggestions = SuggestionList()

    assert not suggestions.visible
    assert suggestions.selected is None
    assert suggestions.select_current() is None


def test_show_selects_first_item() -> None:
    suggestions = SuggestionList()
    suggestions.show(["A", "B", "C"], TRIGGER)

    assert suggestions.visible
    assert suggestions.selected == "A"
    assert suggestions.trigger == TRIGGER


def test_navigation_wraps_around() -> None:
    suggestions = SuggestionList()
    suggestions.show(["A", "B", "C"], TRIGGER)

    suggestions.move_up()
    assert suggestions.selected == "C"
    suggestions.move_down()
    suggestions.move_down()
    assert suggestions.selected == "B"
    assert suggestions.select_current() == ("B", TRIGGER)


def test_show_replaces_previous_list() -> None:
    suggestions = SuggestionList()
    suggestions.show(["A", "B"], TRIGGER)
    suggestions.move_down()

    suggestions.show(["X"], TRIGGER)

    assert suggestions.items == ["X"]
    assert suggestions.selected_index == 0


def test_hide_resets_all_state() -> None:
    suggestions = SuggestionList()
    suggestions.show(["A", "B"], TRIGGER)
    suggestions.move_down()

    suggestions.hide()

    assert suggestions.items == []
    assert suggestions.selected_index == 0
    assert suggestions.trigger is None


def test_showing_nothing_hides() -> None:
    suggestions = SuggestionList()
    suggestions.show(["A"], TRIGGER)

    suggestions.show([], TRIGGER)

    assert not suggestions.visible
