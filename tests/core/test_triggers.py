import pytest

from reftoken.core.triggers import TriggerDetector
from reftoken.domain.types.tokens import Trigger, TriggerKind


@pytest.fixture
def detector() -> TriggerDetector:
    return TriggerDetector()


@pytest.mark.parametrize(
    ("text", "kind", "query"),
    [
        ("hello {id:ab", TriggerKind.ID_REF, "ab"),
        ("$FOO", TriggerKind.VARIABLE_REF, "FOO"),
        ("{secure:my pass", TriggerKind.SECURE_INPUT_REF, "my pass"),
        ("{id:x} $", TriggerKind.VARIABLE_REF, ""),
        ("see {uuid:3f2b", TriggerKind.UUID_REF, "3f2b"),
        ("set {var:reg", TriggerKind.VAR_REF, "reg"),
        ("{id:", TriggerKind.ID_REF, ""),
    ],
)
def test_detect_at_end_of_text(detector: TriggerDetector, text: str, kind: TriggerKind, query: str) -> None:
    trigger = detector.detect(text, len(text))

    assert trigger is not None
    assert trigger.kind is kind
    assert trigger.query == query
    assert trigger.cursor == len(text)


def test_closed_brace_reference_is_not_a_trigger(detector: TriggerDetector) -> None:
    assert detector.detect("{id:ab}", 7) is None


def test_cursor_at_zero_or_past_end_is_not_a_trigger(detector: TriggerDetector) -> None:
    assert detector.detect("{id:ab", 0) is None
    assert detector.detect("{id:ab", 99) is None


def test_whitespace_closes_brace_query_except_secure(detector: TriggerDetector) -> None:
    assert detector.detect("{id:ab cd", 9) is None
    assert detector.detect("{var:a b", 8) is None


@pytest.mark.parametrize("terminator", list("()[]'\"`") + [" "])
def test_variable_query_stops_at_terminators(detector: TriggerDetector, terminator: str) -> None:
    text = f"$FOO{terminator}"

    assert detector.detect(text, len(text)) is None


def test_closest_marker_wins_across_families(detector: TriggerDetector) -> None:
    text = "{id:abc} then {var:re"

    trigger = detector.detect(text, len(text))

    assert trigger == Trigger(TriggerKind.VAR_REF, 14, 19, "re")


def test_right_most_marker_of_a_family_is_used(detector: TriggerDetector) -> None:
    text = "{id:one} {id:tw"

    trigger = detector.detect(text, len(text))

    assert trigger is not None
    assert trigger.marker_start == 9
    assert trigger.query == "tw"


def test_brace_priority_beats_variable(detector: TriggerDetector) -> None:
    # both ``{id:`` and ``$`` are open; ``{id:`` is checked first
    text = "{id:$AB"

    trigger = detector.detect(text, len(text))

    assert trigger is not None
    assert trigger.kind is TriggerKind.ID_REF
    assert trigger.query == "$AB"


def test_detect_uses_text_before_cursor_only(detector: TriggerDetector) -> None:
    text = "{id:ab} tail"

    trigger = detector.detect(text, 6)

    assert trigger is not None
    assert trigger.query == "ab"


def test_open_brace_inside_secure_query_keeps_it_open(detector: TriggerDetector) -> None:
    text = "{secure:pa{ss"

    trigger = detector.detect(text, len(text))

    assert trigger == Trigger(TriggerKind.SECURE_INPUT_REF, 0, 8, "pa{ss")


def test_open_brace_inside_id_query_keeps_it_open(detector: TriggerDetector) -> None:
    text = "{id:a{b"

    trigger = detector.detect(text, len(text))

    assert trigger is not None
    assert trigger.kind is TriggerKind.ID_REF
    assert trigger.query == "a{b"
