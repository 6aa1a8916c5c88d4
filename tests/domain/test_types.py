import pytest
from pydantic import ValidationError

from reftoken.domain.candidates import IdCandidate, UuidCandidate
from reftoken.domain.types import BadgeKind, BadgeSegment, Span, TextRange, TokenKind, Trigger, TriggerKind


def test_text_range_properties() -> None:
    assert TextRange(2, 5).length == 3
    assert TextRange(4, 4).is_empty
    assert TextRange(0, 10).covers(TextRange(2, 5))
    assert not TextRange(3, 10).covers(TextRange(2, 5))


def test_span_range_and_badge_kinds() -> None:
    span = Span(TokenKind.LOCKED_REF, 1, 11, "secret")

    assert span.range == TextRange(1, 11)
    assert TokenKind.BADGE_COMMAND.is_badge
    assert not TokenKind.LOCKED_REF.is_badge


def test_trigger_cursor() -> None:
    assert Trigger(TriggerKind.ID_REF, 6, 10, "ab").cursor == 12


def test_badge_segment_canonical_and_display() -> None:
    labelled = BadgeSegment(BadgeKind.COMMAND, "c1", label="Deploy", json_path="$.id")

    assert labelled.canonical == "`command@c1|$.id`"
    assert labelled.display_text == "command#Deploy|$.id"
    assert BadgeSegment(BadgeKind.PAGE, "p1").display_text == "page@p1"


def test_candidates_render_suggestions() -> None:
    assert IdCandidate(id="abc123", title="Example").to_suggestion() == "abc123: Example"
    assert UuidCandidate(full_id="3f2b", short_id="abc").to_suggestion() == "3f2b: abc"


def test_candidates_are_validated_and_frozen() -> None:
    with pytest.raises(ValidationError):
        IdCandidate(id="")

    candidate = IdCandidate(id="a")
    with pytest.raises(ValidationError):
        candidate.title = "changed"
