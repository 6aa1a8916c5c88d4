import pytest

from reftoken.application.completion import InsertionCommitter
from reftoken.core.grammar import LOCK_GLYPH
from reftoken.core.triggers import TriggerDetector


def commit(text: str, suggestion: str, cursor: int | None = None):
    cursor = len(text) if cursor is None else cursor
    trigger = TriggerDetector().detect(text, cursor)
    assert trigger is not None
    return InsertionCommitter().commit(text, trigger, cursor, suggestion)


def test_commit_id_reference() -> None:
    result = commit("note {id:a", "abc123: Example")

    assert result.applied
    assert result.text == "note {id:abc123}"
    assert result.cursor == 16


@pytest.mark.parametrize(
    ("text", "suggestion", "expected"),
    [
        ("x {uuid:3f", "3f2b-aaaa: abc123", "x {uuid:3f2b-aaaa}"),
        ("x {var:re", "REGION", "x {var:REGION}"),
        ("x {secure:pro", "prod-db", f"x {{{LOCK_GLYPH}:prod-db}}"),
        ("echo $HO", "HOME", "echo $HOME"),
    ],
)
def test_commit_per_trigger_kind(text: str, suggestion: str, expected: str) -> None:
    result = commit(text, suggestion)

    assert result.text == expected
    assert result.cursor == len(expected)


def test_commit_preserves_text_after_cursor() -> None:
    result = commit("a {id:ab rest", "abc123: Example", cursor=8)

    assert result.text == "a {id:abc123} rest"
    assert result.cursor == len("a {id:abc123}")


def test_commit_is_noop_when_marker_is_gone() -> None:
    trigger = TriggerDetector().detect("note {id:a", 10)

    result = InsertionCommitter().commit("note id:a", trigger, 9, "abc123: Example")

    assert result.applied is False
    assert result.text == "note id:a"


def test_commit_is_noop_when_query_closed_before_cursor() -> None:
    text = "{id:a tail"
    trigger = TriggerDetector().detect(text, 5)

    result = InsertionCommitter().commit(text, trigger, len(text), "abc123: Example")

    assert result.applied is False
    assert result.text == text
    assert result.cursor == len(text)
