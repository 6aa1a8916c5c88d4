import pytest

from reftoken.core.display import DisplayConverter
from reftoken.core.scanner import TokenScanner
from reftoken.domain.types.segments import BadgeSegment, PlainSegment
from reftoken.domain.types.tokens import BadgeKind


class StubLabels:
    def __init__(self, labels: dict[tuple[BadgeKind, str], str]):
        self._labels = labels

    def resolve_label(self, kind: BadgeKind, ref_id: str):
        return self._labels.get((kind, ref_id))


class FailingLabels:
    def resolve_label(self, kind: BadgeKind, ref_id: str):
        raise LookupError(ref_id)


class EmptyLabels:
    def resolve_label(self, kind: BadgeKind, ref_id: str):
        return ""


@pytest.fixture
def converter() -> DisplayConverter:
    return DisplayConverter(TokenScanner())


RESOLVERS = [
    None,
    StubLabels({(BadgeKind.PAGE, "p1"): "Runbook", (BadgeKind.COMMAND, "c1"): "Deploy"}),
    FailingLabels(),
    EmptyLabels(),
]

TEXTS = [
    "",
    "no badges at all",
    "open `page@p1` now",
    "`secure@k7f2``var@v1`",
    "run `command@c1|$.items[0].name` and `command@c2`",
    "`page@unknown` trailing $HOME {id:abc}",
]


@pytest.mark.parametrize("labels", RESOLVERS)
@pytest.mark.parametrize("text", TEXTS)
def test_round_trip_is_identity(converter: DisplayConverter, text: str, labels) -> None:
    assert converter.to_canonical(converter.to_display(text, labels)) == text


def test_to_display_splits_plain_text_and_badges(converter: DisplayConverter) -> None:
    labels = StubLabels({(BadgeKind.PAGE, "p1"): "Runbook"})

    segments = converter.to_display("open `page@p1` now", labels)

    assert segments == [
        PlainSegment("open "),
        BadgeSegment(BadgeKind.PAGE, "p1", "Runbook"),
        PlainSegment(" now"),
    ]
    assert segments[1].display_text == "page#Runbook"


def test_command_badge_keeps_json_path(converter: DisplayConverter) -> None:
    segments = converter.to_display("`command@c1|$.data`")

    assert segments == [BadgeSegment(BadgeKind.COMMAND, "c1", None, "$.data")]
    assert segments[0].display_text == "command@c1|$.data"


def test_failed_resolution_falls_back_to_id(converter: DisplayConverter) -> None:
    segments = converter.to_display("`page@p1`", FailingLabels())

    assert segments[0].label is None
    assert segments[0].display_text == "page@p1"


def test_display_string_uses_labels_or_ids(converter: DisplayConverter) -> None:
    labels = StubLabels({(BadgeKind.PAGE, "p1"): "Runbook"})

    assert converter.to_display_string("see `page@p1` and `var@v9`", labels) == "see [Runbook] and [v9]"


def test_labels_never_leak_into_canonical_text() -> None:
    badge = BadgeSegment(BadgeKind.SECURE, "k7f2", label="prod-db")

    assert badge.canonical == "`secure@k7f2`"
    assert DisplayConverter.to_canonical([PlainSegment("x "), badge]) == "x `secure@k7f2`"
