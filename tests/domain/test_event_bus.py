import pytest

from reftoken.domain.events import EventBus, SuggestionsHidden, SuggestionsShown
from reftoken.domain.types.tokens import TriggerKind


def test_publish_reaches_subscribers_of_that_type_only() -> None:
    bus = EventBus()
    shown: list = []
    hidden: list = []
    bus.subscribe(SuggestionsShown, shown.append)
    bus.subscribe(SuggestionsHidden, hidden.append)

    bus.publish(SuggestionsHidden(reason="cancelled"))

    assert shown == []
    assert hidden[0].reason == "cancelled"
    assert hidden[0].timestamp > 0


def test_duplicate_subscription_is_ignored() -> None:
    bus = EventBus()
    received: list = []
    bus.subscribe(SuggestionsHidden, received.append)
    bus.subscribe(SuggestionsHidden, received.append)

    bus.publish(SuggestionsHidden(reason="no-trigger"))

    assert len(received) == 1


def test_failing_handler_does_not_stop_others() -> None:
    bus = EventBus()
    received: list = []

    def explode(event):
        raise RuntimeError("handler bug")

    bus.subscribe(SuggestionsShown, explode)
    bus.subscribe(SuggestionsShown, received.append)

    bus.publish(SuggestionsShown(trigger_kind=TriggerKind.ID_REF, query="a", items=["a"]))

    assert len(received) == 1


def test_async_handlers_are_refused() -> None:
    bus = EventBus()

    async def handler(event):
        return None

    with pytest.raises(TypeError):
        bus.subscribe(SuggestionsShown, handler)


def test_unsubscribe_and_clear() -> None:
    bus = EventBus()
    received: list = []
    bus.subscribe(SuggestionsHidden, received.append)
    assert bus.has_subscribers(SuggestionsHidden)

    bus.unsubscribe(SuggestionsHidden, received.append)
    bus.publish(SuggestionsHidden(reason="cancelled"))
    assert received == []

    bus.subscribe(SuggestionsHidden, received.append)
    bus.clear()
    assert not bus.has_subscribers(SuggestionsHidden)
