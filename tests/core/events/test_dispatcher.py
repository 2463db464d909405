from notification_channels.core.events import InMemoryEventDispatcher


class BaseEvent:
    pass


class ChildEvent(BaseEvent):
    pass


class OtherEvent:
    pass


class TestInMemoryEventDispatcher:

    def test_dispatch_without_handlers(self):
        dispatcher = InMemoryEventDispatcher()

        dispatcher.dispatch(OtherEvent())

    def test_dispatch_calls_matching_handlers(self):
        dispatcher = InMemoryEventDispatcher()
        received = []
        dispatcher.subscribe(ChildEvent, received.append)
        dispatcher.subscribe(OtherEvent, lambda e: received.append("other"))

        event = ChildEvent()
        dispatcher.dispatch(event)

        assert received == [event]

    def test_handlers_of_base_class_receive_subclass_events(self):
        dispatcher = InMemoryEventDispatcher()
        received = []
        dispatcher.subscribe(BaseEvent, received.append)

        event = ChildEvent()
        dispatcher.dispatch(event)

        assert received == [event]

    def test_failing_handler_does_not_stop_others(self):
        dispatcher = InMemoryEventDispatcher()
        received = []

        def broken(event):
            raise RuntimeError("boom")

        dispatcher.subscribe(BaseEvent, broken)
        dispatcher.subscribe(BaseEvent, received.append)

        event = BaseEvent()
        dispatcher.dispatch(event)

        assert received == [event]
