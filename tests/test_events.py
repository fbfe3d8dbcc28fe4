from weatherdash.events import DashboardEvent, EventBus


async def test_callbacks_receive_arguments_by_arity():
    bus = EventBus()
    received = []

    bus.subscribe(DashboardEvent.REQUEST_STARTED, lambda: received.append("none"))
    bus.subscribe(DashboardEvent.REQUEST_STARTED, lambda data: received.append(data))
    bus.subscribe(
        DashboardEvent.REQUEST_STARTED,
        lambda event, data: received.append((event, data)),
    )

    await bus.publish_async(DashboardEvent.REQUEST_STARTED, 3)

    assert received == ["none", 3, (DashboardEvent.REQUEST_STARTED, 3)]


async def test_single_argument_callback_gets_event_without_data():
    bus = EventBus()
    received = []
    bus.subscribe(DashboardEvent.STATE_CHANGED, received.append)

    await bus.publish_async(DashboardEvent.STATE_CHANGED)

    assert received == [DashboardEvent.STATE_CHANGED]


async def test_async_callbacks_are_awaited():
    bus = EventBus()
    received = []

    async def on_discarded(generation):
        received.append(generation)

    bus.subscribe(DashboardEvent.REQUEST_DISCARDED, on_discarded)

    await bus.publish_async(DashboardEvent.REQUEST_DISCARDED, 7)

    assert received == [7]


async def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe(DashboardEvent.STATE_CHANGED, received.append)
    bus.unsubscribe(DashboardEvent.STATE_CHANGED, received.append)

    await bus.publish_async(DashboardEvent.STATE_CHANGED, "view")

    assert received == []


async def test_failing_callback_does_not_stop_others():
    bus = EventBus()
    received = []

    def broken(data):
        raise ValueError("boom")

    bus.subscribe(DashboardEvent.STATE_CHANGED, broken)
    bus.subscribe(DashboardEvent.STATE_CHANGED, received.append)

    await bus.publish_async(DashboardEvent.STATE_CHANGED, "view")

    assert received == ["view"]
