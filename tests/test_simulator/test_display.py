from liftsim.core.direction import Direction


def test_indicator_follows_the_trip(env, lift):
    lift.select_floor("F5")
    env.run(until=5.0)

    display = lift.display
    assert display.floor_text == "3"
    assert display.direction == "UP"
    assert display.moving
    assert not display.door_open
    assert display.lit_buttons == ["F5"]
    assert display.render() == "[  3 ^ ] door closed | buttons: F5"

    env.run(until=30)
    assert display.floor_text == "5"
    assert display.direction is None
    assert display.door_open
    assert display.lit_buttons == []
    assert [text for _, text in display.indicator_history] == ["1", "2", "3", "4", "5"]


def test_basement_floors_shown_as_negative(env, lift):
    lift.select_floor("B2")
    env.run(until=30)

    assert [text for _, text in lift.display.indicator_history] == ["1", "-1", "-2"]


def test_landing_lamps(env, lift):
    lift.select_floor("F5")
    env.run(until=5.0)
    lift.call_from_outside("F7", Direction.DOWN)
    env.run(until=5.1)
    assert lift.display.lit_lamps == {("F7", "DOWN")}

    env.run(until=60)
    assert lift.display.lit_lamps == set()
    assert lift.display.floor_text == "7"


def test_every_topic_is_drained(env, lift):
    lift.select_floor("F5")
    env.run(until=5.0)
    lift.call_from_outside("F7", Direction.DOWN)
    lift.call_from_outside("F5", Direction.UP)
    lift.select_floor("B1")
    lift.request_door_open()
    env.run(until=120)

    leftovers = {topic: len(store.items) for topic, store in lift.broker.topics.items() if store.items}
    assert leftovers == {}
    assert lift.broker.get_broadcast_pipe().items == []
