import json

import pytest

from liftsim.core.direction import Direction


@pytest.fixture
def two_trips(env, lift):
    lift.select_floor("F5")
    env.run(until=10)
    lift.call_from_outside("B1", Direction.UP)
    env.run(until=40)
    return lift


def test_trip_records(two_trips):
    first, second = two_trips.recorder.trips
    assert first['origin'] == "F1"
    assert first['destination'] == "F5"
    assert first['direction'] == "UP"
    assert first['floors_passed'] == ["F2", "F3", "F4", "F5"]
    assert first['departure_time'] == pytest.approx(1.5)
    assert first['arrival_time'] == pytest.approx(7.3)
    assert first['door_open_time'] == pytest.approx(7.8)

    assert second['origin'] == "F5"
    assert second['destination'] == "B1"
    assert second['direction'] == "DOWN"
    assert second['floors_passed'] == ["F4", "F3", "F2", "F1", "B1"]


def test_summary(two_trips):
    summary = two_trips.recorder.summary()
    assert summary['trips_completed'] == 2
    assert summary['floors_travelled'] == 9
    assert summary['average_car_call_service_time'] == pytest.approx(7.8)
    # Call at 10.0: close 1.5, announce 1.0, 5 floors, arrival pause 0.5
    assert summary['average_hall_call_service_time'] == pytest.approx(9.0)
    assert summary['cue_events'] == len(two_trips.recorder.cue_log)


def test_trajectory_follows_the_cabin(two_trips):
    building = two_trips.building
    trajectory = two_trips.recorder.trajectory[two_trips.elevator.name]
    floors = [building.all_floors[index] for _, index in trajectory]
    assert floors == ["F1", "F2", "F3", "F4", "F5", "F4", "F3", "F2", "F1", "B1"]


def test_empty_recorder_summary(env, lift):
    env.run(until=5)
    summary = lift.recorder.summary()
    assert summary['trips_completed'] == 0
    assert summary['average_trip_time'] == 0.0


def test_save_event_log(two_trips, tmp_path):
    two_trips.recorder.set_simulation_metadata({'duration': 40})
    path = tmp_path / "events.jsonl"
    two_trips.recorder.save_event_log(str(path))

    lines = [json.loads(line) for line in path.read_text(encoding='utf-8').splitlines()]
    assert lines[0]['type'] == "metadata"
    assert lines[0]['data']['config'] == {'duration': 40}
    cue_entries = [entry['data']['event'] for entry in lines if entry['type'] == 'cue']
    assert cue_entries == two_trips.recorder.cue_events()
    types = {entry['type'] for entry in lines}
    assert {'elevator_status', 'selected_floors', 'hall_call_registered', 'hall_call_off'} <= types


def test_plot_trajectory_diagram(two_trips, tmp_path):
    path = tmp_path / "trajectory.png"
    two_trips.recorder.plot_trajectory_diagram(str(path))
    assert path.exists()
    assert path.stat().st_size > 0
