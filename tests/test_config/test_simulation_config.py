from pathlib import Path

import pytest
import yaml

from config import (
    SimulationConfig,
    BuildingConfig,
    TimingConfig,
    ScenarioConfig,
    ScheduledRequest,
    parse_simulation_config,
    dump_simulation_config,
    load_simulation_config,
    save_simulation_config,
)

SCENARIO_PATH = Path(__file__).parent.parent.parent / "scenarios" / "mall_lift.yaml"


def test_defaults():
    config = SimulationConfig()
    assert config.building.floors[0] == "B2"
    assert config.building.floors[-1] == "F10"
    assert config.building.home_floor == "F1"
    assert config.timing.floor_travel_time == 1.2
    assert config.scenario.requests == []
    assert config.realtime_factor == 0.0


def test_building_validation():
    with pytest.raises(ValueError):
        BuildingConfig(floors=["F1"], home_floor="F1")
    with pytest.raises(ValueError):
        BuildingConfig(floors=["F1", "F1"], home_floor="F1")
    with pytest.raises(ValueError):
        BuildingConfig(home_floor="F11")
    with pytest.raises(ValueError):
        BuildingConfig(display_names={"R": "Roof"})


def test_timing_validation():
    with pytest.raises(ValueError):
        TimingConfig(door_dwell_time=-1)
    with pytest.raises(ValueError):
        TimingConfig(floor_travel_time=0)
    assert TimingConfig(arrival_pause=0).arrival_pause == 0


def test_request_validation():
    with pytest.raises(ValueError):
        ScheduledRequest(time=1.0, action="teleport", floor="F2")
    with pytest.raises(ValueError):
        ScheduledRequest(time=1.0, action="select")
    with pytest.raises(ValueError):
        ScheduledRequest(time=1.0, action="call", floor="F2")
    with pytest.raises(ValueError):
        ScheduledRequest(time=-1.0, action="door_open")
    assert ScheduledRequest(time=1.0, action="call", floor="F2", direction="up").direction == "up"


def test_scenario_validation():
    with pytest.raises(ValueError):
        ScenarioConfig(duration=0)

    config = SimulationConfig(scenario=ScenarioConfig(
        duration=10, requests=[ScheduledRequest(time=1.0, action="select", floor="F42")]))
    with pytest.raises(ValueError):
        config.validate()

    config = SimulationConfig(scenario=ScenarioConfig(
        duration=10, requests=[ScheduledRequest(time=11.0, action="door_close")]))
    with pytest.raises(ValueError):
        config.validate()


def test_from_dict_without_root_key():
    config = SimulationConfig.from_dict({
        'building': {'floors': ['G', '1', '2'], 'home_floor': 'G', 'display_names': {'G': 'Ground'}},
        'timing': {'floor_travel_time': 2.0},
        'verbose': False,
    })
    assert config.building.floors == ['G', '1', '2']
    assert config.building.display_names == {'G': 'Ground'}
    assert config.timing.floor_travel_time == 2.0
    assert config.timing.door_close_time == 1.5
    assert not config.verbose


def test_save_and_load_yaml(tmp_path):
    config = SimulationConfig(
        building=BuildingConfig(home_floor="B1", display_names={"B1": "P1"}),
        scenario=ScenarioConfig(duration=50, requests=[
            ScheduledRequest(time=2.0, action="select", floor="F3"),
            ScheduledRequest(time=4.0, action="call", floor="F7", direction="DOWN"),
        ]),
        verbose=False,
    )
    path = tmp_path / "nested" / "lift.yaml"
    save_simulation_config(config, path)

    raw = yaml.safe_load(path.read_text(encoding='utf-8'))
    assert raw['simulation']['building']['home_floor'] == "B1"

    loaded = load_simulation_config(path)
    assert loaded == config


def test_shipped_scenario_loads():
    config = load_simulation_config(SCENARIO_PATH)
    assert config.scenario.duration == 120.0
    assert len(config.scenario.requests) == 9
    assert config.output.event_log == "lift_events.jsonl"


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        load_simulation_config("does/not/exist.yaml")


def test_non_mapping_file(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- just\n- a list\n", encoding='utf-8')
    with pytest.raises(ValueError):
        load_simulation_config(path)


def test_parse_round_trips_through_dump():
    config = SimulationConfig(
        timing=TimingConfig(door_dwell_time=3.0),
        scenario=ScenarioConfig(duration=30, requests=[ScheduledRequest(time=0.5, action="door_close")]),
    )
    assert parse_simulation_config(dump_simulation_config(config)) == config


def test_yaml_syntax_error_names_the_file(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("simulation:\n  building: [B1, F1\n", encoding='utf-8')
    with pytest.raises(ValueError, match="broken.yaml"):
        load_simulation_config(path)


def test_malformed_sections_are_value_errors():
    with pytest.raises(ValueError, match="malformed"):
        parse_simulation_config("scenario:\n  requests:\n    - select F3\n")
    with pytest.raises(ValueError, match="malformed"):
        parse_simulation_config("timing: [1, 2]\n")


def test_inconsistent_values_name_the_source():
    text = "scenario:\n  duration: 5\n  requests:\n    - {time: 9, action: door_open}\n"
    with pytest.raises(ValueError, match="^lift.yaml: "):
        parse_simulation_config(text, "lift.yaml")
