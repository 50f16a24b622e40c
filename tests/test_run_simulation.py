import json

import pytest
import simpy

import main
from config import SimulationConfig, ScenarioConfig, ScheduledRequest, OutputConfig, save_simulation_config


@pytest.fixture
def scenario_file(tmp_path):
    config = SimulationConfig(
        scenario=ScenarioConfig(duration=60, requests=[
            ScheduledRequest(time=1.0, action="select", floor="F4"),
            ScheduledRequest(time=2.0, action="call", floor="B2", direction="UP"),
            ScheduledRequest(time=2.0, action="select", floor="F4"),
            ScheduledRequest(time=40.0, action="door_close"),
        ]),
        output=OutputConfig(
            event_log=str(tmp_path / "events.jsonl"),
            trajectory_diagram=str(tmp_path / "trajectory.png"),
        ),
        verbose=False,
    )
    path = tmp_path / "scenario.yaml"
    save_simulation_config(config, path)
    return path


def test_create_environment():
    assert type(main.create_environment(0.0)) is simpy.Environment
    assert isinstance(main.create_environment(10.0), simpy.rt.RealtimeEnvironment)


def test_run_simulation(scenario_file, tmp_path):
    system = main.run_simulation(scenario_file)

    arrivals = [floor for event, *rest in system.recorder.cue_sequence() if event == "floor_arrived" for floor in rest]
    assert arrivals == ["F4", "B2"]
    assert system.env.now == 60
    assert system.snapshot().current_floor == "B2"
    assert not system.snapshot().door_open

    assert (tmp_path / "trajectory.png").exists()
    lines = (tmp_path / "events.jsonl").read_text(encoding='utf-8').splitlines()
    assert json.loads(lines[0])['type'] == "metadata"


def test_main_reports_missing_file(monkeypatch, capsys):
    monkeypatch.setattr("sys.argv", ["liftsim-run", "no/such/scenario.yaml"])
    with pytest.raises(SystemExit) as excinfo:
        main.main()
    assert excinfo.value.code == 1
    assert "Config file not found" in capsys.readouterr().out
