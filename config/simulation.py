"""
Simulation Configuration

Floor layout, phase timings and the scripted request scenario for one
lift simulation run.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Optional

from liftsim.core.building import DEFAULT_FLOOR_IDS


REQUEST_ACTIONS = ("select", "call", "door_open", "door_close")


@dataclass
class BuildingConfig:
    """Floor layout"""
    floors: List[str] = field(default_factory=lambda: list(DEFAULT_FLOOR_IDS))  # lowest first
    home_floor: str = "F1"
    display_names: Optional[Dict[str, str]] = None  # floor id -> indicator text

    def __post_init__(self):
        if len(self.floors) < 2:
            raise ValueError("floors must list at least 2 floors")
        if len(set(self.floors)) != len(self.floors):
            raise ValueError("floors must not contain duplicates")
        if self.home_floor not in self.floors:
            raise ValueError(f"home_floor '{self.home_floor}' is not one of the floors")
        if self.display_names is not None:
            unknown = set(self.display_names) - set(self.floors)
            if unknown:
                raise ValueError(f"display_names refer to unknown floors: {sorted(unknown)}")


@dataclass
class TimingConfig:
    """Phase intervals of a trip (seconds of simulated time)"""
    door_close_time: float = 1.5
    direction_announce_time: float = 1.0
    floor_travel_time: float = 1.2
    arrival_pause: float = 0.5
    door_dwell_time: float = 2.0

    def __post_init__(self):
        for name in ("door_close_time", "direction_announce_time", "floor_travel_time",
                     "arrival_pause", "door_dwell_time"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative")
        if self.floor_travel_time == 0:
            raise ValueError("floor_travel_time must be positive")


@dataclass
class ScheduledRequest:
    """One scripted user action"""
    time: float
    action: str  # select, call, door_open, door_close
    floor: Optional[str] = None
    direction: Optional[str] = None

    def __post_init__(self):
        if self.time < 0:
            raise ValueError("request time cannot be negative")
        if self.action not in REQUEST_ACTIONS:
            raise ValueError(f"action must be one of {REQUEST_ACTIONS}, got '{self.action}'")
        if self.action in ("select", "call") and self.floor is None:
            raise ValueError(f"'{self.action}' request needs a floor")
        if self.action == "call":
            if self.direction is None or str(self.direction).upper() not in ("UP", "DOWN"):
                raise ValueError("'call' request needs direction 'UP' or 'DOWN'")

    def to_dict(self) -> dict:
        result = {'time': self.time, 'action': self.action}
        if self.floor is not None:
            result['floor'] = self.floor
        if self.direction is not None:
            result['direction'] = self.direction
        return result


@dataclass
class ScenarioConfig:
    """Scripted requests and run length"""
    duration: float = 120.0  # seconds
    requests: List[ScheduledRequest] = field(default_factory=list)

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError("duration must be positive")


@dataclass
class OutputConfig:
    """Where to write results (None = skip)"""
    event_log: Optional[str] = None
    trajectory_diagram: Optional[str] = None


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines floor layout, phase timings, scenario and output settings.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    scenario: ScenarioConfig = field(default_factory=ScenarioConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    elevator_name: str = "Elevator_1"
    realtime_factor: float = 0.0  # 1.0 = realtime, 0.0 = as fast as possible
    verbose: bool = True

    def __post_init__(self):
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data) or {}

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            floors=building_data.get('floors', list(DEFAULT_FLOOR_IDS)),
            home_floor=building_data.get('home_floor', 'F1'),
            display_names=building_data.get('display_names')
        )

        timing_data = sim_data.get('timing', {})
        timing = TimingConfig(
            door_close_time=timing_data.get('door_close_time', 1.5),
            direction_announce_time=timing_data.get('direction_announce_time', 1.0),
            floor_travel_time=timing_data.get('floor_travel_time', 1.2),
            arrival_pause=timing_data.get('arrival_pause', 0.5),
            door_dwell_time=timing_data.get('door_dwell_time', 2.0)
        )

        scenario_data = sim_data.get('scenario', {})
        scenario = ScenarioConfig(
            duration=scenario_data.get('duration', 120.0),
            requests=[
                ScheduledRequest(
                    time=r.get('time', 0.0),
                    action=r.get('action'),
                    floor=r.get('floor'),
                    direction=r.get('direction')
                )
                for r in scenario_data.get('requests', [])
            ]
        )

        output_data = sim_data.get('output', {})
        output = OutputConfig(
            event_log=output_data.get('event_log'),
            trajectory_diagram=output_data.get('trajectory_diagram')
        )

        return cls(
            building=building,
            timing=timing,
            scenario=scenario,
            output=output,
            elevator_name=sim_data.get('elevator_name', 'Elevator_1'),
            realtime_factor=sim_data.get('realtime_factor', 0.0),
            verbose=sim_data.get('verbose', True)
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result = {
            'simulation': {
                'elevator_name': self.elevator_name,
                'building': {
                    'floors': list(self.building.floors),
                    'home_floor': self.building.home_floor
                },
                'timing': {
                    'door_close_time': self.timing.door_close_time,
                    'direction_announce_time': self.timing.direction_announce_time,
                    'floor_travel_time': self.timing.floor_travel_time,
                    'arrival_pause': self.timing.arrival_pause,
                    'door_dwell_time': self.timing.door_dwell_time
                },
                'scenario': {
                    'duration': self.scenario.duration,
                    'requests': [r.to_dict() for r in self.scenario.requests]
                },
                'output': {
                    'event_log': self.output.event_log,
                    'trajectory_diagram': self.output.trajectory_diagram
                },
                'realtime_factor': self.realtime_factor,
                'verbose': self.verbose
            }
        }

        if self.building.display_names is not None:
            result['simulation']['building']['display_names'] = dict(self.building.display_names)

        return result

    def validate(self):
        """Validate configuration consistency"""
        floors = set(self.building.floors)
        for request in self.scenario.requests:
            if request.floor is not None and request.floor not in floors:
                raise ValueError(f"request at t={request.time} refers to unknown floor '{request.floor}'")
            if request.time > self.scenario.duration:
                raise ValueError(f"request at t={request.time} is after the end of the scenario ({self.scenario.duration})")
