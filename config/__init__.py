"""
Configuration management package

Provides the simulation configuration classes and their YAML loader.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    TimingConfig,
    ScenarioConfig,
    ScheduledRequest,
    OutputConfig
)

from .config_loader import (
    parse_simulation_config,
    load_simulation_config,
    dump_simulation_config,
    save_simulation_config
)

__all__ = [
    'SimulationConfig',
    'BuildingConfig',
    'TimingConfig',
    'ScenarioConfig',
    'ScheduledRequest',
    'OutputConfig',

    'parse_simulation_config',
    'load_simulation_config',
    'dump_simulation_config',
    'save_simulation_config',
]
