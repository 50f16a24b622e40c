import os
import sys
from pathlib import Path

# Headless plotting for the analyzer tests
os.environ.setdefault("MPLBACKEND", "Agg")

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
import simpy

from config.simulation import SimulationConfig, BuildingConfig
from liftsim.core.building import Building
from liftsim.system import build_lift_system


def make_config(home_floor="F1", **kwargs) -> SimulationConfig:
    return SimulationConfig(building=BuildingConfig(home_floor=home_floor), verbose=False, **kwargs)


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def building():
    return Building.default()


@pytest.fixture
def lift(env):
    """Default mall lift, idle at F1 with the door open."""
    return build_lift_system(env, make_config())


@pytest.fixture
def lift_factory(env):
    def factory(home_floor="F1", player=None, **kwargs):
        return build_lift_system(env, make_config(home_floor, **kwargs), player=player)
    return factory
