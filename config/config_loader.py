"""
YAML scenario files

A scenario file holds one mapping, optionally under a top-level
`simulation:` key. Anything that cannot become a valid SimulationConfig,
including YAML syntax errors, is reported as ValueError naming the source.
"""

import yaml
from pathlib import Path
from typing import Union

from .simulation import SimulationConfig

PathLike = Union[str, Path]


def parse_simulation_config(text: str, source: str = "<string>") -> SimulationConfig:
    """
    Build and validate a SimulationConfig from YAML text.

    Raises:
        ValueError: On YAML errors, a non-mapping document, malformed
            request entries or inconsistent values
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"{source}: invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{source}: expected a mapping at the top level")

    try:
        config = SimulationConfig.from_dict(data)
        config.validate()
    except (AttributeError, TypeError) as e:
        # A section or request entry of the wrong shape, e.g. a list where a mapping belongs
        raise ValueError(f"{source}: malformed configuration: {e}") from e
    except ValueError as e:
        raise ValueError(f"{source}: {e}") from e
    return config


def load_simulation_config(file_path: PathLike) -> SimulationConfig:
    """
    Load a scenario file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the content is not a valid configuration
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")
    return parse_simulation_config(file_path.read_text(encoding='utf-8'), str(file_path))


def dump_simulation_config(config: SimulationConfig) -> str:
    """YAML text that parse_simulation_config reads back to an equal config."""
    return yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)


def save_simulation_config(config: SimulationConfig, file_path: PathLike):
    """Write a scenario file, creating parent directories as needed."""
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(dump_simulation_config(config), encoding='utf-8')
