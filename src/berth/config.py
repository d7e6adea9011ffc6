"""Configuration loading."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from berth.errors import ConfigError
from berth.models.config import BerthConfig


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("berth.yaml")


def read_config_file(path: Path) -> Dict[str, Any]:
    """Read and parse a YAML configuration file."""
    yaml = YAML(typ="safe")
    try:
        data = yaml.load(path.read_text())
    except (OSError, YAMLError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Optional[Path] = None, **overrides: Any) -> BerthConfig:
    """Build the configuration from a YAML file and explicit overrides.

    Overrides set to None are ignored, so unset command-line options fall
    back to the file. A missing default file is not an error; a missing
    explicitly requested file is.
    """
    if path is not None:
        config_file = Path(path)
        if not config_file.exists():
            raise ConfigError(f"Config file not found: {config_file}")
        data = read_config_file(config_file)
    elif DEFAULT_CONFIG_FILE.exists():
        config_file = DEFAULT_CONFIG_FILE
        data = read_config_file(config_file)
    else:
        config_file = None
        data = {}

    runtime_overrides = {
        key: overrides.pop(key)
        for key in ("docker_host", "removal_timeout")
        if key in overrides
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    runtime_data = dict(data.get("runtime") or {})
    runtime_data.update({k: v for k, v in runtime_overrides.items() if v is not None})
    data["runtime"] = runtime_data

    try:
        config = BerthConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if config_file is not None:
        logger.debug(f"Loaded config: {config_file}")
    return config
