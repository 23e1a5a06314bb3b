"""YAML configuration loading and validation."""

import yaml
from pathlib import Path
from typing import Any, Mapping, Union
from pydantic import ValidationError
from .schema import GateConfig

class ConfigLoadError(Exception):
    """Exception raised when configuration loading or validation fails."""
    pass

def _build_config(data: Any, origin: str) -> GateConfig:
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise ConfigLoadError(f"{origin} must contain a YAML mapping, got {type(data)}")

    try:
        return GateConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigLoadError(f"Config validation failed: {e}")

def load_config(path: Union[str, Path]) -> GateConfig:
    """
    Load and validate a gate configuration from a YAML file.

    Args:
        path: Path to YAML config file

    Returns:
        GateConfig: Validated configuration

    Raises:
        ConfigLoadError: If file cannot be read or the configuration is invalid
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML in {path}: {e}")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read config file {path}: {e}")

    return _build_config(data, f"Config file {path}")

def load_config_from_string(yaml_content: str) -> GateConfig:
    """
    Load and validate a gate configuration from a YAML string.

    Raises:
        ConfigLoadError: If YAML is invalid or validation fails
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML content: {e}")

    return _build_config(data, "Config content")

def load_config_from_args(args: Mapping[str, str]) -> GateConfig:
    """
    Build a configuration from a factory-style argument map.

    Values arrive as strings (``{"filter": "true", "minSentenceLength": "4"}``)
    and are parsed by the schema; anything unparseable is fatal.

    Raises:
        ConfigLoadError: If an argument is unknown or cannot be parsed
    """
    return _build_config(dict(args), "Argument map")
