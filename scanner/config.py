"""Configuration file parsing for the gear scanner."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

try:
    import tomllib
except ImportError:
    import toml as tomllib  # type: ignore

from schematic.errors import ConfigError


DEFAULT_CONFIG: Dict[str, Any] = {
    "input": "input.txt",
    "format": "text",
    "output": None,
    "log_level": "WARNING",
    "log_file": None,
}

OUTPUT_FORMATS = {"text", "json"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_content(content: str, suffix: str) -> Any:
    """Parse file content according to its extension."""
    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(content)
    
    elif suffix == ".json":
        return json.loads(content)
    
    elif suffix == ".toml":
        return tomllib.loads(content)
    
    else:
        # Try to parse as JSON first, then YAML
        try:
            return json.loads(content)
        except json.JSONDecodeError:
            return yaml.safe_load(content)


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load and validate a configuration file.
    
    YAML, JSON and TOML are supported, chosen by file extension.
    
    Args:
        path: Path to the configuration file.
    
    Returns:
        Dictionary with the recognised keys that the file sets.
    
    Raises:
        ConfigError: If the file cannot be read or parsed, or contains
            unknown keys or invalid values.
    """
    file_path = Path(path)
    
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"cannot read config file '{file_path}': {e}") from e
    
    try:
        data = _parse_content(content, file_path.suffix.lower())
    except Exception as e:
        raise ConfigError(f"cannot parse config file '{file_path}': {e}") from e
    
    # An empty YAML document parses to None
    if data is None:
        return {}
    
    if not isinstance(data, dict):
        raise ConfigError(f"config file '{file_path}' must contain a mapping")
    
    unknown = set(data) - set(DEFAULT_CONFIG)
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(sorted(unknown))}")
    
    return validate_config(data)


def validate_config(data: Dict[str, Any]) -> Dict[str, Any]:
    """Check value types and normalise values of a configuration mapping."""
    # A null value means the key is not set
    config = {k: v for k, v in data.items() if v is not None}
    
    for key in ("input", "output", "log_file"):
        value = config.get(key)
        if key in config and not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string")
    
    if "format" in config:
        fmt = str(config["format"]).lower()
        if fmt not in OUTPUT_FORMATS:
            raise ConfigError(f"'format' must be one of: {', '.join(sorted(OUTPUT_FORMATS))}")
        config["format"] = fmt
    
    if "log_level" in config:
        level = str(config["log_level"]).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"'log_level' must be one of: {', '.join(sorted(LOG_LEVELS))}")
        config["log_level"] = level
    
    return config


def merge_config(file_config: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combine defaults, file values and command-line overrides.
    
    Values set to None in either mapping are treated as not given.
    """
    merged = dict(DEFAULT_CONFIG)
    merged.update({k: v for k, v in file_config.items() if v is not None})
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return merged
