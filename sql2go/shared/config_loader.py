"""Configuration loading and merging for the generator CLI."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final, Mapping

import yaml

from .errors import ConfigError

# Expected Python type for each configuration key
_KEY_TYPES: Final[dict[str, type]] = {
    "driver": str,
    "dbconnect": str,
    "database": str,
    "tables": str,
    "pkg": str,
    "outfile": str,
    "exportfields": bool,
    "dbinterface": bool,
}

_REQUIRED: Final[tuple[str, ...]] = ("dbconnect", "database")


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Fully merged settings for one generator run."""

    driver: str = "mssql"
    dbconnect: str = ""
    database: str = ""
    tables: str | None = None
    pkg: str = "main"
    outfile: str | None = None
    exportfields: bool = True
    dbinterface: bool = False

    @classmethod
    def merge(
        cls,
        overrides: Mapping[str, Any],
        file_values: Mapping[str, Any] | None = None,
        config_path: str | None = None,
    ) -> GeneratorConfig:
        """Build a config from CLI values over file values over defaults.

        ``None`` or an empty string, on the command line or in the file,
        counts as not given and falls through to the next source.

        Raises:
            ConfigError: If a required setting is missing after merging.
        """
        values: dict[str, Any] = {}
        for item in fields(cls):
            cli_value = overrides.get(item.name)
            file_value = file_values.get(item.name) if file_values else None
            if _is_set(cli_value):
                values[item.name] = cli_value
            elif _is_set(file_value):
                values[item.name] = file_value

        config = cls(**values)
        for key in _REQUIRED:
            if not getattr(config, key):
                raise ConfigError(
                    f"missing required setting (use --{key} or the config file)",
                    config_path,
                    key=key,
                )
        return config


def load_config(config_path: Path) -> dict[str, Any]:
    """Load and validate a configuration file.

    Args:
        config_path: Path to a YAML file with a top-level mapping.

    Returns:
        The validated settings mapping.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config file: {e}", str(config_path)) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", str(config_path)) from e

    # An empty file is an empty configuration
    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping", str(config_path))

    for key, value in data.items():
        expected = _KEY_TYPES.get(key)
        if expected is None:
            raise ConfigError("unknown setting", str(config_path), key=str(key))
        if value is not None and not isinstance(value, expected):
            raise ConfigError(
                f"expected {expected.__name__}, got {type(value).__name__}",
                str(config_path),
                key=key,
            )

    return data
