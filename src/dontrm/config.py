"""Configuration management for dontrm."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

# Conditional import for Python 3.10 compatibility
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found]

DRY_RUN_ENV = "DRY_RUN"
CONFIG_ENV = "DONTRM_CONFIG"
TRUTHY_VALUES = ("1", "true")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DefaultsConfig:
    """Default behavior options."""

    dry_run: bool = False
    rm_path: str = "/usr/bin/rm"


@dataclass
class LoggingConfig:
    """Diagnostic output settings."""

    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        """Convert level name to a logging constant."""
        return getattr(logging, self.level.upper(), logging.WARNING)


@dataclass
class Config:
    """Root configuration container."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # Metadata (not from TOML)
    _source: Path | None = field(default=None, repr=False)


SECTION_TYPES: dict[str, type] = {
    "defaults": DefaultsConfig,
    "logging": LoggingConfig,
}


def get_xdg_config_home() -> Path:
    """Get XDG config home, respecting environment variable."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """
    Get the config file path.

    There is deliberately no per-directory override: a file in the current
    directory must not be able to change which binary receives the arguments.
    """
    return get_xdg_config_home() / "dontrm" / "config.toml"


def is_dry_run(environ: Mapping[str, str] | None = None) -> bool:
    """Check the DRY_RUN environment toggle ("1" or "true")."""
    if environ is None:
        environ = os.environ
    return environ.get(DRY_RUN_ENV, "") in TRUTHY_VALUES


def _load_toml(path: Path) -> dict[str, Any]:
    """Load and parse a TOML file."""
    with open(path, "rb") as f:
        result: dict[str, Any] = tomllib.load(f)
        return result


def _validate_config(data: dict[str, Any]) -> list[str]:
    """Validate TOML data and return list of errors."""
    errors: list[str] = []

    defaults = data.get("defaults", {})
    rm_path = defaults.get("rm_path")
    if rm_path is not None and (not isinstance(rm_path, str) or not rm_path.startswith("/")):
        errors.append(f"Invalid defaults.rm_path: '{rm_path}' (must be an absolute path)")

    dry_run = defaults.get("dry_run")
    if dry_run is not None and not isinstance(dry_run, bool):
        errors.append(f"Invalid defaults.dry_run: '{dry_run}' (use: true, false)")

    level = data.get("logging", {}).get("level")
    if level is not None and (not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS):
        errors.append(
            f"Invalid logging.level: '{level}' (use: {', '.join(VALID_LOG_LEVELS)})"
        )

    return errors


def _filter_known_keys(data: dict[str, Any], dataclass_type: type) -> dict[str, Any]:
    """Filter dict to only include keys that are valid fields for the dataclass."""
    valid_fields = {f.name for f in fields(dataclass_type)}
    return {k: v for k, v in data.items() if k in valid_fields}


def _dict_to_config(data: dict[str, Any], source: Path | None = None) -> Config:
    """Convert parsed TOML dict to Config dataclass."""
    sections = {
        name: cls(**_filter_known_keys(data.get(name, {}), cls))
        for name, cls in SECTION_TYPES.items()
    }
    return Config(**sections, _source=source)


def load_config_from_file(path: Path) -> Config:
    """
    Load configuration from a specific file.

    Raises:
        ValueError: If the file is not valid TOML or fails validation
    """
    try:
        data = _load_toml(path)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e
    errors = _validate_config(data)
    if errors:
        raise ValueError(f"Config validation failed ({path}): {'; '.join(errors)}")
    return _dict_to_config(data, path)


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """
    Load configuration and apply environment overrides.

    Priority (highest to lowest):
    1. DRY_RUN environment toggle (can only switch dry run on)
    2. $DONTRM_CONFIG, or ~/.config/dontrm/config.toml
    3. Built-in defaults

    Returns:
        Config instance

    Raises:
        ValueError: If the config file is invalid or DONTRM_CONFIG points nowhere
    """
    if environ is None:
        environ = os.environ

    explicit = environ.get(CONFIG_ENV)
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise ValueError(f"{CONFIG_ENV} points to a missing file: {path}")
        config = load_config_from_file(path)
    else:
        path = get_config_path()
        config = load_config_from_file(path) if path.exists() else Config()

    if is_dry_run(environ):
        config.defaults.dry_run = True

    return config
