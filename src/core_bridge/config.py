"""
Configuration loading, validation, and typed models.

Supports:
  - YAML config file (config/config.yaml, see config/config.yaml.example)
  - Environment variable override for the calculator's initial value
    (CORE_BRIDGE_INITIAL_VALUE)

The default config path and relative log directories are resolved against
the current working directory, so an installed package reads the same
config/config.yaml as a source checkout.  A missing file at the default
location is not an error; defaults are used.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .calculator import INT32_MAX, INT32_MIN

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ENV_INITIAL_VALUE",
    "ConfigError",
    "CalculatorConfig",
    "LoggingConfig",
    "AppConfig",
    "load_config",
]

logger = logging.getLogger(__name__)

# Relative to the working directory the command is run from
DEFAULT_CONFIG_PATH = os.path.join("config", "config.yaml")

ENV_INITIAL_VALUE = "CORE_BRIDGE_INITIAL_VALUE"


# ---------------------------------------------------------------------------
# Typed configuration models
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""


@dataclass(frozen=True)
class CalculatorConfig:
    initial_value: int = 0


@dataclass(frozen=True)
class LoggingConfig:
    verbose: bool = False
    log_dir: str | None = None


@dataclass(frozen=True)
class AppConfig:
    calculator: CalculatorConfig = field(default_factory=CalculatorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def _parse_initial_value(value, source: str) -> int:
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ConfigError(f"{source} must be an integer, got {value!r}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{source} must be an integer, got {type(value).__name__}")
    if not INT32_MIN <= value <= INT32_MAX:
        raise ConfigError(f"{source} {value} is outside the 32-bit signed range")
    return value


def _section(raw: dict, name: str) -> dict:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return section


def load_config(config_path: str | None = None) -> AppConfig:
    """Load and validate the YAML configuration file.

    When *config_path* is None the default location is tried and silently
    skipped if absent.  An explicitly given path must exist.

    Raises:
        ConfigError: If the file is missing (explicit path) or invalid.
    """
    explicit = config_path is not None
    path = Path(config_path) if explicit else Path.cwd() / DEFAULT_CONFIG_PATH

    raw: dict = {}
    if path.exists():
        with open(path, "r") as f:
            try:
                loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Could not parse {path}: {e}") from e
        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(
                f"Invalid config file format: expected YAML mapping, got {type(loaded).__name__}"
            )
        raw = loaded or {}
        logger.debug("Config loaded from %s", path)
    elif explicit:
        raise ConfigError(
            f"Config file not found: {path}\n"
            "Copy config/config.yaml.example to config/config.yaml and adjust the values."
        )
    else:
        logger.debug("No config file at %s — using defaults", path)

    # --- Calculator (env var > YAML) ---
    calc_section = _section(raw, "calculator")
    env_value = os.environ.get(ENV_INITIAL_VALUE)
    if env_value:
        initial_value = _parse_initial_value(env_value, ENV_INITIAL_VALUE)
    else:
        initial_value = _parse_initial_value(
            calc_section.get("initial_value", 0), "calculator.initial_value"
        )

    # --- Logging ---
    log_section = _section(raw, "logging")
    verbose = log_section.get("verbose", False)
    if not isinstance(verbose, bool):
        raise ConfigError("logging.verbose must be true or false")
    log_dir = log_section.get("log_dir") or None
    if log_dir is not None and not isinstance(log_dir, str):
        raise ConfigError("logging.log_dir must be a path string")
    if log_dir and not os.path.isabs(log_dir):
        log_dir = os.path.join(os.getcwd(), log_dir)

    return AppConfig(
        calculator=CalculatorConfig(initial_value=initial_value),
        logging=LoggingConfig(verbose=verbose, log_dir=log_dir),
    )
