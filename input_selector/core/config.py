"""Configuration loader for the input selector.

Loads settings from environment variables (.env file) and config/default.yaml,
with environment variables taking precedence over YAML defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from input_selector.core.state_machine import InputState


# Project root is two levels up from this file (input_selector/core/config.py -> project root)
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class Settings:
    """Immutable configuration for the input selector."""

    # Selector
    initial_input: InputState
    switch_presses: int

    # Logging
    log_level: str


def _load_yaml_defaults(yaml_path: Path) -> dict[str, Any]:
    """Load default values from a YAML config file.

    Returns an empty dict if the file is missing or empty.
    """
    if not yaml_path.exists():
        return {}
    with open(yaml_path) as f:
        data = yaml.safe_load(f)
    return data if data else {}


def _get(env_key: str, yaml_defaults: dict[str, Any], yaml_key: str, default: Any = None) -> Any:
    """Get a config value with precedence: env var > yaml default > hardcoded default.

    Args:
        env_key: Environment variable name.
        yaml_defaults: Dictionary from YAML config file.
        yaml_key: Dot-separated key path in YAML (e.g., "selector.initial_input").
        default: Fallback default value.

    Returns:
        The resolved configuration value.
    """
    env_val = os.environ.get(env_key)
    if env_val is not None and env_val != "":
        return env_val

    node = yaml_defaults
    for part in yaml_key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return default
    return node if node is not None else default


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_presses(raw: Any) -> int:
    # YAML turns "yes" into True and "2.9" into a float; neither is a press count
    if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
        raise ValueError(f"SWITCH_PRESSES must be an integer, got {raw!r}.")
    try:
        presses = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"SWITCH_PRESSES must be an integer, got {raw!r}.") from None
    if presses < 0:
        raise ValueError(f"SWITCH_PRESSES must not be negative, got {presses}.")
    return presses


def _parse_log_level(raw: Any) -> str:
    level = str(raw).strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {raw!r}."
        )
    return level


def load_settings(
    env_path: Path | None = None,
    yaml_path: Path | None = None,
) -> Settings:
    """Load settings from .env and config/default.yaml.

    Environment variables take precedence over YAML defaults.

    Args:
        env_path: Path to .env file. Defaults to PROJECT_ROOT/.env.
        yaml_path: Path to YAML config. Defaults to PROJECT_ROOT/config/default.yaml.

    Returns:
        Frozen Settings dataclass with all configuration values.

    Raises:
        ValueError: If the initial input is unknown, the switch count is not a
            non-negative integer, or the log level is unknown.
    """
    if env_path is None:
        env_path = PROJECT_ROOT / ".env"
    if yaml_path is None:
        yaml_path = PROJECT_ROOT / "config" / "default.yaml"

    load_dotenv(env_path, override=False)
    yaml_defaults = _load_yaml_defaults(yaml_path)

    initial_name = str(
        _get("INITIAL_INPUT", yaml_defaults, "selector.initial_input", "Bluetooth")
    )
    try:
        initial_input = InputState.from_name(initial_name)
    except ValueError as e:
        raise ValueError(f"INITIAL_INPUT is invalid: {e}") from None

    return Settings(
        initial_input=initial_input,
        switch_presses=_parse_presses(
            _get("SWITCH_PRESSES", yaml_defaults, "selector.switch_presses", 5)
        ),
        log_level=_parse_log_level(
            _get("LOG_LEVEL", yaml_defaults, "logging.level", "WARNING")
        ),
    )
