"""Configuration resolution for evalsh.

Each setting resolves with priority: explicit argument > environment
variable > YAML config file > default. The config file path comes from the
``config_file`` argument or ``EVALSH_CONFIG``.

Example config file:

    server_url: http://127.0.0.1:5984
    prompt: "db> "
    read_timeout: 30
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from evalsh.core.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "EVALSH_CONFIG"

ENV_KEYS = {
    "server_url": "EVALSH_URL",
    "prompt": "EVALSH_PROMPT",
    "continuation_prompt": "EVALSH_CONTINUATION_PROMPT",
    "history_file": "EVALSH_HISTORY_FILE",
    "history_length": "EVALSH_HISTORY_LENGTH",
    "connect_timeout": "EVALSH_CONNECT_TIMEOUT",
    "read_timeout": "EVALSH_READ_TIMEOUT",
}


@dataclass
class EvalshConfig:
    """Resolved shell configuration."""

    server_url: str = "http://127.0.0.1:5984"

    # Prompts
    prompt: str = ">>> "
    continuation_prompt: str = "... "

    # Readline history
    history_file: str = "~/.evalsh_history"
    history_length: int = 1000

    # HTTP timeouts (seconds)
    connect_timeout: float = 10.0
    read_timeout: float = 60.0


def _read_config_file(path: str) -> dict[str, Any]:
    try:
        content = Path(path).expanduser().read_text()
    except FileNotFoundError:
        logger.warning("Config file not found, ignoring: %s", path)
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    known = {f.name for f in fields(EvalshConfig)}
    unknown = set(data) - known
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
    return {k: v for k, v in data.items() if k in known}


def _coerce(name: str, value: Any, kind: type) -> Any:
    if kind is str:
        return str(value)
    try:
        return kind(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid value for {name}: {value!r}") from None


def load_config(config_file: str | None = None, **overrides: Any) -> EvalshConfig:
    """Resolve configuration from arguments, environment and config file.

    Args:
        config_file: Optional YAML file path. Defaults to EVALSH_CONFIG.
        **overrides: Field values that win over every other source.
            None values are treated as not given.

    Raises:
        ConfigError: On unknown overrides, bad YAML, or bad values.
    """
    defaults = EvalshConfig()
    known = {f.name: type(getattr(defaults, f.name)) for f in fields(EvalshConfig)}

    unknown = set(overrides) - set(known)
    if unknown:
        raise ConfigError(f"Unknown config options: {', '.join(sorted(unknown))}")

    path = config_file or os.environ.get(CONFIG_ENV)
    file_config = _read_config_file(path) if path else {}

    values: dict[str, Any] = {}
    for name, kind in known.items():
        if overrides.get(name) is not None:
            raw = overrides[name]
        elif os.environ.get(ENV_KEYS[name]):
            raw = os.environ[ENV_KEYS[name]]
        elif file_config.get(name) is not None:
            raw = file_config[name]
        else:
            continue
        values[name] = _coerce(name, raw, kind)

    return EvalshConfig(**values)
