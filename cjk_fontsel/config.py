"""Configuration loading.

Settings come from an optional YAML file and from ``CJK_FONTSEL_*``
environment variables (which win over the file). Command-line flags are
applied on top by the CLI.

Example ``config.yaml``::

    alias_dir: /usr/share/cjk-fontsel/aliases
    system_wide: false
    strict: true
    log_level: INFO
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from cjk_fontsel.exceptions import ConfigError
from cjk_fontsel.paths import user_config_root

ENV_CONFIG = "CJK_FONTSEL_CONFIG"
ENV_ALIAS_DIR = "CJK_FONTSEL_ALIAS_DIR"
ENV_LOG_LEVEL = "CJK_FONTSEL_LOG_LEVEL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Runtime settings for cjk-fontsel."""

    alias_dir: Path | None = None
    system_wide: bool = False
    strict: bool = False
    log_level: str = "WARNING"

    @staticmethod
    def default_path(environ: Mapping[str, str] | None = None) -> Path | None:
        """Return the config file path to use, or None if there is none."""
        env = os.environ if environ is None else environ

        explicit = env.get(ENV_CONFIG)
        if explicit:
            return Path(explicit)

        root = user_config_root(env)
        if root is None:
            return None
        return root / "cjk-fontsel" / "config.yaml"

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> Config:
        """Load settings from ``path`` (or the default location) and the environment.

        A missing default file is not an error. A missing explicit file is.

        Raises:
            ConfigError: If the file cannot be read or holds invalid values.
        """
        env = os.environ if environ is None else environ
        explicit = path is not None or bool(env.get(ENV_CONFIG))
        if path is None:
            path = cls.default_path(env)

        data: dict[str, Any] = {}
        if path is not None and (explicit or path.is_file()):
            data = _read_yaml(path)

        config = cls.from_dict(data, source=str(path))

        if env.get(ENV_ALIAS_DIR):
            config.alias_dir = Path(env[ENV_ALIAS_DIR])
        if env.get(ENV_LOG_LEVEL):
            config.log_level = _check_log_level(env[ENV_LOG_LEVEL], ENV_LOG_LEVEL)

        return config

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], source: str = "<dict>") -> Config:
        """Build a Config from a parsed mapping."""
        unknown = set(data) - {"alias_dir", "system_wide", "strict", "log_level"}
        if unknown:
            raise ConfigError(
                f"Unknown keys in {source}: {', '.join(sorted(unknown))}",
                details={"keys": sorted(unknown)},
            )

        config = cls()
        if data.get("alias_dir") is not None:
            if not isinstance(data["alias_dir"], str):
                raise ConfigError(f"'alias_dir' must be a string in {source}")
            config.alias_dir = Path(data["alias_dir"]).expanduser()
        for key in ("system_wide", "strict"):
            if key in data:
                if not isinstance(data[key], bool):
                    raise ConfigError(f"'{key}' must be true or false in {source}")
                setattr(config, key, data[key])
        if "log_level" in data:
            config.log_level = _check_log_level(data["log_level"], source)
        return config


def _check_log_level(value: Any, source: str) -> str:
    level = str(value).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level {value!r} in {source}; "
            f"expected one of {', '.join(LOG_LEVELS)}"
        )
    return level


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data
