#!/usr/bin/env python3
"""
Settings loader for xkcdpwd.

Layers, lowest precedence first:
    1. bundled defaults      xkcdpwd/configs/app.yaml
    2. user config file      <config dir>/xkcdpwd/xkcdpwd.conf (YAML)
    3. environment           XKCDPWD_WORDS, XKCDPWD_MIN_LENGTH, ...
Command-line flags are applied on top by the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping
import logging
import os
import re
import sys

import yaml


logger = logging.getLogger(__name__)

APP_NAME = "xkcdpwd"
PACKAGE_DIR = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_DIR / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"
ENV_PREFIX = "XKCDPWD_"


@lru_cache(maxsize=1)
def load_app_config() -> dict:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    data = yaml.safe_load(APP_CONFIG_PATH.read_text())
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str, base: Path | None = None) -> Path:
    """Resolve a path string relative to the working directory (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    expanded = os.path.expanduser(str(value))
    path = Path(expanded)
    if not path.is_absolute():
        base = base or Path.cwd()
        path = (base / path).resolve()
    return path


# =============================================================================
# User Config Location
# =============================================================================

def default_config_dir(home: str | Path, platform: str | None = None,
                       environ: Mapping[str, str] | None = None) -> Path:
    """Per-user config directory for the given platform (default: this one)."""
    platform = platform or sys.platform
    environ = os.environ if environ is None else environ
    home = Path(home)

    if platform.startswith("win"):
        if environ.get("APPDATA"):
            return Path(environ["APPDATA"])
        return home / "AppData" / "Roaming"
    if platform == "darwin":
        return home / "Library" / "Application Support"
    if environ.get("XDG_CONFIG_HOME"):
        return Path(environ["XDG_CONFIG_HOME"])
    return home / ".config"


def default_config_file(app_name: str = APP_NAME, home: str | Path | None = None,
                        platform: str | None = None,
                        environ: Mapping[str, str] | None = None) -> Path:
    """Default path of the user config file, e.g. ~/.config/xkcdpwd/xkcdpwd.conf."""
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise ValueError("cannot determine user specific home directory") from e
    cfg_dir = default_config_dir(home, platform=platform, environ=environ)
    return cfg_dir / app_name / f"{app_name}.conf"


def load_user_config(path: Path, required: bool = False) -> dict:
    """
    Load a YAML user config file.

    A missing file yields {} unless required is set.

    Raises:
        ValueError: If the file is required but missing, or is not a YAML mapping
    """
    if not path.exists():
        if required:
            raise ValueError(f"config file not found: {path}")
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding='utf-8'))
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"cannot read config file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file {path} must contain a mapping")
    logger.debug(f"Using config file: {path}")
    # Accept both a flat file and one nested under 'passphrase:'
    section = data.get("passphrase", data)
    if not isinstance(section, dict):
        raise ValueError(f"config file {path}: 'passphrase' must be a mapping")
    return dict(section)


def env_overrides(environ: Mapping[str, str] | None = None) -> dict:
    """Settings taken from XKCDPWD_* environment variables."""
    environ = os.environ if environ is None else environ
    overrides = {}
    for f in fields(Settings):
        key = ENV_PREFIX + f.name.upper()
        if key in environ:
            overrides[f.name] = environ[key]
    return overrides


# =============================================================================
# Resolved Settings
# =============================================================================

_INTEGER = re.compile(r"[+-]?\d+")


def _as_int(name: str, value: Any) -> int:
    """Whole numbers only; YAML floats and booleans are rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INTEGER.fullmatch(value.strip()):
        return int(value.strip())
    raise ValueError(f"setting '{name}' must be an integer, got {value!r}")


@dataclass
class Settings:
    """Passphrase generation options after all layers are merged."""
    words: int = None
    passphrases: int = None
    separator: str = None
    capitalize: str = None
    min_length: int = None
    max_length: int = None
    language: str = None

    def __post_init__(self):
        cfg = get_setting("passphrase", {}) or {}
        for f in fields(self):
            if getattr(self, f.name) is None:
                setattr(self, f.name, cfg.get(f.name))

        missing = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if missing:
            raise ValueError(f"passphrase settings missing in app.yaml: {', '.join(missing)}")

        for name in ("words", "passphrases", "min_length", "max_length"):
            setattr(self, name, _as_int(name, getattr(self, name)))
        for name in ("separator", "capitalize", "language"):
            setattr(self, name, str(getattr(self, name)))

    def merged(self, **overrides) -> "Settings":
        """Copy with non-None overrides applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return Settings(**values)


def load_settings(config_path: str | Path | None = None,
                  environ: Mapping[str, str] | None = None) -> Settings:
    """
    Merge bundled defaults, the user config file and the environment.

    Args:
        config_path: Explicit config file (must exist). Defaults to the
            per-user config file, which may be absent.
        environ: Environment mapping (default: os.environ)
    """
    if config_path is not None:
        user = load_user_config(resolve_path(config_path), required=True)
    else:
        try:
            path = default_config_file(environ=environ)
        except ValueError as e:
            logger.debug(f"Skipping user config: {e}")
            path = None
        user = load_user_config(path) if path else {}

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(user) - known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    values = {k: v for k, v in user.items() if k in known}
    values.update(env_overrides(environ))
    return Settings(**values)


__all__ = [
    "APP_NAME",
    "APP_CONFIG_PATH",
    "load_app_config",
    "get_setting",
    "resolve_path",
    "default_config_dir",
    "default_config_file",
    "load_user_config",
    "env_overrides",
    "Settings",
    "load_settings",
]
