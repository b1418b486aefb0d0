"""Prompt defaults, optionally loaded from a YAML file.

Config YAML format (gocompile.yaml):
- name_format: "0" (default), "1" ({goos}) or "2" (win/mac/{goos})
- version: version string used by name format 0
- build_dir: output root (default: build)
- zip: true to zip each output directory after building
- go: compiler binary (default: go)
- build_flags: extra arguments passed to `go build`
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)

CONFIG_FILENAME = "gocompile.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "name_format": "0",
    "version": "",
    "build_dir": "build",
    "zip": False,
    "go": "go",
    "build_flags": [],
}


class ConfigError(ValueError):
    """Invalid or unreadable configuration."""


def _coerce(key: str, value: Any) -> Any:
    if key == "zip":
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("y", "yes", "true", "n", "no", "false"):
            return value.strip().lower() in ("y", "yes", "true")
        msg = f"zip must be a boolean, got {value!r}"
        raise ConfigError(msg)
    if key == "build_flags":
        if isinstance(value, str):
            try:
                return shlex.split(value)
            except ValueError as e:
                msg = f"build_flags {value!r}: {e}"
                raise ConfigError(msg) from e
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return list(value)
        msg = f"build_flags must be a list of strings, got {value!r}"
        raise ConfigError(msg)
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        msg = f"{key} must be a scalar, got {value!r}"
        raise ConfigError(msg)
    return str(value)


def resolve_config(overrides: dict[str, Any] | None) -> dict[str, Any]:
    """Return config dict with defaults filled. Unknown keys are ignored."""
    out = dict(DEFAULT_CONFIG)
    out["build_flags"] = list(DEFAULT_CONFIG["build_flags"])
    if not overrides:
        return out
    for k, v in overrides.items():
        if k not in out:
            log.debug("Ignoring unknown config key %r", k)
            continue
        out[k] = _coerce(k, v)
    return out


def load_config(path: Path | None) -> dict[str, Any]:
    """Load config from YAML at path (None: defaults only). Raises ConfigError."""
    import yaml

    if path is None:
        return resolve_config(None)
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        msg = f"Cannot read config {path}: {e}"
        raise ConfigError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise ConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"Config {path} must be a mapping"
        raise ConfigError(msg)
    log.debug("Loaded config %s", path)
    return resolve_config(data)


def find_config(project_root: Path) -> Path | None:
    """gocompile.yaml in project_root if present."""
    p = project_root / CONFIG_FILENAME
    return p if p.is_file() else None
