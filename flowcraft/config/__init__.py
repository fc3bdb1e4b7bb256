"""
Load configuration from YAML.
Default: flowcraft/config/default.yaml. Override: --config <file> or FLOWCRAFT_CONFIG.
"""
import os
from pathlib import Path
from typing import Any

import yaml

from flowcraft.core.config import APP_NAMESPACE, CAPACITY, ENV_CONFIG, LOCK_TIMEOUT, STATE_FILE
from flowcraft.core.exceptions import ConfigError

_CACHE: dict[str, Any] | None = None
_CONFIG_DIR = Path(__file__).resolve().parent


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (recursive). base is not mutated."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError("Invalid YAML in %s: %s" % (path, e)) from e
    return data if isinstance(data, dict) else {}


def _defaults() -> dict:
    """Built-in defaults (no file)."""
    return {
        "data_dir": None,
        "app_namespace": APP_NAMESPACE,
        "state_file": STATE_FILE,
        "recent": {"capacity": CAPACITY, "lock_timeout": LOCK_TIMEOUT},
        "log_level": None,
        "log_dir": None,
    }


def _check(cfg: dict) -> dict:
    recent = cfg.get("recent") or {}
    try:
        capacity = int(recent.get("capacity", CAPACITY))
        timeout = float(recent.get("lock_timeout", LOCK_TIMEOUT))
    except (TypeError, ValueError) as e:
        raise ConfigError("Invalid recent settings: %s" % e) from e
    if capacity < 1:
        raise ConfigError("recent.capacity must be >= 1, got %d" % capacity)
    if timeout <= 0:
        raise ConfigError("recent.lock_timeout must be > 0, got %s" % timeout)
    cfg["recent"] = {"capacity": capacity, "lock_timeout": timeout}
    return cfg


def load_config(override_path: str | Path | None = None) -> dict:
    """
    Load config: defaults + default.yaml + env FLOWCRAFT_CONFIG + optional override file.
    Returns merged dict. Cached after first call unless override_path is given.
    """
    global _CACHE
    if override_path is not None:
        _CACHE = None

    if _CACHE is not None:
        return _CACHE

    base = _defaults()
    default_file = _CONFIG_DIR / "default.yaml"
    if default_file.exists():
        base = _deep_merge(base, _load_yaml(default_file))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path and Path(env_path).exists():
        base = _deep_merge(base, _load_yaml(Path(env_path)))

    if override_path is not None:
        p = Path(override_path)
        if p.exists():
            base = _deep_merge(base, _load_yaml(p))

    _CACHE = _check(base)
    return _CACHE


def get_config(override_path: str | Path | None = None) -> dict:
    """Alias for load_config; use for read-only access."""
    return load_config(override_path)


def reset_config() -> None:
    """Clear cache (e.g. for tests)."""
    global _CACHE
    _CACHE = None
