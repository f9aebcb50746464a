from __future__ import annotations

# catalog/config.py
from dataclasses import dataclass, fields, replace
import os
import yaml

# Resolution order, highest first:
# 1) explicit overrides (CLI flags)
# 2) CATALOG_* environment variables
# 3) config.yaml (or the file named by CATALOG_CONFIG)
# 4) defaults below
_PROJECT_ROOT = os.path.dirname(os.path.dirname(__file__))
_ENV_PREFIX = "CATALOG_"


@dataclass(frozen=True)
class AppConfig:
    api_host: str = "localhost"
    api_port: int = 8000
    racing_db_path: str = os.path.join(_PROJECT_ROOT, "racing.db")
    sports_db_path: str = os.path.join(_PROJECT_ROOT, "sports.db")
    log_db_path: str = os.path.join(_PROJECT_ROOT, "catalog_log.db")
    seed_count: int = 100
    log_level: str = "INFO"


def _read_config_yaml(path: str | None = None) -> dict:
    cfg_path = path or os.environ.get(_ENV_PREFIX + "CONFIG") or os.path.join(_PROJECT_ROOT, "config.yaml")
    if not os.path.exists(cfg_path):
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(cfg, dict):
        return {}
    names = {f.name for f in fields(AppConfig)}
    return {k: v for k, v in cfg.items() if k in names and v is not None and str(v).strip()}


def _read_env() -> dict:
    out = {}
    for f in fields(AppConfig):
        v = os.environ.get(_ENV_PREFIX + f.name.upper())
        if v is not None and v.strip():
            out[f.name] = v.strip()
    return out


def _coerce(values: dict) -> dict:
    types = {f.name: f.type for f in fields(AppConfig)}
    out = {}
    for k, v in values.items():
        # annotations are strings under `from __future__ import annotations`
        if types.get(k) == "int":
            out[k] = int(v)
        else:
            out[k] = str(v)
    return out


def _ensure_parent_dir(path: str):
    dirn = os.path.dirname(path) or "."
    os.makedirs(dirn, exist_ok=True)


def load_config(config_path: str | None = None, **overrides) -> AppConfig:
    """
    Build the application config from yaml, environment and explicit overrides.
    Unknown override keys raise TypeError; None overrides are ignored so argparse
    defaults can be passed straight through.
    """
    merged: dict = {}
    merged.update(_read_config_yaml(config_path))
    merged.update(_read_env())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    cfg = replace(AppConfig(), **_coerce(merged))
    for p in (cfg.racing_db_path, cfg.sports_db_path, cfg.log_db_path):
        _ensure_parent_dir(p)
    return cfg
