# src/policy.py
"""
policy.py: fuzzy-match tuning constants + config.yaml loading

config.yaml (project root) example:
wordlist: "data/badwords.txt"
matching:
  max_distance: 2       # token flagged when distance < max_distance
  max_length_delta: 2   # only tokens within this many chars of the term
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

import yaml

log = logging.getLogger(__name__)

CONFIG_ENV = "UPPASSN_CONFIG"


def _find_config(path: str = "config.yaml") -> Optional[str]:
    # 1) env
    env = os.environ.get(CONFIG_ENV)
    if env and os.path.exists(env):
        return os.path.abspath(env)
    # 2) as-given
    if path and os.path.exists(path):
        return os.path.abspath(path)
    # 3) alongside this file (src/)
    here = os.path.dirname(os.path.abspath(__file__))
    cand1 = os.path.join(here, "config.yaml")
    # 4) parent of src (project root)
    cand2 = os.path.join(os.path.dirname(here), "config.yaml")
    for c in (cand1, cand2):
        if os.path.exists(c):
            return os.path.abspath(c)
    return None


def load_config_and_base(path: str = "config.yaml") -> Tuple[dict, str]:
    """Return (config dict, directory relative paths resolve against).

    No config anywhere is fine: ({}, cwd) and every caller uses defaults.
    """
    cfg_path = _find_config(path)
    if cfg_path is None:
        log.debug("no config found (tried %s and $%s), using defaults", path, CONFIG_ENV)
        return {}, os.getcwd()
    with open(cfg_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{cfg_path}: top level must be a mapping, got {type(cfg).__name__}")
    log.debug("loaded config from %s", cfg_path)
    return cfg, os.path.dirname(cfg_path)


def _as_limit(name: str, value) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"matching.{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"matching.{name} must be >= 0, got {value}")
    return value


@dataclass(frozen=True)
class MatchPolicy:
    max_distance: int = 2
    max_length_delta: int = 2

    def __post_init__(self):
        _as_limit("max_distance", self.max_distance)
        _as_limit("max_length_delta", self.max_length_delta)

    @classmethod
    def from_dict(cls, cfg: dict) -> "MatchPolicy":
        m = (cfg or {}).get("matching") or {}
        if not isinstance(m, dict):
            raise ValueError("matching must be a mapping")
        return cls(
            max_distance=m.get("max_distance", cls.max_distance),
            max_length_delta=m.get("max_length_delta", cls.max_length_delta),
        )

    @classmethod
    def from_config(cls, path: str = "config.yaml") -> "MatchPolicy":
        cfg, _ = load_config_and_base(path)
        return cls.from_dict(cfg)


DEFAULT_POLICY = MatchPolicy()
