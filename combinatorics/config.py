"""Run configuration for the command-line entry point.

A run is described by a YAML (``.yml`` / ``.yaml``) or JSON file; any value
given on the command line overrides the file.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

KINDS = ("combinations", "permutations", "sublists")


@dataclass(frozen=True)
class RunConfig:
    """Single enumeration run.

    Attributes:
        kind: One of ``KINDS``.
        items: Values to enumerate over (snapshotted, order preserved).
        r: Selection size; ``None`` only for full permutations.
        limit: Maximum number of rows to emit, ``None`` for all.
        output: CSV path, ``None`` for stdout.
        log_level: Name of a ``logging`` level.
    """

    kind: str
    items: tuple
    r: Optional[int] = None
    limit: Optional[int] = None
    output: Optional[str] = None
    log_level: str = "INFO"


def read_config_file(path: str) -> Dict[str, Any]:
    """Parse a YAML or JSON config file into a dict.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the top level is not a mapping.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    if path.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return cfg


def _optional_int(cfg: Dict[str, Any], key: str) -> Optional[int]:
    value = cfg.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


def build_config(cfg: Dict[str, Any]) -> RunConfig:
    """Validate a raw mapping and turn it into a ``RunConfig``.

    ``items`` may be a list of values or an integer ``n`` standing for
    ``range(n)``.

    Raises:
        ValueError: On an unknown kind, missing items, or a missing ``r`` for
            combinations / sublists.
    """
    kind = cfg.get("kind", "combinations")
    if kind not in KINDS:
        raise ValueError(f"Unknown kind: {kind}")

    items = cfg.get("items")
    if items is None:
        raise ValueError("Missing key 'items' in config")
    if isinstance(items, bool):
        raise ValueError("'items' must be a list or an integer")
    if isinstance(items, int):
        if items < 0:
            raise ValueError(f"'items' must be >= 0, got {items}")
        items = range(items)
    elif not isinstance(items, (list, tuple)):
        raise ValueError("'items' must be a list or an integer")

    r = _optional_int(cfg, "r")
    if r is None and kind != "permutations":
        raise ValueError(f"Missing key 'r' for kind '{kind}'")
    limit = _optional_int(cfg, "limit")
    if limit is not None and limit < 0:
        raise ValueError(f"'limit' must be >= 0, got {limit}")

    return RunConfig(
        kind=kind,
        items=tuple(items),
        r=r,
        limit=limit,
        output=cfg.get("output"),
        log_level=str(cfg.get("log_level", "INFO")),
    )


def load_config(path: Optional[str], overrides: Optional[Dict[str, Any]] = None) -> RunConfig:
    """Read ``path`` (if any), apply non-``None`` overrides and validate."""
    cfg: Dict[str, Any] = read_config_file(path) if path else {}
    for key, value in (overrides or {}).items():
        if value is not None:
            cfg[key] = value
    return build_config(cfg)
