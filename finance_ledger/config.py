# finance_ledger/config.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import yaml

INVALID_INPUT_MODES = ("abort", "retry")

DEFAULT_CONFIG: Dict[str, object] = {
    "on_invalid_input": "abort",
    "log_level": "WARNING",
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Fill in any default keys missing from the loaded config."""
    merged = dict(defaults)
    merged.update(current)
    return merged


def load_config(path: Optional[Path | str] = None) -> Dict[str, object]:
    """
    Load the YAML config at ``path`` merged over the defaults.

    A missing ``path`` (None) yields the defaults. Raises ValueError if the
    file is not a mapping or names an unknown ``on_invalid_input`` mode.
    """
    if path is None:
        return dict(DEFAULT_CONFIG)
    with Path(path).open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    config = _merge_defaults(data, DEFAULT_CONFIG)
    mode = config["on_invalid_input"]
    if mode not in INVALID_INPUT_MODES:
        raise ValueError(
            f"Unsupported on_invalid_input '{mode}' (expected one of: "
            f"{', '.join(INVALID_INPUT_MODES)})"
        )
    return config
