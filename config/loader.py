from __future__ import annotations
from pathlib import Path
from typing import Any, Dict

import tomllib

REPO_ROOT = Path(__file__).resolve().parents[1]


def load_config(config_path: Path | None = None) -> Dict[str, Any]:
    """
    Load config.toml from repo root by default.
    """
    if config_path is None:
        config_path = REPO_ROOT / "config.toml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        return tomllib.load(f)


def resolve_path(value: str | Path, root: Path = REPO_ROOT) -> Path:
    """Data paths in config.toml are relative to the repo root."""
    p = Path(value)
    return p if p.is_absolute() else root / p
