# pietro_backend/app/config/paths.py
from __future__ import annotations

"""
Central path resolution for the dough calculator.

Env overrides:
    DOUGH_RULES_DIR

Defaults:
    <package>/app/dough/rules

Exports:
    - constants: DOUGH_RULES_DIR, APP_ROOT
    - getter: get_rules_dir()
    - resolvers: resolve_rules_file()
"""

import os
from pathlib import Path

# ──────────────────────────────────────────────────────────────────────────────
_THIS_FILE = Path(__file__).resolve()

# config/paths.py lives at pietro_backend/app/config → app root is parents[1]
APP_ROOT: Path = _THIS_FILE.parents[1]

def _clean_env(value: str | None) -> str | None:
    if value is None:
        return None
    v = value.strip().strip('"').strip("'")
    return v or None

def _env_path(name: str) -> Path | None:
    raw = _clean_env(os.getenv(name))
    if not raw:
        return None
    return Path(raw).expanduser().resolve()

_default_rules = APP_ROOT / "dough" / "rules"
_env_rules = _env_path("DOUGH_RULES_DIR")

DOUGH_RULES_DIR: Path = (_env_rules or _default_rules).resolve()

# ── Getter
def get_rules_dir() -> Path: return DOUGH_RULES_DIR

# ── Resolvers
def resolve_rules_file(name: str) -> Path:
    """Return absolute path under rules dir for a given filename."""
    return DOUGH_RULES_DIR / name

__all__ = [
    # constants
    "DOUGH_RULES_DIR", "APP_ROOT",
    # getters
    "get_rules_dir",
    # resolvers
    "resolve_rules_file",
]
