# pietro_backend/app/dough/library_loader.py
from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import yaml  # PyYAML

from pietro_backend.app.config.paths import get_rules_dir, resolve_rules_file

# -----------------------------------------------------------------------------
# Logger
# -----------------------------------------------------------------------------
log = logging.getLogger("pietro.library_loader")
if not log.handlers:
    handler = logging.StreamHandler()
    log.addHandler(handler)
    log.setLevel(logging.INFO)

# -----------------------------------------------------------------------------
# Internal IO helpers
# -----------------------------------------------------------------------------
def _read_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")

def _load_json_from(path: Path) -> Any:
    try:
        txt = _read_text(path)
        return json.loads(txt)
    except FileNotFoundError:
        raise
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}") from e

def _load_yaml_from(path: Path) -> Any:
    try:
        txt = _read_text(path)
        return yaml.safe_load(txt)
    except FileNotFoundError:
        raise
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

# -----------------------------------------------------------------------------
# Public loader API
# -----------------------------------------------------------------------------
@lru_cache(maxsize=16)
def load_rules(filename: str) -> Any:
    """
    Load a rulebook (YAML or JSON, by suffix) from the dough rules dir.
    Raises FileNotFoundError if not present.
    """
    path = resolve_rules_file(filename)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found: {path}")
    if path.suffix in (".yaml", ".yml"):
        obj = _load_yaml_from(path)
    else:
        obj = _load_json_from(path)
    log.info(f"[rules] loaded {filename} from {path}")
    return obj

def has_rules_file(filename: str) -> bool:
    return resolve_rules_file(filename).exists()

def inventory() -> Dict[str, Any]:
    """
    List rule files visible to the loader, for manifest/debug output.
    """
    rules_dir = get_rules_dir()
    files: List[str] = []
    if rules_dir.exists():
        files = sorted(p.name for p in rules_dir.iterdir() if p.suffix in (".yaml", ".yml", ".json"))
    return {"rules_dir": str(rules_dir), "rules": files}

def clear_cache() -> None:
    load_rules.cache_clear()
