# pietro_backend/app/dough/presets.py
from __future__ import annotations
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional

from pietro_backend.app.dough import library_loader
from pietro_backend.app.dough.library_loader import load_rules
from pietro_backend.app.dough.engine.models import FlourPreset, YeastForm
from pietro_backend.app.dough.engine.yeast_math import YEAST_FACTORS

# Purpose:
# Read-only reference tables for the calculator form:
# - flour presets (suggested hydration + protein) from rules/flour_presets.yaml
# - yeast form labels from rules/yeast_forms.yaml, factors from yeast_math
# Loaded once per process; callers get MappingProxyType views.

FLOUR_RULES = "flour_presets.yaml"
YEAST_RULES = "yeast_forms.yaml"

def _norm(s: Optional[str]) -> str:
    return (s or "").strip().lower()

@lru_cache(maxsize=1)
def flour_presets() -> Mapping[str, FlourPreset]:
    raw = load_rules(FLOUR_RULES) or {}
    table: Dict[str, FlourPreset] = {}
    for row in raw.get("flours", []) or []:
        preset = FlourPreset(
            id=str(row["id"]),
            label=str(row.get("label") or row["id"]),
            hydration=float(row["hydration"]),
            protein=float(row["protein"]),
        )
        table[preset.id] = preset
    return MappingProxyType(table)

@lru_cache(maxsize=1)
def default_flour_id() -> str:
    raw = load_rules(FLOUR_RULES) or {}
    fid = raw.get("default")
    if fid in flour_presets():
        return fid
    # first entry when the file has no usable default
    return next(iter(flour_presets()))

def list_flours() -> List[FlourPreset]:
    return list(flour_presets().values())

def find_flour(name: Optional[str]) -> Optional[FlourPreset]:
    """
    Match by slug id or by display label (case/whitespace-insensitive).
    """
    key = _norm(name)
    if not key:
        return None
    for preset in flour_presets().values():
        if key in (_norm(preset.id), _norm(preset.label)):
            return preset
    return None

def get_flour(name: Optional[str] = None) -> FlourPreset:
    """
    Preset for `name`, or the default flour when name is empty.
    Raises KeyError for an unknown flour.
    """
    if not _norm(name):
        return flour_presets()[default_flour_id()]
    preset = find_flour(name)
    if preset is None:
        raise KeyError(f"unknown flour: {name!r}")
    return preset

def protein_strength_pct(protein: float) -> float:
    # 8% protein → empty bar, ~16.3% → full
    return max(0.0, min(100.0, (float(protein) - 8.0) * 12.0))

@lru_cache(maxsize=1)
def yeast_forms() -> Mapping[str, Dict[str, Any]]:
    raw = load_rules(YEAST_RULES) or {}
    labels = {str(r["id"]): str(r.get("label") or r["id"]) for r in raw.get("forms", []) or []}
    table: Dict[str, Dict[str, Any]] = {}
    for form in YeastForm:
        table[form.value] = {
            "id": form.value,
            "label": labels.get(form.value, form.value),
            "factor": YEAST_FACTORS[form],
        }
    return MappingProxyType(table)

def clear_cache() -> None:
    library_loader.clear_cache()
    flour_presets.cache_clear()
    default_flour_id.cache_clear()
    yeast_forms.cache_clear()
