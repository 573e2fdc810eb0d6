# pietro_backend/app/dough/engine/models.py
from __future__ import annotations
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict

# Purpose:
# Value types passed between the dough engines. All are immutable and
# recomputed on every call; nothing here is persisted.

class YeastForm(str, Enum):
    INSTANT = "instant"
    DRY = "dry"          # active dry
    FRESH = "fresh"      # compressed / cake

# Spellings callers send for the same three forms.
_YEAST_ALIASES: Dict[str, YeastForm] = {
    "instant": YeastForm.INSTANT,
    "dry": YeastForm.DRY,
    "dry-active": YeastForm.DRY,
    "dry_active": YeastForm.DRY,
    "active-dry": YeastForm.DRY,
    "fresh": YeastForm.FRESH,
    "compressed": YeastForm.FRESH,
    "cake": YeastForm.FRESH,
}

# Purpose:
# Coerce an enum member or string to YeastForm. The set is closed, so any
# other value is rejected.
def parse_yeast_form(value: Any) -> YeastForm:
    if isinstance(value, YeastForm):
        return value
    key = str(value or "").strip().lower()
    form = _YEAST_ALIASES.get(key)
    if form is None:
        raise ValueError(f"unknown yeast form: {value!r} (expected instant, dry or fresh)")
    return form


@dataclass(frozen=True)
class FlourPreset:
    id: str
    label: str
    hydration: float   # suggested hydration %
    protein: float     # average protein %

@dataclass(frozen=True)
class FermentationStage:
    duration_hours: float
    temperature_c: float

@dataclass(frozen=True)
class RecipeOutputs:
    flour_g: float
    water_g: float
    salt_g: float
    oil_g: float
    yeast_g: float

    @property
    def total_g(self) -> float:
        return self.flour_g + self.water_g + self.salt_g + self.oil_g + self.yeast_g

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

@dataclass(frozen=True)
class KneadingPlan:
    knead_minutes: int
    planetary_minutes: int
    hand_mixer_minutes: int
    fold_count: int
    fold_interval_minutes: int
    total_fold_minutes: int
    is_wet_dough: bool
    advice: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
