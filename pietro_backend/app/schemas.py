# schemas.py  (dough calculator: form inputs, engine outputs, reference data)

from __future__ import annotations
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

# Form fields arrive either as JSON numbers or as the raw text the user typed
# ("2,8"); the router helpers coerce and clamp them.
NumberLike = Union[float, str]


# ===================== Requests =====================

class DoughCalcRequest(BaseModel):
    # ignore unknown keys instead of 422 if clients send extras
    model_config = ConfigDict(extra="ignore")

    flour: Optional[str] = None                  # preset id or label; default flour if empty
    balls: Optional[NumberLike] = 4              # dough balls of 250 g
    hydration: Optional[NumberLike] = None       # None → flour preset hydration
    salt_pct: Optional[NumberLike] = 2.8
    oil_pct: Optional[NumberLike] = 2
    yeast_type: Optional[str] = "instant"        # instant | dry | fresh

    # TK = cold (fridge) stage, TO = warm (room) stage
    tk_hours: Optional[NumberLike] = 24
    tk_temp_c: Optional[NumberLike] = 4
    to_hours: Optional[NumberLike] = 2
    to_temp_c: Optional[NumberLike] = 22

    trace: Optional[bool] = None                 # None → server default

class YeastRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    tk_hours: Optional[NumberLike] = 0
    tk_temp_c: Optional[NumberLike] = 4
    to_hours: Optional[NumberLike] = 0
    to_temp_c: Optional[NumberLike] = 22
    yeast_type: Optional[str] = "instant"

class RecipeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # one of the two; total_mass_g wins when both are sent
    total_mass_g: Optional[NumberLike] = None
    balls: Optional[NumberLike] = None

    hydration: Optional[NumberLike] = 62
    salt_pct: Optional[NumberLike] = 2.8
    oil_pct: Optional[NumberLike] = 2
    yeast_pct: Optional[NumberLike] = 0.2

class NormalizeRequest(BaseModel):
    # field name → raw text as typed, e.g. {"salt_pct": "2,8", "balls": "0"}
    values: Dict[str, Optional[NumberLike]] = Field(default_factory=dict)

class KneadingRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    hydration: Optional[NumberLike] = None       # None → flour preset hydration
    protein: Optional[NumberLike] = None         # None → flour preset protein
    flour: Optional[str] = None


# ===================== Responses =====================

class FlourPresetOut(BaseModel):
    id: str
    label: str
    hydration: float
    protein: float
    strength_pct: float                          # 0..100 bar for the UI

class YeastFormOut(BaseModel):
    id: str
    label: str
    factor: float

class YeastOut(BaseModel):
    yeast_pct: float
    yeast_type: str
    factor: float
    effective_hours: Optional[float] = None      # None when the fallback engaged
    fallback_used: bool = False

class IngredientOut(BaseModel):
    id: str
    label: str
    grams: float
    display: str                                 # one decimal, e.g. "371.3"

class RecipeOut(BaseModel):
    total_mass_g: float
    flour_g: float
    water_g: float
    salt_g: float
    oil_g: float
    yeast_g: float
    ingredients: List[IngredientOut] = Field(default_factory=list)

class KneadingPlanOut(BaseModel):
    knead_minutes: int
    planetary_minutes: int
    hand_mixer_minutes: int
    fold_count: int
    fold_interval_minutes: int
    total_fold_minutes: int
    is_wet_dough: bool
    advice: str

class NormalizeOut(BaseModel):
    values: Dict[str, str]              # "" for blank or invalid input

class DoughInputsOut(BaseModel):
    # the numbers actually used after coercion/clamping
    balls: float
    hydration: float
    salt_pct: float
    oil_pct: float
    yeast_type: str
    tk_hours: float
    tk_temp_c: float
    to_hours: float
    to_temp_c: float

class DoughCalculation(BaseModel):
    flour: FlourPresetOut
    inputs: DoughInputsOut
    yeast: YeastOut
    recipe: RecipeOut
    kneading: KneadingPlanOut
    notes: List[str] = Field(default_factory=list)
    trace: Optional[Dict[str, Any]] = None
