# pietro_backend/app/dough/engine/yeast_math.py
from __future__ import annotations
import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Mapping

from .models import FermentationStage, YeastForm, parse_yeast_form

# Purpose:
# Estimate the yeast dose (% of flour, baker's convention) for a two-stage
# fermentation: a cold stage (TK, fridge) and a warm stage (TO, room).
# Each stage is rescaled to "hours at 22 °C" with a Q10 model, the two are
# summed, and the dose is inversely proportional to that effective time.

log = logging.getLogger("pietro.yeast_math")

BASE_TEMP_C = 22.0
Q10 = 2.0
FALLBACK_EFFECTIVE_HOURS = 4.0
INSTANT_DOSE_HOURS = 0.8      # instant % * effective hours
MIN_INSTANT_PCT = 0.01
MAX_INSTANT_PCT = 1.0

YEAST_FACTORS: Mapping[YeastForm, float] = {
    YeastForm.INSTANT: 1.0,
    YeastForm.DRY: 1.5,
    YeastForm.FRESH: 3.0,
}

# --------- Q10 rescaling ----------
# Purpose:
# Wall-clock hours at temp_c → equivalent hours at BASE_TEMP_C.
# Overflow (absurd temperatures) counts as infinite; the caller falls back.
def equivalent_hours(hours: float, temp_c: float) -> float:
    try:
        scale = Q10 ** ((float(temp_c) - BASE_TEMP_C) / 10.0)
    except OverflowError:
        scale = math.inf
    return float(hours) * scale

def effective_hours(cold: FermentationStage, warm: FermentationStage) -> float:
    return (equivalent_hours(cold.duration_hours, cold.temperature_c)
            + equivalent_hours(warm.duration_hours, warm.temperature_c))

# --------- Dose ----------
# Purpose:
# Instant-yeast % before the form multiplier. Clamped to [0.01, 1.0].
def instant_yeast_pct(effective_h: float) -> float:
    if not math.isfinite(effective_h) or effective_h <= 0:
        log.info(f"[yeast] effective hours {effective_h!r} unusable; using {FALLBACK_EFFECTIVE_HOURS} h")
        effective_h = FALLBACK_EFFECTIVE_HOURS
    return _clamp(INSTANT_DOSE_HOURS / effective_h, MIN_INSTANT_PCT, MAX_INSTANT_PCT)

def yeast_factor(yeast_form: Any) -> float:
    return YEAST_FACTORS[parse_yeast_form(yeast_form)]

def estimate_yeast_pct(
    cold_hours: float,
    warm_hours: float,
    cold_temp_c: float,
    warm_temp_c: float,
    yeast_form: Any = YeastForm.INSTANT,
) -> float:
    """
    Yeast % of flour weight for the TK/TO profile, rounded to 3 decimals.

    The clamp is applied to the instant-equivalent dose *before* the
    form multiplier, so fresh yeast can reach 3.0%.
    Raises ValueError for an unknown yeast form.
    """
    factor = yeast_factor(yeast_form)
    eff = effective_hours(
        FermentationStage(cold_hours, cold_temp_c),
        FermentationStage(warm_hours, warm_temp_c),
    )
    return _round_half_up(instant_yeast_pct(eff) * factor, 3)

def estimate_for_stages(
    cold: FermentationStage,
    warm: FermentationStage,
    yeast_form: Any = YeastForm.INSTANT,
) -> float:
    return estimate_yeast_pct(
        cold.duration_hours, warm.duration_hours,
        cold.temperature_c, warm.temperature_c,
        yeast_form,
    )

def used_fallback(cold: FermentationStage, warm: FermentationStage) -> bool:
    eff = effective_hours(cold, warm)
    return not math.isfinite(eff) or eff <= 0

def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))

# Ties on the exact binary value go up: 0.0625 → 0.063 (round() gives 0.062)
def _round_half_up(x: float, places: int) -> float:
    q = Decimal(1).scaleb(-places)
    return float(Decimal(x).quantize(q, rounding=ROUND_HALF_UP))
