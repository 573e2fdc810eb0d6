# pietro_backend/app/dough/engine/kneading.py
from __future__ import annotations
import math

from .models import KneadingPlan

# Purpose:
# Kneading-time suggestion from hydration and flour protein.
# Wetter dough and stronger flour both need longer development; past 67%
# hydration the plan leans on stretch-and-folds instead.

BASE_KNEAD_MIN = 6.0
MAX_KNEAD_MIN = 22.0
HYDRATION_PIVOT = 60.0
HYDRATION_WEIGHT = 0.35
PROTEIN_PIVOT = 11.0
PROTEIN_WEIGHT = 0.8
WET_DOUGH_HYDRATION = 67.0

# (ratio of hand-knead time, floor, ceiling)
PLANETARY = (0.55, 4.0, 15.0)
HAND_MIXER = (0.75, 5.0, 18.0)

WET_ADVICE = "High hydration: rely on folds instead of long kneading."
STANDARD_ADVICE = "Standard hydration: a short rest plus 2 folds is enough."

def plan_kneading(hydration_pct: float, flour_protein_pct: float) -> KneadingPlan:
    hydration_factor = max(0.0, hydration_pct - HYDRATION_PIVOT) * HYDRATION_WEIGHT
    protein_factor = max(0.0, flour_protein_pct - PROTEIN_PIVOT) * PROTEIN_WEIGHT
    knead = _clamp(BASE_KNEAD_MIN + hydration_factor + protein_factor, BASE_KNEAD_MIN, MAX_KNEAD_MIN)

    # machine times scale off the unrounded hand time
    planetary = _clamp(knead * PLANETARY[0], PLANETARY[1], PLANETARY[2])
    hand_mixer = _clamp(knead * HAND_MIXER[0], HAND_MIXER[1], HAND_MIXER[2])

    wet = hydration_pct >= WET_DOUGH_HYDRATION
    folds = 3 if wet else 2
    interval = 12 if wet else 15

    return KneadingPlan(
        knead_minutes=_round_half_up(knead),
        planetary_minutes=_round_half_up(planetary),
        hand_mixer_minutes=_round_half_up(hand_mixer),
        fold_count=folds,
        fold_interval_minutes=interval,
        total_fold_minutes=(folds - 1) * interval,
        is_wet_dough=wet,
        advice=WET_ADVICE if wet else STANDARD_ADVICE,
    )

# 6.5 → 7 (round() would give 6)
def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))
