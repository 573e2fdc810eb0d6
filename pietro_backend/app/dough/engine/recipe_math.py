# pietro_backend/app/dough/engine/recipe_math.py
from __future__ import annotations

from .models import RecipeOutputs

# Purpose:
# Baker's-percentage inversion. Every ingredient is a % of flour weight, so
# for a target dough mass:
#   flour = total / (1 + (hydration + salt + oil + yeast) / 100)
#   other = flour * pct / 100
# No validation here; callers pass clamped, non-negative values.

BALL_MASS_G = 250.0

def total_dough_mass(ball_count: float) -> float:
    return float(ball_count) * BALL_MASS_G

def baker_factor(hydration_pct: float, salt_pct: float, oil_pct: float, yeast_pct: float) -> float:
    return 1 + hydration_pct / 100 + salt_pct / 100 + oil_pct / 100 + yeast_pct / 100

def resolve_recipe(
    total_dough_mass_g: float,
    hydration_pct: float,
    salt_pct: float,
    oil_pct: float,
    yeast_pct: float,
) -> RecipeOutputs:
    flour = total_dough_mass_g / baker_factor(hydration_pct, salt_pct, oil_pct, yeast_pct)
    return RecipeOutputs(
        flour_g=flour,
        water_g=flour * hydration_pct / 100,
        salt_g=flour * salt_pct / 100,
        oil_g=flour * oil_pct / 100,
        yeast_g=flour * yeast_pct / 100,
    )
