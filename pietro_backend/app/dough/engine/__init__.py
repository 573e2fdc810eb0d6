from .models import FermentationStage, FlourPreset, KneadingPlan, RecipeOutputs, YeastForm, parse_yeast_form
from .yeast_math import estimate_yeast_pct
from .recipe_math import resolve_recipe, total_dough_mass
from .kneading import plan_kneading

__all__ = [
    "FermentationStage", "FlourPreset", "KneadingPlan", "RecipeOutputs", "YeastForm",
    "parse_yeast_form", "estimate_yeast_pct", "resolve_recipe", "total_dough_mass", "plan_kneading",
]
