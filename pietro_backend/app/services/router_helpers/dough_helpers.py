from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
from fastapi import HTTPException, status

from pietro_backend.app.config import TRACE_ENABLED
from pietro_backend.app.schemas import (
    DoughCalcRequest, DoughCalculation, DoughInputsOut,
    YeastRequest, YeastOut, RecipeRequest, RecipeOut, IngredientOut,
    KneadingRequest, KneadingPlanOut, FlourPresetOut, YeastFormOut,
    NormalizeRequest, NormalizeOut,
)
from pietro_backend.app.dough import presets
from pietro_backend.app.dough.coercion import normalize_input_value, parse_number, to_number_value, format_grams
from pietro_backend.app.dough.engine.models import (
    FermentationStage, FlourPreset, KneadingPlan, RecipeOutputs, YeastForm, parse_yeast_form,
)
from pietro_backend.app.dough.engine import yeast_math
from pietro_backend.app.dough.engine.recipe_math import resolve_recipe, total_dough_mass
from pietro_backend.app.dough.engine.kneading import plan_kneading
from pietro_backend.app.observability.calc_trace import CalcTrace

log = logging.getLogger("pietro.dough_helpers")

# Display order of the ingredient cards.
_INGREDIENT_ORDER = (
    ("water", "Water"),
    ("yeast", "Yeast"),
    ("flour", "Flour"),
    ("oil", "Olive oil"),
    ("salt", "Salt"),
)

# Form fields with a floor other than 0.
_FIELD_MINIMUMS: Dict[str, float] = {"balls": 1}

_NOTES = [
    "Add the salt towards the end of kneading.",
    "Olive oil is optional in a classic Neapolitan dough.",
]


# ----------------------------------------------------------------------
# Input boundary
# ----------------------------------------------------------------------

def _number(field: str, raw: Any, minimum: float = 0, trace: Optional[CalcTrace] = None) -> float:
    value = to_number_value(raw, minimum)
    if trace is not None and raw is not None:
        parsed = parse_number(raw)
        if parsed != value:
            reason = "not a number" if parsed is None else f"below minimum {minimum:g}"
            trace.add_clamp(field, raw, value, reason)
    return value

def _yeast_form(raw: Optional[str]) -> YeastForm:
    try:
        return parse_yeast_form(raw or YeastForm.INSTANT)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

def _flour(name: Optional[str]) -> FlourPreset:
    try:
        return presets.get_flour(name)
    except KeyError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"unknown flour: {name}")


# ----------------------------------------------------------------------
# Output shaping
# ----------------------------------------------------------------------

def flour_out(preset: FlourPreset) -> FlourPresetOut:
    return FlourPresetOut(
        id=preset.id,
        label=preset.label,
        hydration=preset.hydration,
        protein=preset.protein,
        strength_pct=presets.protein_strength_pct(preset.protein),
    )

def recipe_out(total_mass_g: float, r: RecipeOutputs) -> RecipeOut:
    grams = {"water": r.water_g, "yeast": r.yeast_g, "flour": r.flour_g, "oil": r.oil_g, "salt": r.salt_g}
    ingredients = [
        IngredientOut(id=k, label=label, grams=grams[k], display=format_grams(grams[k]))
        for k, label in _INGREDIENT_ORDER
    ]
    return RecipeOut(total_mass_g=total_mass_g, ingredients=ingredients, **r.to_dict())

def kneading_out(plan: KneadingPlan) -> KneadingPlanOut:
    return KneadingPlanOut(**plan.to_dict())

def _yeast_out(cold: FermentationStage, warm: FermentationStage, form: YeastForm) -> YeastOut:
    fallback = yeast_math.used_fallback(cold, warm)
    return YeastOut(
        yeast_pct=yeast_math.estimate_for_stages(cold, warm, form),
        yeast_type=form.value,
        factor=yeast_math.YEAST_FACTORS[form],
        effective_hours=None if fallback else round(yeast_math.effective_hours(cold, warm), 4),
        fallback_used=fallback,
    )


# ----------------------------------------------------------------------
# Full pipeline: yeast → recipe, kneading alongside
# ----------------------------------------------------------------------

def calculate(req: DoughCalcRequest) -> DoughCalculation:
    try:
        return _calculate(req)
    except HTTPException:
        raise
    except Exception as e:
        log.exception("dough calculation failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"calculate failed: {e}",
        )

def _calculate(req: DoughCalcRequest) -> DoughCalculation:
    use_trace = TRACE_ENABLED if req.trace is None else bool(req.trace)
    trace = CalcTrace() if use_trace else None

    flour = _flour(req.flour)
    form = _yeast_form(req.yeast_type)

    balls = _number("balls", req.balls, _FIELD_MINIMUMS["balls"], trace)
    hydration = (flour.hydration if req.hydration is None
                 else _number("hydration", req.hydration, 0, trace))
    salt_pct = _number("salt_pct", req.salt_pct, 0, trace)
    oil_pct = _number("oil_pct", req.oil_pct, 0, trace)
    cold = FermentationStage(_number("tk_hours", req.tk_hours, 0, trace),
                             _number("tk_temp_c", req.tk_temp_c, 0, trace))
    warm = FermentationStage(_number("to_hours", req.to_hours, 0, trace),
                             _number("to_temp_c", req.to_temp_c, 0, trace))

    yeast = _yeast_out(cold, warm, form)
    total_mass = total_dough_mass(balls)
    resolved = resolve_recipe(total_mass, hydration, salt_pct, oil_pct, yeast.yeast_pct)
    plan = plan_kneading(hydration, flour.protein)
    log.debug(f"[calc] {flour.id} balls={balls:g} hydration={hydration:g} yeast={yeast.yeast_pct}% {form.value}")

    if trace is not None:
        trace.set_meta(flour=flour.id, yeast_type=form.value)
        trace.add_step("yeast", yeast_pct=yeast.yeast_pct, effective_hours=yeast.effective_hours)
        if yeast.fallback_used:
            trace.add_fallback("effective_hours", yeast_math.FALLBACK_EFFECTIVE_HOURS,
                               "fermentation profile gave no usable effective time")
        trace.add_step("recipe", total_mass_g=total_mass,
                       baker_pct=hydration + salt_pct + oil_pct + yeast.yeast_pct)
        trace.add_step("kneading", knead_minutes=plan.knead_minutes, wet=plan.is_wet_dough)
        trace.set_outputs(flour_g=round(resolved.flour_g, 1), total_g=round(resolved.total_g, 1))

    return DoughCalculation(
        flour=flour_out(flour),
        inputs=DoughInputsOut(
            balls=balls, hydration=hydration, salt_pct=salt_pct, oil_pct=oil_pct,
            yeast_type=form.value,
            tk_hours=cold.duration_hours, tk_temp_c=cold.temperature_c,
            to_hours=warm.duration_hours, to_temp_c=warm.temperature_c,
        ),
        yeast=yeast,
        recipe=recipe_out(total_mass, resolved),
        kneading=kneading_out(plan),
        notes=list(_NOTES),
        trace=trace.to_public() if trace is not None else None,
    )


# ----------------------------------------------------------------------
# Form boundary: clean raw text while the user types
# ----------------------------------------------------------------------

def normalize(req: NormalizeRequest) -> NormalizeOut:
    return NormalizeOut(values={
        field: normalize_input_value(raw, _FIELD_MINIMUMS.get(field, 0))
        for field, raw in req.values.items()
    })


# ----------------------------------------------------------------------
# Single-engine endpoints
# ----------------------------------------------------------------------

def estimate_yeast(req: YeastRequest) -> YeastOut:
    form = _yeast_form(req.yeast_type)
    cold = FermentationStage(to_number_value(req.tk_hours), to_number_value(req.tk_temp_c))
    warm = FermentationStage(to_number_value(req.to_hours), to_number_value(req.to_temp_c))
    return _yeast_out(cold, warm, form)

def recipe(req: RecipeRequest) -> RecipeOut:
    if req.total_mass_g is not None:
        total_mass = to_number_value(req.total_mass_g)
    elif req.balls is not None:
        total_mass = total_dough_mass(to_number_value(req.balls, _FIELD_MINIMUMS["balls"]))
    else:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                            detail="total_mass_g or balls is required")
    if total_mass <= 0:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                            detail="total dough mass must be > 0")
    r = resolve_recipe(
        total_mass,
        to_number_value(req.hydration),
        to_number_value(req.salt_pct),
        to_number_value(req.oil_pct),
        to_number_value(req.yeast_pct),
    )
    return recipe_out(total_mass, r)

def kneading(req: KneadingRequest) -> KneadingPlanOut:
    flour = None
    if req.hydration is None or req.protein is None:
        flour = _flour(req.flour)
    hydration = flour.hydration if req.hydration is None else to_number_value(req.hydration)
    protein = flour.protein if req.protein is None else to_number_value(req.protein)
    return kneading_out(plan_kneading(hydration, protein))


# ----------------------------------------------------------------------
# Reference data
# ----------------------------------------------------------------------

def list_flours() -> List[FlourPresetOut]:
    return [flour_out(p) for p in presets.list_flours()]

def get_flour(flour_id: str) -> FlourPresetOut:
    return flour_out(_flour(flour_id))

def list_yeasts() -> List[YeastFormOut]:
    return [YeastFormOut(**row) for row in presets.yeast_forms().values()]

def preset_defaults() -> Dict[str, Any]:
    return {
        "flour": presets.default_flour_id(),
        "yeast_type": YeastForm.INSTANT.value,
        "ball_mass_g": total_dough_mass(1),
    }
