# app/routers/dough.py
from __future__ import annotations
from fastapi import APIRouter

from pietro_backend.app.schemas import (
    DoughCalcRequest, DoughCalculation,
    YeastRequest, YeastOut,
    RecipeRequest, RecipeOut,
    KneadingRequest, KneadingPlanOut,
    NormalizeRequest, NormalizeOut,
)
from pietro_backend.app.services.router_helpers import dough_helpers as H

router = APIRouter(prefix="/dough", tags=["dough"])

@router.post("/calculate", response_model=DoughCalculation)
def calculate(req: DoughCalcRequest):
    """
    Full calculator: yeast % from the TK/TO profile, ingredient grams for
    balls x 250 g, and the kneading/fold plan for the chosen flour.
    Fields may be numbers or raw text ("2,8"); values are clamped to >= 0
    (balls >= 1) before calculating.
    """
    return H.calculate(req)

@router.post("/yeast", response_model=YeastOut)
def yeast(req: YeastRequest):
    return H.estimate_yeast(req)

@router.post("/recipe", response_model=RecipeOut)
def recipe(req: RecipeRequest):
    """
    Baker's-percentage inversion for a given total mass (or ball count).
    """
    return H.recipe(req)

@router.post("/kneading", response_model=KneadingPlanOut)
def kneading(req: KneadingRequest):
    return H.kneading(req)

@router.post("/normalize", response_model=NormalizeOut)
def normalize(req: NormalizeRequest):
    """
    Clean raw form text the way the calculator inputs do: decimal comma
    accepted, negatives clamped to the field minimum, invalid → "".
    """
    return H.normalize(req)
