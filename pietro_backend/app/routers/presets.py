# app/routers/presets.py
from __future__ import annotations
from typing import Any, Dict, List
from fastapi import APIRouter

from pietro_backend.app.schemas import FlourPresetOut, YeastFormOut
from pietro_backend.app.services.router_helpers import dough_helpers as H

router = APIRouter(prefix="/presets", tags=["presets"])

# What it does:
# Read-only reference data used to pre-fill the calculator form.
@router.get("/flours", response_model=List[FlourPresetOut])
def flours():
    return H.list_flours()

@router.get("/flours/{flour_id}", response_model=FlourPresetOut)
def flour(flour_id: str):
    return H.get_flour(flour_id)

@router.get("/yeasts", response_model=List[YeastFormOut])
def yeasts():
    return H.list_yeasts()

@router.get("/defaults")
def defaults() -> Dict[str, Any]:
    return H.preset_defaults()
