# pietro_backend/app/observability/calc_trace.py
from __future__ import annotations

import time
from typing import Any, Dict, List, Optional

from pietro_backend.app.utils.req_id import new_request_id

class CalcTrace:
    """
    Lightweight, structured trace for how a dough calculation was produced.
    Collects pipeline steps, input clamps and fallbacks, plus a snapshot of
    the final numbers. Safe to return in API responses.
    """
    def __init__(self, request_id: Optional[str] = None) -> None:
        self._t0 = time.time()
        self.request_id = request_id or new_request_id()
        self.meta: Dict[str, Any] = {}
        self.steps: List[Dict[str, Any]] = []
        self.clamps: List[Dict[str, Any]] = []
        self.fallbacks: List[Dict[str, Any]] = []
        self.outputs: Dict[str, Any] = {}

    # -------- meta --------
    def set_meta(self, **kwargs: Any) -> None:
        self.meta.update(kwargs)

    # -------- narrative steps --------
    def add_step(self, label: str, **detail: Any) -> None:
        self.steps.append({"t": time.time(), "label": label, **detail})

    # -------- input clamps (raw value → value used) --------
    def add_clamp(self, field: str, value_before: Any, value_after: Any, reason: str) -> None:
        self.clamps.append({
            "t": time.time(), "field": field, "before": value_before, "after": value_after, "reason": reason
        })

    # -------- defined defaults that replaced a computed value --------
    def add_fallback(self, name: str, value: Any, why: str) -> None:
        self.fallbacks.append({"t": time.time(), "name": name, "value": value, "why": why})

    # -------- final outputs snapshot --------
    def set_outputs(self, **kwargs: Any) -> None:
        self.outputs.update(kwargs)

    # -------- export --------
    def to_public(self) -> Dict[str, Any]:
        return {
            "request_id": self.request_id,
            "elapsed_ms": int((time.time() - self._t0) * 1000),
            "meta": self.meta,
            "steps": self.steps,
            "clamps": self.clamps,
            "fallbacks": self.fallbacks,
            "outputs": self.outputs,
        }
