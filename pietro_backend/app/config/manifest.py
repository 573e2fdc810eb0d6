# pietro_backend/app/config/manifest.py
from __future__ import annotations

import os
from typing import Dict, List

# ---- Environment mode ----
APP_ENV: str = os.getenv("APP_ENV", "development")
DEBUG_MODE: bool = os.getenv("DEBUG", "0") not in ("", "0", "false", "False")

# ---- HTTP surface ----
_DEFAULT_CORS = "http://localhost:5173,http://127.0.0.1:5173"
CORS_ORIGINS: List[str] = [
    o.strip() for o in os.getenv("PIETRO_CORS_ORIGINS", _DEFAULT_CORS).split(",") if o.strip()
]

# Calculation trace is returned with /dough/calculate unless switched off.
# Production default is off.
_trace_env = os.getenv("PIETRO_TRACE", "").strip()
TRACE_ENABLED: bool = (
    _trace_env not in ("0", "false", "False") if _trace_env else APP_ENV != "production"
)

# ---- Rulebook validation manifest ----
RULES_REQUIRED: List[str] = [
    "flour_presets.yaml",
    "yeast_forms.yaml",
]

def validate_manifest() -> Dict[str, object]:
    # late import: library_loader itself depends on config.paths
    from pietro_backend.app.dough.library_loader import has_rules_file, inventory

    missing_required: List[str] = []
    for name in RULES_REQUIRED:
        if not has_rules_file(name):
            missing_required.append(name)

    status = "ok" if not missing_required else "missing_required"
    return {
        "status": status,
        "inventory": inventory(),
        "required": RULES_REQUIRED,
        "missing_required": missing_required,
    }


__all__ = ["APP_ENV", "DEBUG_MODE", "CORS_ORIGINS", "TRACE_ENABLED", "RULES_REQUIRED", "validate_manifest"]
