# pietro_backend/app/config/__init__.py
from __future__ import annotations

# Re-export config surface expected by callers across the app.

# Env settings live in manifest.py
from .manifest import (
    APP_ENV,
    DEBUG_MODE,
    CORS_ORIGINS,
    TRACE_ENABLED,
    validate_manifest,
)

# Path helpers live in paths.py
from .paths import (
    APP_ROOT,
    DOUGH_RULES_DIR,
    resolve_rules_file,
)

__all__ = [
    # manifest
    "APP_ENV",
    "DEBUG_MODE",
    "CORS_ORIGINS",
    "TRACE_ENABLED",
    "validate_manifest",
    # paths
    "APP_ROOT",
    "DOUGH_RULES_DIR",
    "resolve_rules_file",
]
