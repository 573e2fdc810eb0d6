# main.py: backend entrypoint
import importlib
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pietro_backend.app.config import APP_ENV, CORS_ORIGINS, DEBUG_MODE, validate_manifest

# Parent of every "pietro.*" logger; DEBUG=1 turns on per-calculation lines.
_root_log = logging.getLogger("pietro")
if not _root_log.handlers:
    _root_log.addHandler(logging.StreamHandler())
_root_log.setLevel(logging.DEBUG if DEBUG_MODE else logging.INFO)

log = logging.getLogger("pietro.main")

app = FastAPI(title="Papa Pietro Dough API")

# --- CORS for Vite dev -------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include routers under /api ----------------------------------------------
def _include(module_name: str, prefix: str = "/api") -> bool:
    m = importlib.import_module(f"pietro_backend.app.routers.{module_name}")
    router = getattr(m, "router", None)
    if router is None:
        log.warning(f"… skip {module_name} (no router)")
        return False
    app.include_router(router, prefix=prefix)
    log.info(f"✓ Mounted {module_name} at {prefix}")
    return True

_include("dough")     # /api/dough/...
_include("presets")   # /api/presets/...

# --- Health -------------------------------------------------------------------
@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/api/health")
async def api_health():
    # mirror the non-prefixed /health so the FE's /api/health succeeds
    manifest = validate_manifest()
    return {"ok": manifest["status"] == "ok", "env": APP_ENV, "rules": manifest}
