from __future__ import annotations
import pytest
from fastapi.testclient import TestClient
from pietro_backend.app.main import app

@pytest.fixture(scope="session")
def client():
    return TestClient(app)

# --- Canonical form values (the calculator's defaults) ---
@pytest.fixture
def default_form():
    return {
        "flour": "caputo-pizzeria-00",
        "balls": 4,
        "salt_pct": 2.8,
        "oil_pct": 2,
        "yeast_type": "instant",
        "tk_hours": 24, "tk_temp_c": 4,
        "to_hours": 2, "to_temp_c": 22,
    }

@pytest.fixture(autouse=True)
def fresh_presets():
    from pietro_backend.app.dough import presets
    presets.clear_cache()
    yield
    presets.clear_cache()
