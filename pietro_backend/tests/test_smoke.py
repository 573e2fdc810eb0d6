import pytest
from fastapi.testclient import TestClient

@pytest.mark.smoke
def test_health_and_min_routes():
    from pietro_backend.app.main import app
    client = TestClient(app)

    r = client.get("/health")
    assert r.status_code == 200 and r.json().get("ok") is True

    r = client.get("/api/health")
    assert r.status_code == 200 and r.json()["rules"]["status"] == "ok"

    # empty body → calculator defaults
    r = client.post("/api/dough/calculate", json={})
    assert r.status_code == 200
    body = r.json()
    assert body["flour"]["id"] == "caputo-pizzeria-00"
    assert body["recipe"]["total_mass_g"] == 1000

@pytest.mark.smoke
def test_debug_flag_drives_log_level():
    import logging
    from pietro_backend.app import main
    from pietro_backend.app.config import DEBUG_MODE
    expected = logging.DEBUG if DEBUG_MODE else logging.INFO
    assert logging.getLogger("pietro").level == expected
    assert main.log.getEffectiveLevel() == expected
