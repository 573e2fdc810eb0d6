from fastapi.testclient import TestClient
import pytest

def test_calculate_defaults(client: TestClient, default_form):
    r = client.post("/api/dough/calculate", json=default_form)
    assert r.status_code == 200
    body = r.json()
    assert set(["flour", "inputs", "yeast", "recipe", "kneading", "notes"]).issubset(body.keys())

    # hydration comes from the flour preset when omitted
    assert body["inputs"]["hydration"] == 62
    assert body["yeast"]["yeast_pct"] == pytest.approx(0.09)
    assert body["recipe"]["total_mass_g"] == 1000

    rec = body["recipe"]
    parts = rec["flour_g"] + rec["water_g"] + rec["salt_g"] + rec["oil_g"] + rec["yeast_g"]
    assert parts == pytest.approx(1000)
    assert [i["id"] for i in rec["ingredients"]] == ["water", "yeast", "flour", "oil", "salt"]
    for item in rec["ingredients"]:
        assert item["display"] == f"{item['grams']:.1f}"

    assert body["kneading"]["knead_minutes"] == 8
    assert body["flour"]["strength_pct"] == pytest.approx(54)

def test_calculate_accepts_raw_text(client: TestClient, default_form):
    form = dict(default_form, hydration="65,5", salt_pct="-1", balls="0", trace=True)
    body = client.post("/api/dough/calculate", json=form).json()
    assert body["inputs"]["hydration"] == pytest.approx(65.5)
    assert body["inputs"]["salt_pct"] == 0
    assert body["inputs"]["balls"] == 1
    clamped = {c["field"] for c in body["trace"]["clamps"]}
    assert {"salt_pct", "balls"} <= clamped

def test_calculate_trace_reports_fallback(client: TestClient, default_form):
    form = dict(default_form, tk_hours=0, to_hours=0, trace=True)
    body = client.post("/api/dough/calculate", json=form).json()
    assert body["yeast"]["fallback_used"] is True
    assert body["yeast"]["yeast_pct"] == pytest.approx(0.2)
    assert body["trace"]["fallbacks"][0]["value"] == 4.0

def test_calculate_trace_can_be_disabled(client: TestClient, default_form):
    body = client.post("/api/dough/calculate", json=dict(default_form, trace=False)).json()
    assert body["trace"] is None

def test_unknown_flour_is_404(client: TestClient, default_form):
    r = client.post("/api/dough/calculate", json=dict(default_form, flour="spelt"))
    assert r.status_code == 404

def test_unknown_yeast_is_422(client: TestClient, default_form):
    r = client.post("/api/dough/calculate", json=dict(default_form, yeast_type="sourdough"))
    assert r.status_code == 422

def test_yeast_endpoint(client: TestClient):
    r = client.post("/api/dough/yeast", json={"to_hours": 8, "to_temp_c": 22, "yeast_type": "fresh"})
    assert r.status_code == 200
    j = r.json()
    assert j["yeast_pct"] == pytest.approx(0.3)
    assert j["factor"] == 3.0
    assert j["effective_hours"] == pytest.approx(8)

def test_recipe_endpoint(client: TestClient):
    r = client.post("/api/dough/recipe", json={
        "total_mass_g": 1000, "hydration": 62, "salt_pct": 2.8, "oil_pct": 2, "yeast_pct": 0.2,
    })
    assert r.status_code == 200
    assert r.json()["flour_g"] == pytest.approx(598.802, abs=1e-3)

    by_balls = client.post("/api/dough/recipe", json={"balls": 2}).json()
    assert by_balls["total_mass_g"] == 500

    assert client.post("/api/dough/recipe", json={"hydration": 60}).status_code == 422
    assert client.post("/api/dough/recipe", json={"total_mass_g": 0}).status_code == 422

def test_kneading_endpoint(client: TestClient):
    j = client.post("/api/dough/kneading", json={"hydration": 60, "protein": 11}).json()
    assert (j["knead_minutes"], j["planetary_minutes"], j["hand_mixer_minutes"]) == (6, 4, 5)

    wet = client.post("/api/dough/kneading", json={"flour": "caputo-nuvola"}).json()
    assert wet["is_wet_dough"] is True and wet["fold_count"] == 3

def test_presets_endpoints(client: TestClient):
    flours = client.get("/api/presets/flours").json()
    assert len(flours) == 10
    assert client.get("/api/presets/flours/type-450").json()["protein"] == 9.0
    assert client.get("/api/presets/flours/nope").status_code == 404
    yeasts = client.get("/api/presets/yeasts").json()
    assert {y["id"] for y in yeasts} == {"instant", "dry", "fresh"}
    assert client.get("/api/presets/defaults").json()["ball_mass_g"] == 250

def test_negative_temperature_clamped_to_zero(client: TestClient, default_form):
    form = dict(default_form, tk_temp_c="-5", trace=True)
    body = client.post("/api/dough/calculate", json=form).json()
    assert body["inputs"]["tk_temp_c"] == 0
    clamp = next(c for c in body["trace"]["clamps"] if c["field"] == "tk_temp_c")
    assert clamp["before"] == "-5" and clamp["after"] == 0
    # yeast follows the clamped 0 °C stage, not -5 °C
    expected = round(0.8 / (24 * 2 ** -2.2 + 2), 3)
    assert body["yeast"]["yeast_pct"] == pytest.approx(expected, abs=1e-3)

def test_normalize_endpoint(client: TestClient):
    r = client.post("/api/dough/normalize", json={"values": {
        "salt_pct": "2,8", "balls": "0", "hydration": "abc", "oil_pct": "", "tk_temp_c": "-5",
    }})
    assert r.status_code == 200
    assert r.json()["values"] == {
        "salt_pct": "2.8", "balls": "1", "hydration": "", "oil_pct": "", "tk_temp_c": "0",
    }
