import pytest
from fastapi.testclient import TestClient

from basicstats.main import app, create_app

@pytest.fixture
def client():
    # Entering the context runs the lifespan handler, which verifies the buffer config
    with TestClient(app) as c:
        yield c

def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"

def test_ready(client):
    r = client.get("/ready")
    assert r.status_code == 200
    assert r.json() == {"status": "ready", "initial_capacity": 20}

def test_stats(client):
    r = client.post("/stats", json={"numbers": [4, 2, 3, 2, 1]})
    assert r.status_code == 200
    data = r.json()
    assert data["count"] == 5
    assert round(data["mean"], 3) == 2.4
    assert data["median"] == 2
    assert data["mode"] == 2
    assert round(data["stddev"], 3) == 1.020
    assert round(data["harmonic_mean"], 3) == 1.935
    assert data["unused_capacity"] == 15

def test_stats_zero_value(client):
    r = client.post("/stats", json={"numbers": [0, 1, 2]})
    assert r.status_code == 200
    assert r.json()["harmonic_mean"] is None

def test_stats_bad_request(client):
    r = client.post("/stats", json={"numbers": []})
    assert r.status_code == 400
    r = client.post("/stats", json={"numbers": [1], "text": "extra"})
    assert r.status_code == 400
    r = client.post("/stats", json={"numbers": ["x"]})
    assert r.status_code == 400

def test_metrics(client):
    client.post("/stats", json={"numbers": [1, 2, 3]})
    r = client.get("/metrics")
    assert r.status_code == 200
    assert "basicstats_request_total" in r.text
    assert "basicstats_summarized_values" in r.text

def test_ready_rejects_bad_initial_capacity():
    with TestClient(create_app(initial_capacity=0)) as c:
        r = c.get("/ready")
        assert r.status_code == 503
        assert r.json()["status"] == "not ready"
        assert "initial_capacity" in r.json()["reason"]

def test_ready_before_startup():
    # Without entering the client context the lifespan never runs
    r = TestClient(create_app()).get("/ready")
    assert r.status_code == 503

def test_stats_uses_configured_capacity():
    with TestClient(create_app(initial_capacity=2)) as c:
        r = c.post("/stats", json={"numbers": [1, 2, 3]})
        assert r.status_code == 200
        assert r.json()["unused_capacity"] == 1

def test_stats_overflow_is_bad_request(client):
    r = client.post("/stats", json={"numbers": [1e308, 1e308]})
    assert r.status_code == 400
    assert r.json()["error"] == "NonFiniteResultError"
    r = client.post("/stats", json={"numbers": [-1e200, 1e200]})
    assert r.status_code == 400
    assert "stddev" in r.json()["detail"]

def test_stats_overflow_is_counted(client):
    client.post("/stats", json={"numbers": [1e308, 1e308]})
    r = client.get("/metrics")
    assert 'basicstats_stats_errors_total{error="NonFiniteResultError"}' in r.text
