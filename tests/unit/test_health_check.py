import json

from handlers import health_check


def test_health_check_returns_ok():
    resp = health_check.lambda_handler({}, None)
    assert resp["statusCode"] == 200
    body = json.loads(resp["body"])
    assert body["status"] == "ok"
    assert "timestamp" in body


def test_health_check_includes_environment(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "test")
    body = json.loads(health_check.lambda_handler({}, None)["body"])
    assert body["environment"] == "test"
