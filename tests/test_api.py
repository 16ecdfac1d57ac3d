"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from expreval import __version__
from expreval.api import app
from expreval.config import settings


@pytest.fixture
def client():
    return TestClient(app)


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": __version__}

    def test_config(self, client, monkeypatch):
        monkeypatch.setattr(settings, "strict", True)
        body = client.get("/api/v1/config").json()
        assert body["strict"] is True
        assert body["app_name"] == settings.app_name


class TestEvaluate:

    def test_post_success(self, client):
        response = client.post("/api/v1/evaluate", json={"expression": "(2 + 3) * 4"})
        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is True
        assert body["value"] == 20.0
        assert body["error"] is None

    def test_post_error_is_a_result(self, client):
        response = client.post("/api/v1/evaluate", json={"expression": "5/0"})
        assert response.status_code == 200
        body = response.json()
        assert body["ok"] is False
        assert body["error"] == "Error: Division by zero"
        assert body["error_kind"] == "division_by_zero"

    def test_get_query(self, client):
        response = client.get("/api/v1/evaluate", params={"expression": "10-3-2"})
        assert response.status_code == 200
        assert response.json()["value"] == 5.0

    def test_trailing_input_ignored_by_default(self, client, monkeypatch):
        monkeypatch.setattr(settings, "strict", False)
        body = client.post("/api/v1/evaluate", json={"expression": "1+2)"}).json()
        assert body["value"] == 3.0

    def test_request_strict_overrides_setting(self, client, monkeypatch):
        monkeypatch.setattr(settings, "strict", False)
        body = client.post(
            "/api/v1/evaluate", json={"expression": "1+2)", "strict": True}
        ).json()
        assert body["ok"] is False
        assert body["error_kind"] == "trailing_input"

    def test_strict_setting_applies(self, client, monkeypatch):
        monkeypatch.setattr(settings, "strict", True)
        body = client.get("/api/v1/evaluate", params={"expression": "1+2)"}).json()
        assert body["ok"] is False

    def test_expression_too_long(self, client, monkeypatch):
        monkeypatch.setattr(settings, "max_expression_length", 5)
        response = client.post("/api/v1/evaluate", json={"expression": "1+2+3+4"})
        assert response.status_code == 413

    def test_length_limit_disabled(self, client, monkeypatch):
        monkeypatch.setattr(settings, "max_expression_length", None)
        expression = "+".join(["1"] * 2000)
        body = client.post("/api/v1/evaluate", json={"expression": expression}).json()
        assert body["value"] == 2000.0

    def test_missing_expression_is_rejected(self, client):
        response = client.post("/api/v1/evaluate", json={})
        assert response.status_code == 422


class TestOverflow:

    def test_overflowing_literal_keeps_value(self, client):
        body = client.post("/api/v1/evaluate", json={"expression": "9" * 400}).json()
        assert body["ok"] is True
        assert body["value"] == "Infinity"
        assert float(body["value"]) == float("inf")

    def test_negative_overflow(self, client):
        body = client.post("/api/v1/evaluate", json={"expression": "-" + "9" * 400}).json()
        assert body["value"] == "-Infinity"

    def test_infinity_minus_infinity_is_nan(self, client):
        expression = "9" * 400 + "-" + "9" * 400
        body = client.get("/api/v1/evaluate", params={"expression": expression}).json()
        assert body["ok"] is True
        assert body["value"] == "NaN"
