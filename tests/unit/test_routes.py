"""Tests for the HTTP routes using FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.rules import rule_registry
from app.rules.errors import QueryError, StoreUnavailableError
from app.rules.rule_registry import register_rule


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["rules_registered"] >= 14


class TestRuleRoutes:
    def test_list_rules(self, client):
        response = client.get("/rules")
        assert response.status_code == 200
        assert "isEmail" in response.json()["rules"]

    def test_passing_rule(self, client):
        response = client.post(
            "/rules/isEmail/evaluate",
            json={"field": "email", "value": "a@b.com"},
        )
        assert response.status_code == 200
        assert response.json() == {"rule": "isEmail", "field": "email", "passed": True}

    def test_failing_rule_is_not_an_error(self, client):
        response = client.post(
            "/rules/isMinLength/evaluate",
            json={"field": "password", "value": "short", "requirement": 8},
        )
        assert response.status_code == 200
        assert response.json()["passed"] is False

    def test_matches_is_type_strict(self, client):
        response = client.post(
            "/rules/matches/evaluate",
            json={"field": "pin_confirmation", "value": "1234", "requirement": 1234},
        )
        assert response.status_code == 200
        assert response.json()["passed"] is False

    def test_matches_compares_list_items_strictly(self, client):
        response = client.post(
            "/rules/matches/evaluate",
            json={"field": "choices_confirmation", "value": [1], "requirement": [True]},
        )
        assert response.status_code == 200
        assert response.json()["passed"] is False

    def test_unknown_rule(self, client):
        response = client.post(
            "/rules/isPalindrome/evaluate",
            json={"field": "word", "value": "level"},
        )
        assert response.status_code == 404

    def test_non_string_value(self, client):
        response = client.post(
            "/rules/isDigit/evaluate",
            json={"field": "zip", "value": 12345},
        )
        assert response.status_code == 422

    def test_check_unique_not_reachable(self, client):
        response = client.post(
            "/rules/checkUnique/evaluate",
            json={"field": "email", "value": "a@b.com", "requirement": {"table": "users", "column": "email"}},
        )
        assert response.status_code == 422

    def test_missing_field(self, client):
        response = client.post("/rules/isEmail/evaluate", json={"value": "a@b.com"})
        assert response.status_code == 422


class TestDataStoreFailures:
    """A custom rule backed by a store surfaces store failures as 503."""

    @pytest.fixture(autouse=True)
    def isolated_registry(self, monkeypatch):
        monkeypatch.setattr(rule_registry, "RULE_REGISTRY", dict(rule_registry.RULE_REGISTRY))

    @pytest.mark.parametrize("error", [StoreUnavailableError("down"), QueryError("bad query")])
    def test_store_error_maps_to_503(self, client, error):
        def store_backed_rule(field, value, requirement=None):
            raise error

        register_rule("isKnownCustomer", store_backed_rule)
        response = client.post(
            "/rules/isKnownCustomer/evaluate",
            json={"field": "customer_id", "value": "C-100"},
        )
        assert response.status_code == 503
        assert response.json()["detail"] == str(error)
