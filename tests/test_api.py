"""
Tests for the HTTP service.

Ineligible claims are 200s with reasons; unreadable submissions are 400s.
"""
import json
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from api.main import app
from smallclaims import compute_jurisdiction_hash, load_default_jurisdiction

from tests.conftest import OUTSIDE_ZIP, make_payload


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def _recent_payload(**overrides) -> dict:
    # The service evaluates against the real date
    return make_payload(
        incident_date=(date.today() - timedelta(days=1)).isoformat(),
        **overrides,
    )


class TestEligibilityEndpoint:

    def test_eligible(self, client):
        response = client.post("/eligibility", json=_recent_payload())
        assert response.status_code == 200
        body = response.json()
        assert body["eligible"] is True
        assert body["reasons"] == []
        assert body["jurisdiction_id"] == "US-WA-KING-SMALL-CLAIMS"

    def test_ineligible_is_not_an_error(self, client):
        response = client.post(
            "/eligibility",
            json=_recent_payload(filing_zip_code=OUTSIDE_ZIP, settlement_attempted=False),
        )
        assert response.status_code == 200
        body = response.json()
        assert body["eligible"] is False
        assert body["reasons"] == [
            "The claimant must reside in King County to file a claim.",
            "Parties must attempt to resolve the dispute before filing.",
        ]
        assert body["failed_rules"] == ["jurisdiction_residency", "settlement_attempt"]

    def test_unreadable_body(self, client):
        response = client.post(
            "/eligibility",
            content=b"not json at all",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["code"] == "SC_MALFORMED_INPUT"

    def test_missing_answer(self, client):
        payload = _recent_payload()
        del payload["self_represented"]
        response = client.post("/eligibility", content=json.dumps(payload))
        assert response.status_code == 400
        fields = [err["field"] for err in response.json()["details"]["errors"]]
        assert "self_represented" in fields

    def test_deeply_nested_body(self, client):
        response = client.post("/eligibility", content=b"[" * 100000)
        assert response.status_code == 400
        assert response.json()["code"] == "SC_MALFORMED_INPUT"

    def test_array_body(self, client):
        response = client.post("/eligibility", json=[_recent_payload()])
        assert response.status_code == 400


class TestJurisdictionEndpoints:

    def test_summary(self, client):
        response = client.get("/jurisdiction")
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "King County"
        assert body["lookback_years"] == 6
        assert body["postal_code_count"] == 127
        assert "Other" not in body["accepted_claim_types"]
        assert len(body["pack_hash"]) == 64
        assert body["pack_hash"] == compute_jurisdiction_hash(load_default_jurisdiction())

    @pytest.mark.parametrize("zip_code,accepted", [("98101", True), ("90210", False)])
    def test_postal_code(self, client, zip_code, accepted):
        response = client.get(f"/jurisdiction/postal-codes/{zip_code}")
        assert response.status_code == 200
        assert response.json()["accepted"] is accepted


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
