from __future__ import annotations

import json

from flask.testing import FlaskClient

from fincalc.app import create_app
from fincalc.config import Settings
from fincalc.core import compute_emi, compute_sip


def test_sip_endpoint_returns_camel_case_result(client: FlaskClient):
    resp = client.post(
        "/api/calc/sip",
        json={"contribution": 5000, "annualRate": 12, "years": 2, "frequency": "monthly"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    expected = compute_sip(5000, 12, 2, "monthly", base_year=2024)
    assert body["investedAmount"] == expected.invested_amount == 120_000
    assert body["totalValue"] == expected.total_value
    assert body["estimatedReturns"] == expected.estimated_returns
    assert body["yearlyData"][0] == {
        "year": 1,
        "yearLabel": "2024",
        "investedAmount": 60_000,
        "balance": expected.yearly_data[0].balance,
    }


def test_request_base_year_overrides_settings(client: FlaskClient):
    resp = client.post(
        "/api/calc/lumpsum",
        json={"amount": 100_000, "annualRate": 10, "years": 2, "baseYear": 2030},
    )

    assert resp.status_code == 200
    assert [row["yearLabel"] for row in resp.get_json()["yearlyData"]] == ["2030", "2031"]


def test_swp_endpoint_reports_early_exhaustion(client: FlaskClient):
    resp = client.post(
        "/api/calc/swp",
        json={"initialInvestment": 1_000_000, "monthlyWithdrawal": 50_000, "annualRate": 8, "years": 5},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["finalBalance"] == 0
    assert len(body["yearlyData"]) == 2
    assert body["yearlyData"][1]["withdrawalAmount"] == 500_000


def test_emi_and_schedule_endpoints(client: FlaskClient):
    payload = {"principal": 1_000_000, "annualRate": 8.5, "tenureYears": 20}

    emi_resp = client.post("/api/calc/emi", json=payload)
    schedule_resp = client.post("/api/calc/emi/schedule", json=payload)

    assert emi_resp.status_code == 200
    assert emi_resp.get_json() == compute_emi(1_000_000, 8.5, 20).model_dump(by_alias=True)
    assert schedule_resp.status_code == 200
    rows = schedule_resp.get_json()
    assert len(rows) == 20
    assert set(rows[0]) == {"year", "yearLabel", "principal", "interest", "balance"}


def test_sip_topup_and_inflation_endpoints(client: FlaskClient):
    topup = client.post(
        "/api/calc/sip-topup",
        json={
            "startContribution": 1000,
            "annualIncrease": 10,
            "annualRate": 10,
            "years": 2,
            "frequency": "yearly",
        },
    )
    inflation = client.post("/api/calc/inflation", json={"amount": 100_000, "annualRate": 5, "years": 2})

    assert topup.status_code == 200
    assert topup.get_json()["totalValue"] == 2541
    assert inflation.status_code == 200
    assert inflation.get_json()["inflationImpact"] == 10_250


def test_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/sip", json={"contribution": -5, "annualRate": 12})

    assert resp.status_code == 422
    body = resp.get_json()
    locations = {tuple(error["loc"]) for error in body["detail"]}
    assert ("contribution",) in locations
    assert ("years",) in locations


def test_unknown_frequency_returns_422(client: FlaskClient):
    resp = client.post(
        "/api/calc/sip",
        json={"contribution": 100, "annualRate": 12, "years": 1, "frequency": "hourly"},
    )

    assert resp.status_code == 422


def test_horizon_beyond_configured_limit_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/lumpsum", json={"amount": 1000, "annualRate": 5, "years": 41})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "InvalidArgument"
    assert body["field"] == "years"


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/emi", data="{not json", content_type="application/json")

    assert resp.status_code == 400


def test_current_year_used_when_no_base_year_configured():
    app = create_app(Settings(base_year=None))
    with app.test_client() as client:
        resp = client.post("/api/calc/inflation", json={"amount": 1000, "annualRate": 3, "years": 1})

    assert resp.status_code == 200
    assert resp.get_json()["yearlyData"][0]["yearLabel"].isdigit()


def test_cors_header_for_allowed_origin(client: FlaskClient):
    resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.headers.get("Access-Control-Allow-Origin") == "http://localhost:5173"


def _reject_constant(token: str):
    raise ValueError(f"non-standard JSON constant {token}")


def test_validation_errors_for_nan_input_are_strict_json(client: FlaskClient):
    resp = client.post(
        "/api/calc/sip",
        data='{"contribution": NaN, "annualRate": Infinity, "years": 1}',
        content_type="application/json",
    )

    assert resp.status_code == 422
    body = json.loads(resp.get_data(as_text=True), parse_constant=_reject_constant)
    assert all("input" not in error for error in body["detail"])
    assert {tuple(error["loc"]) for error in body["detail"]} >= {("contribution",), ("annualRate",)}


def test_frequency_is_case_insensitive(client: FlaskClient):
    sip = client.post(
        "/api/calc/sip",
        json={"contribution": 5000, "annualRate": 12, "years": 1, "frequency": "Monthly"},
    )
    topup = client.post(
        "/api/calc/sip-topup",
        json={
            "startContribution": 1000,
            "annualIncrease": 10,
            "annualRate": 10,
            "years": 2,
            "frequency": "YEARLY",
        },
    )

    assert sip.status_code == 200
    assert sip.get_json()["totalValue"] == compute_sip(5000, 12, 1, "monthly").total_value
    assert topup.status_code == 200
    assert topup.get_json()["totalValue"] == 2541
