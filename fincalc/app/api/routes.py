"""HTTP routes for the Flask API."""

import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Dict, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import BaseModel, ValidationError

from fincalc.config import Settings
from fincalc.core import (
    CalculationError,
    InvalidArgument,
    compute_amortization_schedule,
    compute_emi,
    compute_inflation,
    compute_lumpsum,
    compute_sip,
    compute_sip_top_up,
    compute_swp,
)
from fincalc.core.ping import build_ping
from fincalc.schemas.calculators import (
    EmiRequest,
    EmiScheduleRequest,
    InflationRequest,
    LabelledRequest,
    LumpsumRequest,
    SipRequest,
    SipTopUpRequest,
    SwpRequest,
)

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)

CALCULATORS = (
    ("sip", "SIP Calculator", "/api/calc/sip"),
    ("swp", "SWP Calculator", "/api/calc/swp"),
    ("emi", "EMI Calculator", "/api/calc/emi"),
    ("emi-schedule", "EMI Amortization Schedule", "/api/calc/emi/schedule"),
    ("lumpsum", "Lumpsum Calculator", "/api/calc/lumpsum"),
    ("sip-topup", "SIP Top-Up Calculator", "/api/calc/sip-topup"),
    ("inflation", "Inflation Calculator", "/api/calc/inflation"),
)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("Rejected %s: %d validation error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_input=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculationError)
def _handle_calculation_error(exc: CalculationError):
    logger.warning("Calculation failed on %s: %s", request.path, exc.message)
    body = {"error": type(exc).__name__, "field": exc.field, "detail": exc.message}
    return jsonify(body), HTTPStatus.BAD_REQUEST


def _settings() -> Settings:
    return current_app.config["FINCALC_SETTINGS"]


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


def _check_horizon(field: str, years: int) -> None:
    limit = _settings().max_years
    if years > limit:
        raise InvalidArgument(f"{field} must be at most {limit} (got {years})", field=field)


def _base_year(payload: LabelledRequest) -> int:
    if payload.base_year is not None:
        return payload.base_year
    configured: Optional[int] = _settings().base_year
    if configured is not None:
        return configured
    return datetime.now(timezone.utc).year


def _respond(result: BaseModel) -> Any:
    return jsonify(result.model_dump(by_alias=True, mode="json"))


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(build_ping(_settings().app_name).model_dump())


@api_bp.get("/calculators")
def calculators() -> Any:
    """List the calculators this service exposes."""
    return jsonify(
        [{"slug": slug, "name": name, "endpoint": endpoint} for slug, name, endpoint in CALCULATORS]
    )


@api_bp.post("/calc/sip")
def sip() -> Any:
    payload = SipRequest.model_validate(_payload())
    _check_horizon("years", payload.years)
    result = compute_sip(
        payload.contribution,
        payload.annual_rate,
        payload.years,
        payload.frequency,
        base_year=_base_year(payload),
    )
    return _respond(result)


@api_bp.post("/calc/swp")
def swp() -> Any:
    payload = SwpRequest.model_validate(_payload())
    _check_horizon("years", payload.years)
    result = compute_swp(
        payload.initial_investment,
        payload.monthly_withdrawal,
        payload.annual_rate,
        payload.years,
        base_year=_base_year(payload),
    )
    return _respond(result)


@api_bp.post("/calc/emi")
def emi() -> Any:
    payload = EmiRequest.model_validate(_payload())
    _check_horizon("tenureYears", payload.tenure_years)
    return _respond(compute_emi(payload.principal, payload.annual_rate, payload.tenure_years))


@api_bp.post("/calc/emi/schedule")
def emi_schedule() -> Any:
    payload = EmiScheduleRequest.model_validate(_payload())
    _check_horizon("tenureYears", payload.tenure_years)
    schedule = compute_amortization_schedule(
        payload.principal,
        payload.annual_rate,
        payload.tenure_years,
        base_year=_base_year(payload),
    )
    return jsonify([row.model_dump(by_alias=True, mode="json") for row in schedule])


@api_bp.post("/calc/lumpsum")
def lumpsum() -> Any:
    payload = LumpsumRequest.model_validate(_payload())
    _check_horizon("years", payload.years)
    result = compute_lumpsum(
        payload.amount,
        payload.annual_rate,
        payload.years,
        base_year=_base_year(payload),
    )
    return _respond(result)


@api_bp.post("/calc/sip-topup")
def sip_top_up() -> Any:
    payload = SipTopUpRequest.model_validate(_payload())
    _check_horizon("years", payload.years)
    result = compute_sip_top_up(
        payload.start_contribution,
        payload.annual_increase,
        payload.annual_rate,
        payload.years,
        payload.frequency,
        base_year=_base_year(payload),
    )
    return _respond(result)


@api_bp.post("/calc/inflation")
def inflation() -> Any:
    payload = InflationRequest.model_validate(_payload())
    _check_horizon("years", payload.years)
    result = compute_inflation(
        payload.amount,
        payload.annual_rate,
        payload.years,
        base_year=_base_year(payload),
    )
    return _respond(result)
