"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from card_savings.config import get_calculator_config, get_host_config
from card_savings.core.numbers import non_negative
from card_savings.core.projection import InvestmentInputs, series
from card_savings.core.summary import summarize
from card_savings.core.sync import CalculatorInputs, apply_edit, derive
from card_savings.core.theme import resolve_dark_mode, save_dark_mode, theme_name
from card_savings.log import get_logger
from card_savings.schemas.calculator import (
    DefaultsResponse,
    EditRequest,
    EditResponse,
    SummaryRequest,
)
from card_savings.schemas.meta import HostConfigResponse, PingResponse
from card_savings.schemas.projection import ProjectionRequest, ProjectionResponse
from card_savings.schemas.theme import ThemeResponse, ThemeUpdate

api_bp = Blueprint("api", __name__)
log = get_logger(component="api")


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    log.warning("request_validation_failed", path=request.path, error_count=exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


def _json_body() -> Dict[str, Any]:
    """Request body as a dict; a missing or non-JSON body counts as empty."""
    payload = request.get_json(force=True, silent=True)
    return payload if payload is not None else {}


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify(PingResponse(message="pong").model_dump())


@api_bp.get("/config")
def host_config() -> Any:
    """Host page settings (theme mode, background, version)."""
    config = get_host_config()
    response = HostConfigResponse(
        mode=config.mode,
        transparentBackground=config.transparent_background,
        version=config.version,
        source=config.source,
    )
    return jsonify(response.model_dump())


@api_bp.get("/calculator/defaults")
def calculator_defaults() -> Any:
    """Initial calculator and investment inputs for a fresh page."""
    settings = get_calculator_config()
    response = DefaultsResponse(
        inputs=CalculatorInputs(),
        investment=InvestmentInputs(
            timePeriod=settings.default_time_period,
            returnRate=settings.default_return_rate,
        ),
    )
    return jsonify(response.model_dump())


@api_bp.post("/calculator/edit")
def calculator_edit() -> Any:
    """Apply one field edit and return the re-synchronized inputs."""
    payload = EditRequest.model_validate(_json_body())
    inputs = apply_edit(
        payload.inputs.to_inputs(),
        payload.field,
        payload.value,
        apr_ceiling=get_calculator_config().apr_ceiling,
    )
    log.info(
        "calculator_edited",
        field=payload.field,
        balance_carried_percent=inputs.balanceCarriedPercent,
    )
    response = EditResponse(inputs=inputs, derived=derive(inputs))
    return jsonify(response.model_dump())


@api_bp.post("/calculator/summary")
def calculator_summary() -> Any:
    """Derived scalars, headline totals and the chart series."""
    payload = SummaryRequest.model_validate(_json_body())
    settings = get_calculator_config()
    summary = summarize(
        payload.inputs.to_inputs(),
        payload.investment.to_inputs(),
        default_time_period=settings.default_time_period,
        default_return_rate=settings.default_return_rate,
    )
    log.info(
        "summary_computed",
        time_period=summary.timePeriod,
        return_rate=summary.returnRate,
        investment_final_value=summary.investmentFinalValue,
    )
    return jsonify(summary.model_dump())


@api_bp.post("/projection")
def projection() -> Any:
    """Projection series for an arbitrary monthly contribution."""
    payload = ProjectionRequest.model_validate(_json_body())
    settings = get_calculator_config()
    investment = InvestmentInputs.from_raw(
        timePeriod=payload.timePeriod,
        returnRate=payload.returnRate,
    )
    years = investment.resolved_years(settings.default_time_period)
    rate = investment.resolved_rate(settings.default_return_rate)
    projected = series(years, rate, non_negative(payload.monthlyContribution))

    response = ProjectionResponse(
        timePeriod=years,
        returnRate=rate,
        series=projected.to_list(),
        finalValue=projected.final_value,
        totalInvested=projected.total_invested,
        totalGains=projected.total_gains,
    )
    return jsonify(response.model_dump())


def _theme_response(dark: bool, persisted: bool = False) -> ThemeResponse:
    """Build the theme payload for the current host mode."""
    return ThemeResponse(
        mode=get_host_config().mode,
        dark=dark,
        theme=theme_name(dark),
        persisted=persisted,
    )


@api_bp.get("/theme")
def get_theme() -> Any:
    """Resolve dark mode; ``?systemPrefersDark=true`` passes the browser preference."""
    system_prefers_dark = request.args.get("systemPrefersDark", "false").lower() == "true"
    dark = resolve_dark_mode(
        get_host_config(),
        current_app.extensions["theme_store"],
        system_prefers_dark=system_prefers_dark,
    )
    return jsonify(_theme_response(dark).model_dump())


@api_bp.put("/theme")
def put_theme() -> Any:
    """Save the dark-mode toggle (only kept when the host runs in auto mode)."""
    payload = ThemeUpdate.model_validate(_json_body())
    config = get_host_config()
    store = current_app.extensions["theme_store"]
    persisted = save_dark_mode(config, store, payload.dark)
    dark = resolve_dark_mode(config, store, system_prefers_dark=payload.dark)
    return jsonify(_theme_response(dark, persisted).model_dump())
