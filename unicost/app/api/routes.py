"""HTTP routes for the Flask API."""

from __future__ import annotations

import logging
from datetime import datetime
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from unicost.core.errors import EngineError, InvalidLocationKey
from unicost.core.report import build_report
from unicost.schemas.reference import EngineConfig
from unicost.schemas.request import ReportRequest

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _engine_config() -> EngineConfig:
    return current_app.config["ENGINE_CONFIG"]


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected report request: %d validation error(s)", exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InvalidLocationKey)
def _handle_invalid_location(exc: InvalidLocationKey):
    """Report an unknown location key as a bad request."""
    logger.warning("rejected report request: %s", exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(EngineError)
def _handle_engine_error(exc: EngineError):
    """Report a failed calculation as an unprocessable request."""
    logger.warning("report calculation failed: %s", exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/reference")
def reference() -> Any:
    """Locations, durations and rates the input form offers."""
    config = _engine_config()
    return jsonify(config.model_dump(mode="json"))


@api_bp.post("/report")
def report() -> Any:
    """Project costs and savings scenarios for one child."""
    raw_payload: Dict[str, Any] = request.get_json(silent=True)
    if not isinstance(raw_payload, dict):
        return jsonify({"detail": "request body must be a JSON object"}), HTTPStatus.BAD_REQUEST

    config = _engine_config()
    now = datetime.now()
    payload = ReportRequest.model_validate(raw_payload, context={"today": now.date()})
    result = build_report(payload, config, now)

    return jsonify({"report": result.model_dump(mode="json"), "disclaimer": config.disclaimer})
