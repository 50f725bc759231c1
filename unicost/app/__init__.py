"""Application factory and app-wide configuration."""

from __future__ import annotations

import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from unicost.app.api.routes import api_bp
from unicost.core.reference import load_engine_config
from unicost.logging_config import configure_logging
from unicost.schemas.reference import EngineConfig

CORS_ORIGINS_ENV_VAR = "UNICOST_CORS_ORIGINS"
DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]


def _cors_origins() -> list[str]:
    raw = os.getenv(CORS_ORIGINS_ENV_VAR, "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or DEFAULT_CORS_ORIGINS


def create_app(engine_config: Optional[EngineConfig] = None) -> Flask:
    """Build the Flask app instance."""
    configure_logging()

    app = Flask(__name__)
    app.config["ENGINE_CONFIG"] = engine_config or load_engine_config()

    CORS(
        app,
        resources={r"/api/*": {"origins": _cors_origins()}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
