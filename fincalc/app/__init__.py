"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from fincalc.app.api.routes import api_bp
from fincalc.config import Settings, get_settings
from fincalc.logging_config import configure_logging


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    logger = configure_logging(settings)

    app = Flask(__name__)
    app.config["DEBUG"] = settings.debug
    app.config["FINCALC_SETTINGS"] = settings

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("%s ready, CORS origins: %s", settings.app_name, ", ".join(settings.cors_origins))
    return app
