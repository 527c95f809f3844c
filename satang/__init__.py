"""Satang personal-finance dashboard: Flask application factory."""

from typing import Optional

from flask import Flask

from satang.config import get_global_settings


def create_app(config_name: Optional[str] = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_name: Configuration name (development, testing, production).
            Overrides APP_ENV when given.

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    # Configuration from Pydantic Settings
    settings = get_global_settings()
    app_env = config_name or settings.app_env
    app.config["SECRET_KEY"] = settings.secret_key
    app.config["ENV"] = settings.flask_env
    app.config["DEBUG"] = app_env == "development"
    app.config["TESTING"] = app_env == "testing"

    app.logger.setLevel(settings.log_level)

    # Register blueprints
    from satang.blueprints.calculators import calculators_bp
    from satang.blueprints.health import health_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(calculators_bp)

    return app
