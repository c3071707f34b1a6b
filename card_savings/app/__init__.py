"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from card_savings.app.api.routes import api_bp
from card_savings.config import get_server_config
from card_savings.core.theme import InMemoryStore, KeyValueStore
from card_savings.log import configure_logging, get_logger


def create_app(theme_store: Optional[KeyValueStore] = None) -> Flask:
    """Build the Flask app instance."""
    server_config = get_server_config()
    configure_logging(server_config.log_level)

    app = Flask(__name__)

    CORS(
        app,
        resources={r"/api/*": {"origins": server_config.cors_origins}},
        supports_credentials=True,
    )

    app.extensions["theme_store"] = theme_store if theme_store is not None else InMemoryStore()
    app.register_blueprint(api_bp, url_prefix="/api")

    get_logger(component="app").info("app_created", cors_origins=server_config.cors_origins)
    return app
