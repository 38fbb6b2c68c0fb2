from flask import Flask, current_app, request
from flasgger import Swagger
from flask_cors import CORS
import logging

from .config import get_config
from .errors import register_error_handlers
from models import MemoryStorage

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Library API",
        "version": "1.0.0",
        "description": "In-memory REST API for managing authors and their books.",
    },
    "basePath": "/",
    "schemes": ["http"],
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}


def get_storage() -> MemoryStorage:
    """Storage owned by the running app (see create_app)."""
    return current_app.extensions["storage"]


def parse_id(raw: str) -> int | None:
    """
    Path id as an integer, or None when it is not a whole number.
    None never matches a record, so lookups answer with the entity's NotFound.
    """
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        number = float(raw)
    except ValueError:
        return None
    return int(number) if number.is_integer() else None


def create_app(config_name: str | None = None, storage: MemoryStorage | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.

    Each app owns its own MemoryStorage, so tests get isolated tables by
    creating one app per test. Pass ``storage`` to share or pre-seed one.
    """
    app = Flask(__name__)

    # Load configuration (reads .env via get_config)
    app.config.from_object(get_config(config_name))
    # keep record field order (id first) in JSON bodies
    app.json.sort_keys = False

    app.extensions["storage"] = storage if storage is not None else MemoryStorage()

    # Cross-Origin Resource Sharing: enable for dev, configurable for prod
    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    # Swagger UI and JSON
    Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    # Global error handlers returning the {"error": message} envelope
    register_error_handlers(app)

    from .health import bp as health_bp
    from .authors import bp as authors_bp
    from .books import bp as books_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(authors_bp)
    app.register_blueprint(books_bp)

    @app.before_request
    def log_request():
        logging.info("%s %s", request.method, request.full_path.rstrip("?"))

    return app
