import logging
import os
from os import getenv
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

import models  # noqa: F401  # pylint: disable=unused-import

from database import db, init_db
from db_config import DatabaseConfig
from hit_tracking import SINK_EXTENSION_KEY, DiagnosticSink, log_hit_update_failure, make_session_permanent
from link_presenter import render_author
from logfire_support import initialize_observability
from page_service import EXTENSION_KEY as PAGE_SERVICE_KEY
from page_service import DatabasePageService, PageService
from routes import main_bp
from routes.error_handlers import internal_error, not_found_error
from syntax_highlighting import highlight_code, syntax_css

# Load environment variables from .env file
load_dotenv()


def create_app(
    config_override: Optional[dict] = None,
    *,
    page_service: Optional[PageService] = None,
    diagnostic_sink: Optional[DiagnosticSink] = None,
) -> Flask:
    """Application factory for creating configured Flask instances.

    Args:
        config_override: Flask config values applied after the defaults.
        page_service: Service used by the test page route. Defaults to the
            database-backed service.
        diagnostic_sink: Callable that receives hit update failures. Defaults
            to a debug-level log entry.
    """
    logger = logging.getLogger(__name__)

    testing_env = getenv("TESTING", "").lower() in {"1", "true", "yes"}
    config_testing = bool(config_override and config_override.get("TESTING"))
    testing_mode = testing_env or config_testing

    flask_app = Flask(__name__)

    default_database_uri = DatabaseConfig.get_database_uri()

    flask_app.config.update(
        SECRET_KEY=os.environ.get("SESSION_SECRET", "dev-secret"),
        SESSION_COOKIE_NAME=os.environ.get("SESSION_COOKIE_NAME", "session"),
        SESSION_COOKIE_SAMESITE="Lax",
        SQLALCHEMY_DATABASE_URI=default_database_uri,
        SQLALCHEMY_TRACK_MODIFICATIONS=False,
    )

    if config_override:
        flask_app.config.update(config_override)

    # Engine options follow the final URI so an in-memory override still
    # shares one connection.
    flask_app.config.setdefault(
        "SQLALCHEMY_ENGINE_OPTIONS",
        DatabaseConfig.get_engine_options(flask_app.config["SQLALCHEMY_DATABASE_URI"]),
    )

    flask_app.wsgi_app = ProxyFix(flask_app.wsgi_app, x_proto=1, x_host=1)  # needed for url_for to generate with https

    flask_app.jinja_env.globals.update(
        highlight_code=highlight_code,
        render_author=render_author,
        syntax_css=syntax_css,
    )

    init_db(flask_app)

    flask_app.extensions[PAGE_SERVICE_KEY] = page_service if page_service is not None else DatabasePageService()
    flask_app.extensions[SINK_EXTENSION_KEY] = diagnostic_sink if diagnostic_sink is not None else log_hit_update_failure

    flask_app.before_request(make_session_permanent)

    flask_app.register_blueprint(main_bp)

    flask_app.register_error_handler(500, internal_error)
    flask_app.register_error_handler(404, not_found_error)

    skip_db_setup = bool(flask_app.config.get("SKIP_DB_SETUP"))

    with flask_app.app_context():
        if skip_db_setup:
            logger.info("Skipping database setup due to SKIP_DB_SETUP flag")
        else:
            try:
                db.create_all()
                logger.info("Database tables created")
            except Exception as e:
                # The app cannot serve pages without its tables
                logger.error("Failed to create database tables: %s", e, exc_info=True)
                raise

        if testing_mode:
            flask_app.config["OBSERVABILITY_STATUS"] = {
                "logfire_available": False,
                "logfire_project_url": None,
                "logfire_reason": "Disabled while TESTING",
            }
        else:
            flask_app.config["OBSERVABILITY_STATUS"] = initialize_observability(
                flask_app, engine=db.engine
            )

    return flask_app


def _module_app() -> Optional[Flask]:
    if getenv("PERFPAGES_SKIP_MODULE_APP", "").lower() in {"1", "true", "yes"}:
        return None  # pragma: no cover - tests and the CLI build their own apps
    return create_app()


# Module-level application for WSGI servers (gunicorn app:app)
app = _module_app()


__all__ = ["app", "create_app"]
