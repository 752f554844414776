"""Application factory exposing translation domains over HTTP."""

from __future__ import annotations

import logging

from flask import Flask, jsonify

from localeglue.config.schema import DEFAULT_DOMAIN, LocalizationSettings
from localeglue.config.settings import load_settings_from_environment
from localeglue.localization import LocaleContext, LocalizationError
from localeglue.version import get_project_version

from .http import localization_problem
from .routes import register_routes

_LOGGER = logging.getLogger(__name__)


def create_app(
    settings: LocalizationSettings | None = None,
    context: LocaleContext | None = None,
) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)

    if settings is None:
        settings = load_settings_from_environment()
    app.config["LOCALEGLUE_SETTINGS"] = settings
    # None: each request picks its own context.
    app.extensions["localeglue"] = context

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        configured: LocalizationSettings = app.config["LOCALEGLUE_SETTINGS"]
        backend = configured.backend
        payload = {
            "status": "ok",
            "version": get_project_version(),
            "backend": backend.value if backend is not None else None,
            "default_domain": DEFAULT_DOMAIN,
            "default_language": configured.language.default,
        }
        return jsonify(payload)

    @app.errorhandler(LocalizationError)
    def handle_localization_error(error: LocalizationError):
        """Return consistent JSON responses for failed domain activations."""

        problem = localization_problem(error)
        if problem.status >= 500:
            _LOGGER.error("Translation request failed: %s", error)
        return problem.to_response()

    return app
