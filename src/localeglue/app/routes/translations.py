"""Translate message keys through a scoped domain activation."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify, request

from localeglue.config.schema import BackendMode, LocalizationSettings
from localeglue.localization import (
    DEFAULT_DOMAIN,
    DomainActivator,
    LanguageResolver,
    LocaleContext,
    process_context,
)

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")

LANGUAGE_PARAMETER = "language"
LANGUAGE_COOKIE = "language"


def _request_context(settings: LocalizationSettings) -> LocaleContext:
    """Pick the locale state an activator for this request may mutate.

    The environment backend only works through process-wide gettext state;
    every other mode gets a lookup table private to the request.
    """

    if settings.backend is BackendMode.ENVIRONMENT:
        return process_context()
    return LocaleContext.isolated()


def _build_activator() -> DomainActivator:
    """Construct an activator for the language negotiated by this request."""

    settings: LocalizationSettings = current_app.config["LOCALEGLUE_SETTINGS"]
    context: LocaleContext | None = current_app.extensions["localeglue"]
    if context is None:
        context = _request_context(settings)

    resolver = LanguageResolver(
        settings.language,
        requested=request.args.get(LANGUAGE_PARAMETER),
        cookie=request.cookies.get(LANGUAGE_COOKIE),
        accept_languages=[value for value, _ in request.accept_languages],
    )
    return DomainActivator(settings, resolver=resolver, context=context)


def _translate(domain: str):
    activator = _build_activator()
    keys = request.args.getlist("key")

    with activator.domain_scope(domain):
        messages = {key: activator.gettext(key) for key in keys}

    backend = activator.backend_mode
    payload = {
        "domain": domain,
        "language": activator.language,
        "backend": backend.value if backend is not None else None,
        "messages": messages,
    }
    return jsonify(payload), 200


@blueprint.get("/")
def get_default_translations():
    """Translate the requested keys with the default domain."""

    return _translate(DEFAULT_DOMAIN)


@blueprint.get("/<domain>")
def get_domain_translations(domain: str):
    """Translate the requested keys with a specific domain."""

    return _translate(domain)
