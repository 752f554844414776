"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path
from typing import Mapping

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from babel.messages.catalog import Catalog  # noqa: E402
from babel.messages.mofile import write_mo  # noqa: E402
from babel.messages.pofile import write_po  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from localeglue.app import create_app  # noqa: E402
from localeglue.config.schema import LocalizationSettings  # noqa: E402
from localeglue.localization import LocaleContext  # noqa: E402

DEFAULT_MESSAGES = {
    "en": {"login.title": "Sign in", "logout.title": "Signed out"},
    "fr": {"login.title": "Connexion", "logout.title": "Déconnecté"},
    "de": {"login.title": "Anmelden"},
}
MODULE_MESSAGES = {
    "en": {"consent.title": "Consent"},
    "fr": {"consent.title": "Consentement"},
    "de": {"consent.title": "Zustimmung"},
}


def write_catalog(
    directory: Path,
    language: str,
    domain: str,
    messages: Mapping[str, str],
) -> Path:
    """Write ``.po`` and compiled ``.mo`` files for one domain and language."""

    catalog = Catalog(locale=language, domain=domain)
    for key, value in messages.items():
        catalog.add(key, value)

    target = directory / language / "LC_MESSAGES"
    target.mkdir(parents=True, exist_ok=True)
    po_path = target / f"{domain}.po"
    with po_path.open("wb") as handle:
        write_po(handle, catalog)
    with (target / f"{domain}.mo").open("wb") as handle:
        write_mo(handle, catalog)
    return po_path


@pytest.fixture()
def locale_tree(tmp_path: Path) -> Path:
    """Return a directory holding the default ``ssp`` catalogues."""

    root = tmp_path / "locales"
    for language, messages in DEFAULT_MESSAGES.items():
        write_catalog(root, language, "ssp", messages)
    return root


@pytest.fixture()
def module_tree(tmp_path: Path) -> Path:
    """Return a directory holding catalogues for the ``consent`` domain."""

    root = tmp_path / "modules" / "consent" / "locales"
    for language, messages in MODULE_MESSAGES.items():
        write_catalog(root, language, "consent", messages)
    return root


@pytest.fixture()
def context() -> LocaleContext:
    """Provide locale state isolated from the test process."""

    return LocaleContext.isolated()


@pytest.fixture()
def settings(locale_tree: Path, module_tree: Path) -> LocalizationSettings:
    """Catalogue-backed settings with English, French and German enabled."""

    return LocalizationSettings.model_validate(
        {
            "locales": locale_tree,
            "i18n_backend": "catalog",
            "language": {"default": "en", "available": ["en", "fr", "de"]},
            "domains": {"consent": module_tree},
        }
    )


@pytest.fixture()
def app(settings: LocalizationSettings, context: LocaleContext) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(settings, context)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
