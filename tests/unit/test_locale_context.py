"""Tests for the injectable process locale state."""

from __future__ import annotations

import gettext
import locale
import os
from pathlib import Path

import pytest

from localeglue.localization import (
    ActiveCatalog,
    GettextEnvironment,
    LocaleContext,
    Translator,
    process_context,
)


def test_process_wide_environment_updates_host_state(monkeypatch, tmp_path: Path) -> None:
    calls: list[tuple[str, ...]] = []
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.setattr(locale, "setlocale", lambda category, code: calls.append(("setlocale", code)))
    monkeypatch.setattr(
        gettext, "bindtextdomain", lambda domain, directory: calls.append(("bind", domain, directory))
    )
    monkeypatch.setattr(gettext, "textdomain", lambda domain: calls.append(("textdomain", domain)))
    monkeypatch.setattr(
        locale,
        "bind_textdomain_codeset",
        lambda domain, codeset: calls.append(("codeset", domain, codeset)),
        raising=False,
    )

    environment = GettextEnvironment()
    environment.set_process_locale("fr_FR")
    environment.bind_domain("ssp", tmp_path)
    environment.set_domain_encoding("ssp", "UTF-8")
    environment.select_active_domain("ssp")

    assert os.environ["LC_ALL"] == "fr_FR"
    assert calls == [
        ("setlocale", "fr_FR"),
        ("bind", "ssp", str(tmp_path)),
        ("codeset", "ssp", "UTF-8"),
        ("textdomain", "ssp"),
    ]


def test_missing_host_locale_is_logged(monkeypatch, caplog: pytest.LogCaptureFixture) -> None:
    def _unsupported(category, code):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.setattr(locale, "setlocale", _unsupported)

    environment = GettextEnvironment()
    with caplog.at_level("WARNING"):
        environment.set_process_locale("xx_XX")

    assert environment.language == "xx_XX"
    assert os.environ["LC_ALL"] == "xx_XX"
    assert "xx_XX" in caplog.text


def test_isolated_environment_leaves_host_untouched(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("LC_ALL", "C")
    monkeypatch.setattr(gettext, "textdomain", pytest.fail)

    context = LocaleContext.isolated()
    context.environment.set_process_locale("de_DE")
    context.environment.bind_domain("ssp", tmp_path)
    context.environment.select_active_domain("ssp")

    assert os.environ["LC_ALL"] == "C"
    assert context.environment.bindings == {"ssp": tmp_path}


def test_environment_lookup_without_active_domain_returns_message() -> None:
    environment = GettextEnvironment(process_wide=False)

    assert environment.gettext("login.title") == "login.title"


def test_active_catalog_replaces_installed_table() -> None:
    catalog = ActiveCatalog()
    assert catalog.gettext("key") == "key"

    catalog.install(Translator(domain="ssp", locale="en", _messages={"key": "first"}))
    catalog.install(Translator(domain="other", locale="en", _messages={"other": "second"}))

    assert catalog.translator is not None and catalog.translator.domain == "other"
    assert catalog.gettext("key") == "key"
    assert catalog.gettext("other") == "second"


def test_process_context_is_shared() -> None:
    assert process_context() is process_context()
