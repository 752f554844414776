"""Process-wide locale state wrapped behind injectable objects.

Both translation backends mutate state that the host treats as global: the
gettext backend relies on ``LC_ALL`` and the module-level text domain, while
the catalogue backend installs a single active lookup table. The helpers in
this module hold that state explicitly so tests and embedded callers can work
with isolated instances, and :func:`process_context` exposes the shared one.
"""

from __future__ import annotations

import gettext
import locale
import logging
import os
from dataclasses import dataclass, field
from functools import cache
from pathlib import Path

from .catalog import Translator

_LOGGER = logging.getLogger(__name__)


class GettextEnvironment:
    """Environment-locale subsystem driven through Python's gettext module."""

    def __init__(self, *, process_wide: bool = True) -> None:
        self.process_wide = process_wide
        self.language: str | None = None
        self.active_domain: str | None = None
        self._bindings: dict[str, Path] = {}
        self._encodings: dict[str, str] = {}

    @property
    def bindings(self) -> dict[str, Path]:
        return dict(self._bindings)

    @property
    def encodings(self) -> dict[str, str]:
        return dict(self._encodings)

    def set_process_locale(self, code: str) -> None:
        self.language = code
        if not self.process_wide:
            return

        os.environ["LC_ALL"] = code
        try:
            locale.setlocale(locale.LC_ALL, code)
        except locale.Error:
            # gettext still honours LC_ALL when the C library lacks the locale.
            _LOGGER.warning("Locale '%s' is not installed on this host", code)

    def bind_domain(self, domain: str, directory: Path | str) -> None:
        self._bindings[domain] = Path(directory)
        if self.process_wide:
            gettext.bindtextdomain(domain, str(directory))

    def set_domain_encoding(self, domain: str, encoding: str) -> None:
        self._encodings[domain] = encoding
        if self.process_wide and hasattr(locale, "bind_textdomain_codeset"):
            locale.bind_textdomain_codeset(domain, encoding)

    def select_active_domain(self, domain: str) -> None:
        self.active_domain = domain
        if self.process_wide:
            gettext.textdomain(domain)

    def gettext(self, message: str) -> str:
        """Translate ``message`` from the compiled catalogue of the active domain."""

        domain = self.active_domain
        if domain is None or domain not in self._bindings:
            return message

        languages = [self.language] if self.language else None
        translations = gettext.translation(
            domain,
            localedir=str(self._bindings[domain]),
            languages=languages,
            fallback=True,
        )
        return translations.gettext(message)


class ActiveCatalog:
    """Holder for the lookup table installed by the catalogue backend."""

    def __init__(self) -> None:
        self._translator: Translator | None = None

    @property
    def translator(self) -> Translator | None:
        return self._translator

    def install(self, translator: Translator) -> None:
        self._translator = translator

    def gettext(self, message: str) -> str:
        if self._translator is None:
            return message
        return self._translator(message)


@dataclass
class LocaleContext:
    """Bundle of the locale state a domain activator is allowed to mutate."""

    environment: GettextEnvironment = field(default_factory=GettextEnvironment)
    catalog: ActiveCatalog = field(default_factory=ActiveCatalog)

    @classmethod
    def isolated(cls) -> LocaleContext:
        """Return a context that never touches process-wide locale state."""

        return cls(environment=GettextEnvironment(process_wide=False))


@cache
def process_context() -> LocaleContext:
    """Return the context shared by every activator in this process."""

    return LocaleContext()


__all__ = ["ActiveCatalog", "GettextEnvironment", "LocaleContext", "process_context"]
