"""Select the translation backend and switch between gettext domains.

The activator normalises two mechanisms with incompatible activation rules.
The environment backend relies on gettext's native notion of a current text
domain, while the catalogue backend has no domains at all: it loads a flat
PO catalogue and installs it as the single active lookup table. Callers only
ever see :meth:`DomainActivator.activate` and
:meth:`DomainActivator.restore_default`.

Both backends mutate process-wide state through the injected
:class:`~localeglue.localization.context.LocaleContext`. Activation sequences
running concurrently against the same context must be serialised by the
caller.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterator, Mapping

from localeglue.config.schema import DEFAULT_DOMAIN, BackendMode, LocalizationSettings

from .catalog import LocalizationError, Translator, catalog_path, load_catalog
from .context import LocaleContext, process_context
from .language import LanguageResolver

_LOGGER = logging.getLogger(__name__)

DOMAIN_ENCODING = "UTF-8"

CatalogLoader = Callable[[Path], Mapping[str, str]]


class UnboundDomainError(LocalizationError, LookupError):
    """Raised when activating a domain that was never registered."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"Translation domain '{domain}' has no registered catalogue")


class InertBackend:
    """Backend used when no translation mechanism is configured."""

    mode: BackendMode | None = None

    def __init__(self) -> None:
        self.bindings: dict[str, Path] = {}
        self.active_domain: str | None = None

    def register(self, domain: str, directory: Path) -> None:
        return None

    def activate(self, domain: str) -> None:
        return None

    def restore_default(self) -> None:
        self.activate(DEFAULT_DOMAIN)

    def gettext(self, message: str) -> str:
        return message


class EnvironmentBoundBackend(InertBackend):
    """Backend that drives gettext's process locale and text domain."""

    mode = BackendMode.ENVIRONMENT

    def __init__(self, context: LocaleContext, language: str, *, strict: bool = True) -> None:
        super().__init__()
        self.environment = context.environment
        self.strict = strict
        self.environment.set_process_locale(language)

    def register(self, domain: str, directory: Path) -> None:
        self.bindings[domain] = directory
        self.environment.bind_domain(domain, directory)
        self.environment.set_domain_encoding(domain, DOMAIN_ENCODING)

    def activate(self, domain: str) -> None:
        if self.strict and domain not in self.bindings:
            raise UnboundDomainError(domain)
        self.environment.select_active_domain(domain)
        self.active_domain = domain

    def gettext(self, message: str) -> str:
        return self.environment.gettext(message)


class CatalogLoadedBackend(InertBackend):
    """Backend that loads a PO catalogue and installs it as the lookup table."""

    mode = BackendMode.CATALOG

    def __init__(self, context: LocaleContext, language: str, loader: CatalogLoader) -> None:
        super().__init__()
        self.catalog = context.catalog
        self.language = language
        self.loader = loader

    def register(self, domain: str, directory: Path) -> None:
        self.bindings[domain] = directory

    def activate(self, domain: str) -> None:
        try:
            directory = self.bindings[domain]
        except KeyError:
            raise UnboundDomainError(domain) from None

        path = catalog_path(directory, self.language, domain)
        messages = self.loader(path)
        self.catalog.install(
            Translator(domain=domain, locale=self.language, _messages=dict(messages))
        )
        self.active_domain = domain

    def gettext(self, message: str) -> str:
        return self.catalog.gettext(message)


class DomainActivator:
    """Bind translation domains to catalogue directories and activate them."""

    def __init__(
        self,
        settings: LocalizationSettings,
        *,
        resolver: LanguageResolver | None = None,
        context: LocaleContext | None = None,
        loader: CatalogLoader | None = None,
    ) -> None:
        self.settings = settings
        resolver = resolver or LanguageResolver(settings.language)
        self.language = resolver.resolve_posix_language()
        context = context or process_context()

        mode = settings.backend
        if mode is BackendMode.ENVIRONMENT:
            self._backend: InertBackend = EnvironmentBoundBackend(
                context, self.language, strict=settings.strict_domains
            )
        elif mode is BackendMode.CATALOG:
            self._backend = CatalogLoadedBackend(
                context, self.language, loader or load_catalog
            )
        else:
            self._backend = InertBackend()
            return

        self.register(DEFAULT_DOMAIN, settings.locale_directory)
        self.activate(DEFAULT_DOMAIN)

        for domain, directory in settings.domains.items():
            self.register(domain, directory)

    @property
    def backend_mode(self) -> BackendMode | None:
        return self._backend.mode

    @property
    def active_domain(self) -> str | None:
        return self._backend.active_domain

    @property
    def bindings(self) -> Mapping[str, Path]:
        return MappingProxyType(self._backend.bindings)

    def register(self, domain: str, directory: Path | str) -> None:
        """Bind ``domain`` to ``directory``, replacing any previous binding."""

        if self._backend.mode is None:
            return
        self._backend.register(domain, Path(directory))
        _LOGGER.debug("Registered translation domain %s at %s", domain, directory)

    def activate(self, domain: str) -> None:
        """Make ``domain`` the source of subsequent translation lookups.

        Raises :class:`UnboundDomainError` when the domain has no binding and
        :class:`~localeglue.localization.catalog.CatalogLoadError` when its
        catalogue cannot be read. In both cases the previously active domain
        stays in effect.
        """

        if self._backend.mode is None:
            return
        self._backend.activate(domain)
        _LOGGER.debug("Activated translation domain %s (%s)", domain, self.language)

    def restore_default(self) -> None:
        """Return lookups to the default domain's catalogue."""

        if self._backend.mode is None:
            return
        self._backend.restore_default()

    @contextmanager
    def domain_scope(self, domain: str) -> Iterator[DomainActivator]:
        """Activate ``domain`` for the duration of a ``with`` block."""

        self.activate(domain)
        try:
            yield self
        finally:
            self.restore_default()

    def gettext(self, message: str) -> str:
        return self._backend.gettext(message)


__all__ = [
    "CatalogLoadedBackend",
    "DEFAULT_DOMAIN",
    "DOMAIN_ENCODING",
    "DomainActivator",
    "EnvironmentBoundBackend",
    "InertBackend",
    "UnboundDomainError",
]
