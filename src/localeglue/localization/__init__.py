"""Translation domain activation shared by the HTTP surface and the CLI."""

from .catalog import (
    CatalogLoadError,
    LocalizationError,
    Translator,
    catalog_path,
    load_catalog,
    primary_subtag,
)
from .context import ActiveCatalog, GettextEnvironment, LocaleContext, process_context
from .domains import DEFAULT_DOMAIN, DomainActivator, UnboundDomainError
from .language import LanguageResolver

__all__ = [
    "ActiveCatalog",
    "CatalogLoadError",
    "DEFAULT_DOMAIN",
    "DomainActivator",
    "GettextEnvironment",
    "LanguageResolver",
    "LocaleContext",
    "LocalizationError",
    "Translator",
    "UnboundDomainError",
    "catalog_path",
    "load_catalog",
    "primary_subtag",
    "process_context",
]
