"""Gettext catalogue helpers backed by PO files on disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from babel.messages.pofile import PoFileError, read_po

_LOGGER = logging.getLogger(__name__)

CATALOG_SUFFIX = ".po"
MESSAGES_CATEGORY = "LC_MESSAGES"


class LocalizationError(Exception):
    """Base class for errors raised while switching translation domains."""


class CatalogLoadError(LocalizationError):
    """Raised when a catalogue file is missing or cannot be parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to load catalogue {self.path}: {reason}")


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving strings from one installed catalogue."""

    domain: str
    locale: str
    _messages: Mapping[str, str] = field(default_factory=dict)

    def __call__(self, key: str) -> str:
        return self._messages.get(key) or key

    @property
    def messages(self) -> Mapping[str, str]:
        return MappingProxyType(dict(self._messages))


def primary_subtag(language: str) -> str:
    """Return the part of a POSIX language code before its first underscore."""

    return language.split("_", 1)[0]


def catalog_path(directory: Path | str, language: str, domain: str) -> Path:
    """Build ``{directory}/{subtag}/LC_MESSAGES/{domain}.po`` for a language."""

    return (
        Path(directory)
        / primary_subtag(language)
        / MESSAGES_CATEGORY
        / f"{domain}{CATALOG_SUFFIX}"
    )


def load_catalog(path: Path | str) -> dict[str, str]:
    """Parse a PO file into a mapping of message ids to translations.

    The header entry, fuzzy entries and untranslated entries are skipped, the
    same way ``msgfmt`` leaves them out of compiled catalogues. Plural entries
    are keyed by their singular id and map to the first plural form.
    """

    catalog_file = Path(path)
    try:
        with catalog_file.open("rb") as handle:
            catalog = read_po(handle, abort_invalid=True)
    except FileNotFoundError as exc:
        raise CatalogLoadError(catalog_file, "file not found") from exc
    except OSError as exc:
        raise CatalogLoadError(catalog_file, f"unreadable ({exc.strerror})") from exc
    except (PoFileError, UnicodeDecodeError, LookupError) as exc:
        # LookupError: the header names a charset Python does not know.
        raise CatalogLoadError(catalog_file, f"malformed catalogue ({exc})") from exc

    messages: dict[str, str] = {}
    for message in catalog:
        if not message.id or message.fuzzy:
            continue

        if isinstance(message.id, (list, tuple)):
            key = message.id[0]
            strings = message.string or ()
            translation = strings[0] if strings else ""
        else:
            key = message.id
            translation = message.string

        if translation:
            messages[key] = translation

    _LOGGER.debug("Loaded %d messages from %s", len(messages), catalog_file)
    return messages


__all__ = [
    "CATALOG_SUFFIX",
    "CatalogLoadError",
    "LocalizationError",
    "MESSAGES_CATEGORY",
    "Translator",
    "catalog_path",
    "load_catalog",
    "primary_subtag",
]
