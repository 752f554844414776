"""Language negotiation for the domain activator."""

from __future__ import annotations

from typing import Iterable, Sequence

from localeglue.config.schema import LanguageSettings


def _candidates(accept_languages: Iterable[str]) -> list[str]:
    """Expand browser language tags so ``de-CH`` also offers ``de``."""

    expanded: list[str] = []
    for tag in accept_languages:
        normalized = tag.strip().lower()
        if not normalized or normalized == "*":
            continue
        expanded.append(normalized)
        primary = normalized.split("-")[0]
        if primary != normalized:
            expanded.append(primary)
    return expanded


class LanguageResolver:
    """Pick the language for a request and map it to a POSIX locale name.

    Explicitly requested languages win over the cookie, which wins over the
    client's ``Accept-Language`` preferences. Anything not listed as available
    falls back to the configured default.
    """

    def __init__(
        self,
        settings: LanguageSettings,
        requested: str | None = None,
        cookie: str | None = None,
        accept_languages: Sequence[str] = (),
    ) -> None:
        self.settings = settings
        self.requested = requested
        self.cookie = cookie
        self.accept_languages = tuple(accept_languages)
        self._available = {code.lower(): code for code in settings.available}

    def _match(self, language: str | None) -> str | None:
        """Return the configured spelling of ``language``, ignoring case."""

        if not language:
            return None
        return self._available.get(language.strip().lower())

    def get_language(self) -> str:
        for explicit in (self.requested, self.cookie):
            matched = self._match(explicit)
            if matched:
                return matched

        for candidate in _candidates(self.accept_languages):
            matched = self._match(candidate)
            if matched:
                return matched

        return self.settings.default

    def get_posix_language(self, language: str) -> str:
        return self.settings.posix.get(language, language)

    def resolve_posix_language(self) -> str:
        return self.get_posix_language(self.get_language())


__all__ = ["LanguageResolver"]
