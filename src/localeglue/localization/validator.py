"""Check that every bound domain ships a loadable catalogue per language."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence

from localeglue.config.schema import DEFAULT_DOMAIN, ConfigurationError, LocalizationSettings
from localeglue.config.settings import load_settings, load_settings_from_environment

from .catalog import CatalogLoadError, catalog_path, load_catalog


@dataclass
class DomainReport:
    """Outcome of validating one domain across the available languages."""

    domain: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _domain_directories(settings: LocalizationSettings) -> dict[str, Path]:
    directories = {DEFAULT_DOMAIN: settings.locale_directory}
    directories.update(settings.domains)
    return directories


def _missing_keys(
    catalogues: Mapping[str, Mapping[str, str]],
    base_language: str,
) -> list[str]:
    issues: list[str] = []
    base = catalogues.get(base_language)
    if not base:
        return issues

    expected = set(base)
    for language, messages in sorted(catalogues.items()):
        missing = expected - set(messages)
        if missing:
            issues.append(
                f"language '{language}' missing {len(missing)} keys: {', '.join(sorted(missing))}"
            )
    return issues


def validate_domain(
    settings: LocalizationSettings,
    domain: str,
    directory: Path,
) -> DomainReport:
    """Load the domain's catalogue for each available language."""

    report = DomainReport(domain=domain)
    catalogues: dict[str, dict[str, str]] = {}

    for language in settings.language.available:
        posix = settings.language.posix.get(language, language)
        path = catalog_path(directory, posix, domain)
        try:
            catalogues[language] = load_catalog(path)
        except CatalogLoadError as error:
            report.errors.append(f"{language}: {error}")

    report.warnings.extend(_missing_keys(catalogues, settings.language.default))
    return report


def validate_catalogs(settings: LocalizationSettings) -> dict[str, DomainReport]:
    """Validate every configured domain and return reports keyed by domain."""

    return {
        domain: validate_domain(settings, domain, directory)
        for domain, directory in _domain_directories(settings).items()
    }


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate gettext catalogues for every configured translation domain."
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML settings file (defaults to $LOCALEGLUE_CONFIG)",
    )
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with an error if a language lacks keys present in the default language",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running catalogue validation from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config) if args.config else load_settings_from_environment()
    except (FileNotFoundError, ConfigurationError) as error:
        print(f"failed to load configuration: {error}")
        return 1

    exit_code = 0

    for domain, report in validate_catalogs(settings).items():
        if report.errors:
            exit_code = 1
            print(f"[{domain}] {len(report.errors)} catalogue(s) failed to load:")
            for issue in report.errors:
                print(f"  - {issue}")
        if report.warnings:
            if args.fail_on_missing:
                exit_code = 1
            for issue in report.warnings:
                print(f"[{domain}] [missing] {issue}")
        if not report.errors and not report.warnings:
            print(f"[{domain}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
