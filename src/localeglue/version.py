"""Report the installed localeglue version for health checks."""

from __future__ import annotations

import tomllib
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

PACKAGE_NAME: Final = "localeglue"
PYPROJECT_PATH = Path(__file__).resolve().parents[2] / "pyproject.toml"


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the distribution version, or the source checkout's when not installed."""

    try:
        return metadata.version(PACKAGE_NAME)
    except metadata.PackageNotFoundError:
        return read_source_version(PYPROJECT_PATH)


def read_source_version(pyproject_path: Path) -> str:
    """Read ``[project].version`` for the localeglue project from ``pyproject_path``."""

    try:
        with pyproject_path.open("rb") as handle:
            project = tomllib.load(handle).get("project", {})
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise RuntimeError(f"Unable to read project metadata at {pyproject_path}") from exc

    if project.get("name") != PACKAGE_NAME or not project.get("version"):
        raise RuntimeError(f"{pyproject_path} does not describe the {PACKAGE_NAME} project")
    return str(project["version"])


__all__ = ["PACKAGE_NAME", "PYPROJECT_PATH", "get_project_version", "read_source_version"]
