"""Tests for reading the localeglue version from project metadata."""

from __future__ import annotations

from pathlib import Path

import pytest

from localeglue.version import read_source_version


def _write_pyproject(directory: Path, body: str) -> Path:
    path = directory / "pyproject.toml"
    path.write_text(body, encoding="utf-8")
    return path


def test_reads_version_of_localeglue_project(tmp_path: Path) -> None:
    path = _write_pyproject(
        tmp_path,
        '[build-system]\nrequires = ["setuptools"]\n\n'
        '[project]\nname = "localeglue"\nversion = "2.4.1"\n',
    )

    assert read_source_version(path) == "2.4.1"


def test_rejects_metadata_of_another_project(tmp_path: Path) -> None:
    path = _write_pyproject(tmp_path, '[project]\nname = "other"\nversion = "1.0"\n')

    with pytest.raises(RuntimeError, match="does not describe the localeglue project"):
        read_source_version(path)


@pytest.mark.parametrize("body", ['[project\nname = "localeglue"', ""])
def test_rejects_unusable_metadata(tmp_path: Path, body: str) -> None:
    path = _write_pyproject(tmp_path, body)

    with pytest.raises(RuntimeError):
        read_source_version(path)


def test_missing_metadata_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError, match="Unable to read project metadata"):
        read_source_version(tmp_path / "pyproject.toml")
