"""Shared fixtures for spm-acknowledgements tests."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from spm_acknowledgements.constants import BUILD_DIR_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_build_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a BUILD_DIR from the surrounding shell out of the tests."""
    monkeypatch.delenv(BUILD_DIR_ENV_VAR, raising=False)


@pytest.fixture
def checkouts(tmp_path: Path) -> Path:
    """Create a checkouts directory with packages A (MIT) and B (no LICENSE)."""
    checkouts_dir = tmp_path / "SourcePackages" / "checkouts"
    (checkouts_dir / "A").mkdir(parents=True)
    (checkouts_dir / "A" / "LICENSE").write_text("MIT", encoding="utf-8")
    (checkouts_dir / "B").mkdir()
    return checkouts_dir


def _write_manifest(path: Path, dependencies: list[tuple[str, str]]) -> Path:
    data = {
        "object": {
            "dependencies": [
                {
                    "packageRef": {
                        "identity": name.lower(),
                        "kind": "remoteSourceControl",
                        "location": url,
                        "name": name,
                        "path": url,
                    },
                    "state": {
                        "checkoutState": {"revision": "abc123", "version": "1.0.0"},
                        "name": "checkout",
                    },
                    "subpath": name.lower(),
                }
                for name, url in dependencies
            ],
            "artifacts": [],
        },
        "version": 6,
    }
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def write_manifest():
    """Provide a helper writing a workspace-state.json.

    The helper takes a path and a list of (name, url) dependencies.
    """
    return _write_manifest
