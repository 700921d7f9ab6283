"""Workspace-state manifest loading and correlation."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from spm_acknowledgements.exceptions import ManifestError
from spm_acknowledgements.models.acknowledgement import Acknowledgement
from spm_acknowledgements.models.config import GeneratorConfig
from spm_acknowledgements.models.workspace import WorkspaceState


def find_manifest(config: GeneratorConfig) -> Optional[Path]:
    """Locate the manifest to correlate against.

    An explicitly configured manifest must exist. The default manifest next
    to the checkouts directory is optional.

    Args:
        config: Settings for the run.

    Returns:
        Path to the manifest, or None if the default one is absent.

    Raises:
        ManifestError: If an explicitly configured manifest does not exist.
    """
    if config.manifest_path is not None:
        if not config.manifest_path.is_file():
            raise ManifestError(f"Manifest file not found: '{config.manifest_path}'")
        return config.manifest_path

    default_path = config.default_manifest_path
    if default_path.is_file():
        return default_path
    return None


def load_workspace_state(path: Path) -> WorkspaceState:
    """Read and validate a workspace-state manifest.

    Args:
        path: Path to workspace-state.json.

    Returns:
        Parsed WorkspaceState.

    Raises:
        ManifestError: If the file cannot be read, is not valid JSON,
            or does not have the expected structure.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Cannot read manifest '{path}': {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in manifest '{path}': {e}") from e

    try:
        return WorkspaceState.model_validate(data)
    except ValidationError as e:
        raise ManifestError(
            f"Unexpected manifest structure in '{path}': "
            f"{e.error_count()} validation error(s)"
        ) from e


def apply_manifest(
    acknowledgements: list[Acknowledgement],
    state: WorkspaceState,
) -> int:
    """Copy source locations from the manifest onto matching records.

    Each dependency is matched to the first record with the same
    package_name. Once a record has a URL from the manifest, later
    dependencies with the same name leave it untouched. Dependencies
    with no matching record, or without a name or path, are ignored.

    Args:
        acknowledgements: Records to update in place.
        state: Parsed manifest.

    Returns:
        Number of records that received a URL.
    """
    by_name: dict[str, Acknowledgement] = {}
    for ack in acknowledgements:
        by_name.setdefault(ack.package_name, ack)

    correlated: set[str] = set()
    for dependency in state.dependencies:
        if not dependency.is_usable:
            continue
        ref = dependency.package_ref
        ack = by_name.get(ref.name)
        if ack is None or ref.name in correlated:
            continue
        ack.url = ref.path
        correlated.add(ref.name)

    return len(correlated)
