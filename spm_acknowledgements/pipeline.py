"""Acknowledgements pipeline: scan, correlate, serialize."""
from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Optional

from spm_acknowledgements.manifest import apply_manifest, find_manifest, load_workspace_state
from spm_acknowledgements.models.acknowledgement import Acknowledgement
from spm_acknowledgements.models.config import GeneratorConfig
from spm_acknowledgements.output.acknowledgements_json import AcknowledgementsJsonFormatter
from spm_acknowledgements.output.writer import write_output_file
from spm_acknowledgements.scanner import scan_checkouts


class PipelineResult(NamedTuple):
    """Result of collecting acknowledgements.

    Attributes:
        acknowledgements: Records in output order.
        manifest_path: Manifest that was correlated, or None if skipped.
        correlated_count: Number of records that received a URL.
    """

    acknowledgements: list[Acknowledgement]
    manifest_path: Optional[Path]
    correlated_count: int


def collect_acknowledgements(config: GeneratorConfig) -> PipelineResult:
    """Scan checkouts and correlate them with the manifest when present.

    Args:
        config: Settings for the run.

    Returns:
        PipelineResult with the collected records.

    Raises:
        ScanError: If a checkout cannot be read.
        ManifestError: If the manifest is found but cannot be used.
    """
    acknowledgements = scan_checkouts(config)

    manifest_path = find_manifest(config)
    correlated = 0
    if manifest_path is not None:
        state = load_workspace_state(manifest_path)
        correlated = apply_manifest(acknowledgements, state)

    return PipelineResult(
        acknowledgements=acknowledgements,
        manifest_path=manifest_path,
        correlated_count=correlated,
    )


def generate_acknowledgements(config: GeneratorConfig) -> PipelineResult:
    """Run the full pipeline and write the acknowledgements file.

    Nothing is written unless every earlier stage succeeds.

    Args:
        config: Settings for the run.

    Returns:
        PipelineResult describing what was written.

    Raises:
        AcknowledgementsError: On the first failure of any stage.
    """
    result = collect_acknowledgements(config)
    content = AcknowledgementsJsonFormatter().format_acknowledgements(
        result.acknowledgements
    )
    write_output_file(content, config.output_file)
    return result
