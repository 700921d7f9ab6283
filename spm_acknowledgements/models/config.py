"""Configuration Pydantic models for spm-acknowledgements."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from spm_acknowledgements.constants import MANIFEST_FILE_NAME, OUTPUT_FILE_NAME


class FileConfig(BaseModel):
    """Contents of a `.spm-acknowledgements.yaml` configuration file.

    All fields are optional; command-line flags take precedence. Relative
    paths are resolved against the ``base_dir`` passed in the validation
    context, normally the directory holding the configuration file.
    """

    model_config = {"extra": "forbid"}

    spm_path: Optional[Path] = Field(
        default=None,
        description="Path to the SPM checkouts directory.",
    )
    output_dir: Optional[Path] = Field(
        default=None,
        description="Directory to write acknowledgements.json into.",
    )
    manifest_path: Optional[Path] = Field(
        default=None,
        description="Path to workspace-state.json.",
    )
    ignored_packages: Optional[List[str]] = Field(
        default=None,
        description="List of checkout directory names to skip.",
    )

    @field_validator("spm_path", "output_dir", "manifest_path")
    @classmethod
    def _anchor_to_base_dir(
        cls, value: Optional[Path], info: ValidationInfo
    ) -> Optional[Path]:
        if value is None:
            return None
        value = value.expanduser()
        base_dir = (info.context or {}).get("base_dir")
        if base_dir is None or value.is_absolute():
            return value
        return Path(base_dir) / value


class GeneratorConfig(BaseModel):
    """Resolved settings for one acknowledgements run.

    Built once at start by the config resolver and passed to every stage.
    """

    model_config = {"extra": "forbid"}

    checkouts_path: Path = Field(description="Directory of package checkouts")
    output_dir: Path = Field(
        default=Path("."), description="Directory to write the output file into"
    )
    manifest_path: Optional[Path] = Field(
        default=None,
        description="Explicit manifest path. None means the default location.",
    )
    ignored_packages: List[str] = Field(default_factory=list)

    @property
    def default_manifest_path(self) -> Path:
        """Manifest location next to the checkouts directory."""
        return self.checkouts_path / ".." / MANIFEST_FILE_NAME

    @property
    def output_file(self) -> Path:
        """Full path of the acknowledgements file."""
        return self.output_dir / OUTPUT_FILE_NAME
