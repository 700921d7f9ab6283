"""Pydantic data models for spm-acknowledgements."""

from spm_acknowledgements.models.acknowledgement import Acknowledgement
from spm_acknowledgements.models.config import FileConfig, GeneratorConfig
from spm_acknowledgements.models.workspace import (
    CheckoutState,
    Dependency,
    DependencyState,
    PackageRef,
    WorkspaceState,
)

__all__ = [
    "Acknowledgement",
    "CheckoutState",
    "Dependency",
    "DependencyState",
    "FileConfig",
    "GeneratorConfig",
    "PackageRef",
    "WorkspaceState",
]
