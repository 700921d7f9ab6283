"""Pydantic models for the SPM workspace-state manifest.

Only the parts of ``workspace-state.json`` that are consumed are modelled;
all other keys written by SwiftPM are ignored. Missing keys fall back to
empty values so that manifest layouts from older and newer SwiftPM
versions load; values of the wrong type are still rejected.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PackageRef(BaseModel):
    """Reference to a resolved package.

    SwiftPM 5.6+ writes ``location`` instead of ``path``; such entries
    load with an empty path.
    """

    model_config = {"extra": "ignore"}

    name: str = Field(
        default="", description="Package name, matched against checkout names"
    )
    path: str = Field(default="", description="Source location (repository URL)")


class CheckoutState(BaseModel):
    """Checkout state of a resolved package."""

    model_config = {"extra": "ignore"}

    version: Optional[str] = Field(default=None, description="Resolved version")


class DependencyState(BaseModel):
    """State of a dependency; file-system packages have no checkout state."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    checkout_state: Optional[CheckoutState] = Field(
        default=None, alias="checkoutState"
    )


class Dependency(BaseModel):
    """A single dependency descriptor from the manifest."""

    model_config = {"extra": "ignore", "populate_by_name": True}

    package_ref: PackageRef = Field(default_factory=PackageRef, alias="packageRef")
    state: Optional[DependencyState] = Field(default=None)

    @property
    def is_usable(self) -> bool:
        """Check if the descriptor carries both a name and a source path.

        Returns:
            True if name and path are non-empty, False otherwise.
        """
        return bool(self.package_ref.name and self.package_ref.path)


class WorkspaceObject(BaseModel):
    """Body of the manifest holding the resolved dependencies."""

    model_config = {"extra": "ignore"}

    dependencies: list[Dependency] = Field(default_factory=list)


class WorkspaceState(BaseModel):
    """Top-level workspace-state manifest."""

    model_config = {"extra": "ignore"}

    object: WorkspaceObject = Field(default_factory=WorkspaceObject)

    @property
    def dependencies(self) -> list[Dependency]:
        """Shortcut to the dependency descriptors.

        Returns:
            List of Dependency descriptors in manifest order.
        """
        return self.object.dependencies
