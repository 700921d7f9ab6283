"""Acknowledgement Pydantic model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Acknowledgement(BaseModel):
    """Acknowledgement entry for a single vendored package.

    Field declaration order is the key order of the serialized output.
    """

    model_config = {"extra": "forbid"}

    package_name: str = Field(description="Checkout directory name")
    content: str = Field(default="", description="Verbatim LICENSE text")
    version: str = Field(default="", description="Reserved, not populated")
    url: str = Field(default="", description="Source location from the manifest")
    author: str = Field(default="", description="Reserved, not populated")

    @property
    def has_license(self) -> bool:
        """Check if LICENSE text was found for this package.

        Returns:
            True if content is non-empty, False otherwise.
        """
        return bool(self.content)

    def to_output_dict(self) -> dict[str, Any]:
        """Build the output mapping, omitting empty-string fields.

        Returns:
            Dictionary in declaration order without empty values.
        """
        return {key: value for key, value in self.model_dump().items() if value != ""}
