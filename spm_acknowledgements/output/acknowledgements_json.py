"""JSON output formatter for acknowledgements."""
import json
from typing import Any

from spm_acknowledgements.models.acknowledgement import Acknowledgement


class AcknowledgementsJsonFormatter:
    """Format acknowledgements as the JSON array consumed by apps.

    Keys follow Acknowledgement field order and empty fields are omitted.
    """

    def format_acknowledgements(self, acknowledgements: list[Acknowledgement]) -> str:
        """Format acknowledgements as a JSON string.

        Args:
            acknowledgements: Records to serialize, in output order.

        Returns:
            Two-space indented JSON array.
        """
        output = self._build_output(acknowledgements)
        return json.dumps(output, indent=2, ensure_ascii=False)

    def _build_output(self, acknowledgements: list[Acknowledgement]) -> list[dict[str, Any]]:
        return [ack.to_output_dict() for ack in acknowledgements]
