"""Output formatters for spm-acknowledgements."""

from spm_acknowledgements.output.acknowledgements_json import AcknowledgementsJsonFormatter
from spm_acknowledgements.output.terminal import TerminalFormatter
from spm_acknowledgements.output.writer import write_output_file

__all__ = [
    "AcknowledgementsJsonFormatter",
    "TerminalFormatter",
    "write_output_file",
]
