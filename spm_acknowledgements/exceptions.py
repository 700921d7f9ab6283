"""Custom exceptions for spm-acknowledgements."""


class AcknowledgementsError(Exception):
    """Base exception for all spm-acknowledgements errors."""

    pass


class ConfigurationError(AcknowledgementsError):
    """Exception raised when configuration is missing or invalid."""

    pass


class ScanError(AcknowledgementsError):
    """Exception raised when the checkouts directory cannot be scanned."""

    pass


class ManifestError(AcknowledgementsError):
    """Exception raised when the workspace-state manifest cannot be used."""

    pass


class OutputError(AcknowledgementsError):
    """Exception raised when the acknowledgements file cannot be written."""

    pass
