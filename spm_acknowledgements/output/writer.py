"""Write formatted output to disk."""
from pathlib import Path

from spm_acknowledgements.exceptions import OutputError


def write_output_file(content: str, path: Path) -> None:
    """Write content to path, replacing any existing file.

    The parent directory is not created.

    Args:
        content: The text to write.
        path: Destination file path.

    Raises:
        OutputError: If the file cannot be created or written.
    """
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Cannot write to file '{path}': {e}") from e
