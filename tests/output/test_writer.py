"""Tests for the output file writer."""
from pathlib import Path

import pytest

from spm_acknowledgements.exceptions import OutputError
from spm_acknowledgements.output.writer import write_output_file


class TestWriteOutputFile:
    """Tests for write_output_file function."""

    def test_writes_content(self, tmp_path: Path) -> None:
        """Test that content is written as UTF-8."""
        path = tmp_path / "acknowledgements.json"

        write_output_file("[]", path)

        assert path.read_text(encoding="utf-8") == "[]"

    def test_overwrites_existing(self, tmp_path: Path) -> None:
        """Test that an existing file is replaced."""
        path = tmp_path / "acknowledgements.json"
        path.write_text("old content")

        write_output_file("[]", path)

        assert path.read_text() == "[]"

    def test_missing_parent_raises(self, tmp_path: Path) -> None:
        """Test that a missing directory is an OutputError."""
        with pytest.raises(OutputError) as exc_info:
            write_output_file("[]", tmp_path / "missing" / "acknowledgements.json")
        assert "Cannot write to file" in str(exc_info.value)
