"""Scanner module for checkout discovery and license extraction."""
from pathlib import Path
from typing import Iterable, Optional

from spm_acknowledgements.constants import LICENSE_FILE_NAME
from spm_acknowledgements.exceptions import ScanError
from spm_acknowledgements.models.acknowledgement import Acknowledgement
from spm_acknowledgements.models.config import GeneratorConfig


def _list_directory(path: Path) -> list[Path]:
    """List the immediate entries of a directory sorted by name.

    Raises:
        ScanError: If the directory cannot be listed.
    """
    try:
        return sorted(path.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise ScanError(f"Cannot read directory '{path}': {e}") from e


def discover_packages(
    checkouts_path: Path,
    ignored_packages: Optional[Iterable[str]] = None,
) -> list[Acknowledgement]:
    """Discover one package per subdirectory of the checkouts directory.

    Non-directory entries and symlinks are skipped. Package name matching
    against ignored_packages is exact and case-sensitive.

    Args:
        checkouts_path: Directory holding one checkout per package.
        ignored_packages: Optional names of checkouts to skip.

    Returns:
        List of Acknowledgement objects with only package_name populated,
        sorted by name.

    Raises:
        ScanError: If the checkouts directory cannot be listed.
    """
    ignored = set(ignored_packages or [])
    packages: list[Acknowledgement] = []

    for entry in _list_directory(checkouts_path):
        if entry.is_symlink() or not entry.is_dir() or entry.name in ignored:
            continue
        packages.append(Acknowledgement(package_name=entry.name))

    return packages


def read_license(package_path: Path) -> str:
    """Read the LICENSE file of a single package checkout.

    Only a file named exactly ``LICENSE`` is honored; ``LICENSE.md``,
    ``license`` and similar names are not matched. Line endings are kept
    as they are on disk.

    Args:
        package_path: Checkout directory of the package.

    Returns:
        Full LICENSE text, or an empty string if the package has none.

    Raises:
        ScanError: If the directory cannot be listed or the file cannot be read.
    """
    for entry in _list_directory(package_path):
        if entry.name != LICENSE_FILE_NAME:
            continue
        try:
            with entry.open(encoding="utf-8", errors="replace", newline="") as f:
                return f.read()
        except OSError as e:
            raise ScanError(f"Cannot read license file '{entry}': {e}") from e

    return ""


def scan_checkouts(config: GeneratorConfig) -> list[Acknowledgement]:
    """Discover packages and attach their license text.

    Args:
        config: Settings for the run.

    Returns:
        List of Acknowledgement objects with content populated where a
        LICENSE file exists.

    Raises:
        ScanError: On the first directory or file that cannot be read.
    """
    packages = discover_packages(config.checkouts_path, config.ignored_packages)

    for ack in packages:
        ack.content = read_license(config.checkouts_path / ack.package_name)

    return packages
