"""Configuration file loading and run settings resolution."""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from spm_acknowledgements.constants import (
    BUILD_DIR_CHECKOUTS_SUFFIX,
    CONFIG_FILE_NAMES,
    MISSING_SPM_PATH_MESSAGE,
)
from spm_acknowledgements.exceptions import ConfigurationError
from spm_acknowledgements.models.config import FileConfig, GeneratorConfig


def find_config_file(search_dir: Path | None = None) -> Path | None:
    """Return the first configuration file present in search_dir.

    Args:
        search_dir: Directory to look in. Defaults to the working directory.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    directory = search_dir or Path.cwd()
    candidates = (directory / name for name in CONFIG_FILE_NAMES)
    return next((path for path in candidates if path.is_file()), None)


def load_config_file(path: Path) -> FileConfig:
    """Parse a YAML configuration file.

    Relative paths in the file are taken relative to the file's directory,
    so a project can keep its configuration next to its sources and run
    the tool from anywhere.

    Args:
        path: Path to the configuration file.

    Returns:
        Validated FileConfig. Empty and comment-only files give defaults.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid YAML,
            is not a mapping, or has unknown keys or bad values.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Cannot read configuration file '{path}': {e}"
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return FileConfig()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return FileConfig.model_validate(
            data, context={"base_dir": path.parent.absolute()}
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {problems}"
        ) from e


def load_config(config_path: str | None = None) -> FileConfig:
    """Load the explicit configuration file, or a discovered one.

    Args:
        config_path: Optional explicit path from ``--config``.

    Returns:
        FileConfig, all defaults when no file is given or found.

    Raises:
        ConfigurationError: If the file is invalid.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return FileConfig()
    return load_config_file(path)


def resolve_checkouts_path(
    build_dir: str | None,
    spm_path: str | None,
    file_config: FileConfig | None = None,
) -> Path:
    """Determine the directory holding one checkout per package.

    A non-empty build directory always wins; Xcode sets it for build phase
    scripts and the checkouts live two levels above it.

    Args:
        build_dir: Value of the BUILD_DIR environment variable, if any.
        spm_path: Explicit checkouts path from the command line.
        file_config: Loaded configuration file, if any.

    Returns:
        Path to the checkouts directory.

    Raises:
        ConfigurationError: If no source provides a path.
    """
    if build_dir:
        return Path(build_dir) / BUILD_DIR_CHECKOUTS_SUFFIX

    if spm_path:
        return Path(spm_path)

    if file_config is not None and file_config.spm_path is not None:
        return file_config.spm_path

    raise ConfigurationError(MISSING_SPM_PATH_MESSAGE)


def build_generator_config(
    build_dir: str | None,
    spm_path: str | None,
    output_dir: str | None = None,
    manifest_path: str | None = None,
    file_config: FileConfig | None = None,
) -> GeneratorConfig:
    """Build the settings for a run from flags, environment and config file.

    Command-line values take precedence over the configuration file.

    Args:
        build_dir: Value of the BUILD_DIR environment variable, if any.
        spm_path: Explicit checkouts path from the command line.
        output_dir: Output directory from the command line.
        manifest_path: Explicit manifest path from the command line.
        file_config: Loaded configuration file, if any.

    Returns:
        GeneratorConfig ready to be passed to the pipeline.

    Raises:
        ConfigurationError: If the checkouts path cannot be resolved.
    """
    file_config = file_config or FileConfig()
    checkouts_path = resolve_checkouts_path(build_dir, spm_path, file_config)

    return GeneratorConfig(
        checkouts_path=checkouts_path,
        output_dir=Path(output_dir) if output_dir else file_config.output_dir or Path("."),
        manifest_path=Path(manifest_path) if manifest_path else file_config.manifest_path,
        ignored_packages=file_config.ignored_packages or [],
    )
