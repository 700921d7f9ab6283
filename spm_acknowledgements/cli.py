"""CLI entry point for spm-acknowledgements."""

from __future__ import annotations

import sys
import time

import click
from rich.console import Console
from rich.markup import escape

from spm_acknowledgements import __version__
from spm_acknowledgements.config import build_generator_config, load_config
from spm_acknowledgements.constants import BUILD_DIR_ENV_VAR, EXIT_ERROR, EXIT_SUCCESS
from spm_acknowledgements.exceptions import AcknowledgementsError
from spm_acknowledgements.models.config import GeneratorConfig
from spm_acknowledgements.output.terminal import TerminalFormatter
from spm_acknowledgements.pipeline import PipelineResult, generate_acknowledgements

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--spm",
    "-spm",
    "-s",
    "spm_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Path to the SPM checkouts directory.",
)
@click.option(
    "--output",
    "-output",
    "-o",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to write acknowledgements.json into (default: current directory).",
)
@click.option(
    "--manifest",
    "-m",
    "manifest_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to workspace-state.json (default: next to the checkouts directory).",
)
@click.option(
    "--build-dir",
    "build_dir",
    envvar=BUILD_DIR_ENV_VAR,
    default=None,
    help=f"Xcode build directory, usually taken from ${BUILD_DIR_ENV_VAR}.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show details for each stage and a package table.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_flag",
    is_flag=True,
    default=False,
    help="Suppress the success message.",
)
def main(
    spm_path: str | None,
    output_dir: str | None,
    manifest_path: str | None,
    build_dir: str | None,
    config_path: str | None,
    verbose_flag: bool,
    quiet_flag: bool,
) -> None:
    """Generate acknowledgements.json from Swift Package Manager checkouts.

    Reads the LICENSE file of every package checkout and, when
    workspace-state.json is found, the package source URL.

    \b
    Examples:
        spm-acknowledgements -s .build/checkouts
        spm-acknowledgements -s .build/checkouts -o Resources
        BUILD_DIR=/path/to/Build/Products spm-acknowledgements
        spm-acknowledgements --verbose -s .build/checkouts
    """
    if verbose_flag and quiet_flag:
        raise click.UsageError("--verbose and --quiet are mutually exclusive.")

    start = time.perf_counter()

    try:
        file_config = load_config(config_path)
        config = build_generator_config(
            build_dir=build_dir,
            spm_path=spm_path,
            output_dir=output_dir,
            manifest_path=manifest_path,
            file_config=file_config,
        )

        if verbose_flag:
            _console.print(
                f"[dim]Scanning checkouts in {escape(str(config.checkouts_path))}[/dim]"
            )

        result = generate_acknowledgements(config)

        if verbose_flag:
            _display_details(result, config)

    except AcknowledgementsError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)

    elapsed = time.perf_counter() - start
    if not quiet_flag:
        _console.print(f"Created acknowledgements file in {elapsed:.3f}s ✨")
    sys.exit(EXIT_SUCCESS)


def _display_details(result: PipelineResult, config: GeneratorConfig) -> None:
    """Print per-stage details in verbose mode."""
    if result.manifest_path is not None:
        _console.print(
            f"[dim]Matched {result.correlated_count} package(s) "
            f"against {escape(str(result.manifest_path))}[/dim]"
        )
    else:
        _console.print("[dim]No workspace-state.json found, skipping URLs[/dim]")

    TerminalFormatter(console=_console).format_acknowledgements(result.acknowledgements)
    _console.print(
        f"[green]Acknowledgements written to {escape(str(config.output_file))}[/green]"
    )


def _display_error(error: AcknowledgementsError) -> None:
    """Display error message to user on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    _error_console.print(
        f"[red bold]Error: {error_type}: {escape(str(error))}[/red bold]",
        soft_wrap=True,
    )


if __name__ == "__main__":
    main()
