"""CLI application entry point for pathsplitter.

This module provides the main CLI interface using Typer.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from pathsplitter import __version__
from pathsplitter.cli.output import (
    SYM_OK,
    console,
    print_compound_paths,
    print_document_info,
    print_error,
    print_header,
    print_step,
    print_success,
)
from pathsplitter.config import LoggingConfig, ProcessingConfig, SplitterSettings
from pathsplitter.core import DocumentProcessor, decompose
from pathsplitter.exceptions import (
    DocumentLoadError,
    DocumentSaveError,
    ElementError,
    PathSplitterError,
)
from pathsplitter.io import SvgReader, SvgWriter

# Create the Typer app
app = typer.Typer(
    name="pathsplitter",
    help="Split compound SVG paths into separate shapes, keeping holes with their outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Pathsplitter[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Split compound SVG paths into separate shapes."""


@app.command("decompose")
def decompose_command(
    path_data: Annotated[
        str,
        typer.Argument(
            help="Path data, e.g. 'M0 0 L10 0 L10 10 Z M20 0 L30 0 L30 10 Z'",
            show_default=False,
        ),
    ],
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the shapes as a JSON list",
        ),
    ] = False,
) -> None:
    """Decompose one path-data string and print one shape per line."""
    parts = decompose(path_data)
    if as_json:
        typer.echo(json.dumps(parts))
        return
    for part in parts:
        typer.echo(part)


@app.command("analyze")
def analyze_command(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-split.svg)",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="List compound paths without modifying the document",
        ),
    ] = False,
    no_ids: Annotated[
        bool,
        typer.Option(
            "--no-ids",
            help="Do not assign identifiers to unlabeled elements",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Separate every compound path in an SVG and label unlabeled elements.

    Example:
        pathsplitter analyze icon.svg

    This will create icon-split.svg with each compound path replaced by one
    path per shape.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not _check_input(input_svg):
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    settings = SplitterSettings(
        processing=ProcessingConfig(assign_ids=not no_ids),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        if dry_run:
            _handle_dry_run(input_svg, settings, quiet, verbose)
            raise typer.Exit(code=0)

        if not quiet:
            print_step("Loading document")

        reader = SvgReader(input_svg)
        document = reader.load()

        if not quiet:
            print_document_info(str(input_svg), reader.element_count, reader.path_count)
            print_step("Separating shapes")

        processor = DocumentProcessor(settings)
        stats = processor.smart_analyze(document)

        actual_output_path = output if output is not None else SvgWriter.get_split_path(input_svg)
        SvgWriter(document, actual_output_path).save()

        if not quiet:
            print_success(
                output_path=str(actual_output_path),
                total_time_s=stats.duration_seconds,
                separated=stats.paths_separated,
                shapes=stats.shapes_created,
                ids_assigned=stats.ids_assigned,
                errors=stats.error_count,
            )

    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save document: {e.reason}")
        raise typer.Exit(code=1)
    except PathSplitterError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


@app.command("separate")
def separate_command(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
            show_default=False,
        ),
    ],
    element_id: Annotated[
        str,
        typer.Argument(
            help="Identifier of the <path> to separate",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-split.svg)",
        ),
    ] = None,
) -> None:
    """Separate a single compound path into one path per shape."""
    if not _check_input(input_svg):
        raise typer.Exit(code=1)

    settings = SplitterSettings(logging=LoggingConfig(log_level="ERROR"))

    try:
        document = SvgReader(input_svg).load()
        result = DocumentProcessor(settings).separate_shape(document, element_id)

        if not result.separated:
            console.print(f"'{element_id}' is already a single shape. Nothing to do.")
            raise typer.Exit(code=0)

        actual_output_path = output if output is not None else SvgWriter.get_split_path(input_svg)
        SvgWriter(document, actual_output_path).save()

        console.print(
            f"[bold green]{SYM_OK}[/bold green] '{element_id}' separated into "
            f"{len(result.new_ids)} shapes: {', '.join(result.new_ids)}"
        )

    except ElementError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except PathSplitterError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _check_input(input_svg: Path) -> bool:
    """Validate the input path, printing an error if it is unusable."""
    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        return False

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG file.",
        )
        return False

    return True


def _handle_dry_run(
    svg_path: Path, settings: SplitterSettings, quiet: bool, verbose: bool
) -> None:
    """Handle --dry-run mode.

    Args:
        svg_path: Path to SVG file
        settings: Pathsplitter settings
        quiet: Suppress output
        verbose: Show verbose output
    """
    reader = SvgReader(svg_path)
    document = reader.load()

    if not quiet:
        print_step("Loading document")
        print_document_info(str(svg_path), reader.element_count, reader.path_count)
        print_step("Analyzing (dry run)")

    compound = DocumentProcessor(settings).find_compound_paths(document)

    if quiet:
        return

    print_compound_paths(compound, verbose=verbose)
    total_shapes = sum(count for _, count in compound)
    console.print(f"  Shapes after separation  {total_shapes}")
    console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no changes made")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
