"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Pathsplitter[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_document_info(svg_path: str, element_count: int, path_count: int) -> None:
    """Print document information.

    Args:
        svg_path: Path to the SVG file
        element_count: Total number of elements
        path_count: Number of <path> elements
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(svg_path)
    console.print(line)
    console.print(f"  {element_count:,} elements {SYM_DOT} {path_count:,} paths")


def print_compound_paths(compound: list[tuple[str | None, int]], verbose: bool) -> None:
    """Print compound paths found in a document.

    Args:
        compound: (element id, shape count) pairs
        verbose: Whether to show the per-path table
    """
    console.print(f"  [green]{len(compound)}[/green] compound paths")
    if not verbose or not compound:
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Element")
    table.add_column("Shapes", justify="right")
    for element_id, count in compound[:20]:
        table.add_row(element_id or "[dim]<unnamed>[/dim]", str(count))
    console.print(table)
    if len(compound) > 20:
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(compound) - 20} more)")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    separated: int,
    shapes: int,
    ids_assigned: int,
    errors: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total processing time in seconds
        separated: Number of compound paths separated
        shapes: Number of new path elements created
        ids_assigned: Number of identifiers assigned
        errors: Number of errors encountered
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {separated} paths separated {SYM_DOT} {shapes} shapes {SYM_DOT} "
        f"{ids_assigned} ids {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
