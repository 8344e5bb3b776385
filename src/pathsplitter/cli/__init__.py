"""Command-line interface for pathsplitter.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Decompose a single path-data string
- Analyze a whole SVG document (separate shapes, assign ids)
- Separate one element by identifier
- Dry-run listing of compound paths
"""

from pathsplitter.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
