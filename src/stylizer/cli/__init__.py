"""Command-line interface for stylizer.

This module provides the CLI using Typer with rich output.

Key features:
- Build point marker styles and print them as SLD
- List raster bands
- Inspect image tiles
"""

from stylizer.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
