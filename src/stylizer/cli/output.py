"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from stylizer.layer import Tile
from stylizer.raster import Raster

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
    console.print(f"\n[bold]Stylizer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_bands(raster: Raster) -> None:
    """Print a table of raster bands in channel order.

    Args:
        raster: Raster to describe
    """
    width, height = raster.size
    line = Text("  ")
    line.append(str(raster.path))
    line.append(f" ({width} x {height})")
    console.print(line)

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Band")
    table.add_column("Min", justify="right")
    table.add_column("Max", justify="right")
    table.add_column("No Data")
    table.add_column("Scale", justify="right")
    table.add_column("Offset", justify="right")
    table.add_column("Type")
    for index, band in enumerate(raster.bands):
        table.add_row(
            str(index),
            str(band),
            f"{band.min_value:g}",
            f"{band.max_value:g}",
            "-" if band.no_data is None else f"{band.no_data:g}",
            f"{band.scale:g}",
            f"{band.offset:g}",
            band.sample_type,
        )
    console.print(table)


def print_tile(tile: Tile, image_size: tuple[int, int] | None, base64_length: int) -> None:
    """Print tile details.

    Args:
        tile: Tile to describe
        image_size: Decoded (width, height), None without a payload
        base64_length: Length of the base64 payload
    """
    console.print(f"  {tile}")
    if image_size is None:
        console.print(f"  no payload {SYM_DOT} nothing to decode")
        return
    width, height = image_size
    console.print(f"  {width} x {height} px {SYM_DOT} {base64_length:,} base64 chars")


def print_success(message: str) -> None:
    """Print success message.

    Args:
        message: Summary message
    """
    console.print(f"\n[bold green]{SYM_OK}[/bold green] {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
