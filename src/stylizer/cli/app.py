"""CLI application entry point for stylizer.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from stylizer import __version__
from stylizer.cli.output import (
    console,
    print_bands,
    print_error,
    print_header,
    print_step,
    print_success,
    print_tile,
)
from stylizer.config import LoggingConfig, StylizerSettings
from stylizer.domain import Property
from stylizer.exceptions import StylizerError
from stylizer.layer import Tile
from stylizer.raster import RasterReader
from stylizer.style import Shape
from stylizer.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="stylizer",
    help="Build map symbology and inspect raster bands and image tiles.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Stylizer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
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
            help="Console logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log to the console",
        ),
    ] = False,
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
    """Build map symbology and inspect raster bands and image tiles."""
    settings = StylizerSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=not verbose,
    )
    ctx.obj = settings


@app.command()
def shape(
    ctx: typer.Context,
    color: Annotated[
        str | None,
        typer.Option("--color", "-c", help="Fill color (#ff0000, red, 255,0,0)"),
    ] = None,
    size: Annotated[
        float | None,
        typer.Option("--size", "-s", help="Marker size in pixels", min=0.0),
    ] = None,
    shape_type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="circle|square|triangle|star|cross|x"),
    ] = None,
    opacity: Annotated[
        float | None,
        typer.Option("--opacity", help="Fill opacity (0-1)", min=0.0, max=1.0),
    ] = None,
    rotation: Annotated[
        float | None,
        typer.Option("--rotation", "-r", help="Rotation in degrees"),
    ] = None,
    rotation_property: Annotated[
        str | None,
        typer.Option("--rotation-property", help="Feature attribute holding the rotation"),
    ] = None,
    stroke_color: Annotated[
        str | None,
        typer.Option("--stroke-color", help="Outline color"),
    ] = None,
    stroke_width: Annotated[
        float | None,
        typer.Option("--stroke-width", help="Outline width", min=0.0),
    ] = None,
    dash: Annotated[
        str | None,
        typer.Option("--dash", help="Outline dash pattern (e.g. '5 2')"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write SLD to this file instead of stdout"),
    ] = None,
) -> None:
    """Build a point marker style and print it as SLD.

    Example:
        stylizer shape --color red --size 8 --type star --rotation 45
    """
    settings: StylizerSettings = ctx.obj or StylizerSettings()

    if rotation is not None and rotation_property is not None:
        print_error("Cannot use --rotation and --rotation-property together")
        raise typer.Exit(code=1)

    angle = Property(rotation_property) if rotation_property else rotation

    try:
        if color is not None:
            marker = Shape(
                color,
                size if size is not None else settings.shape.size,
                shape_type or settings.shape.type,
                opacity if opacity is not None else settings.shape.opacity,
                angle,
            )
        else:
            marker = Shape.from_options(
                size=size if size is not None else settings.shape.size,
                type=shape_type or settings.shape.type,
                opacity=opacity if opacity is not None else 0.0,
                rotation=angle,
            )

        if stroke_color is not None or stroke_width is not None or dash is not None:
            marker.with_stroke(
                stroke_color or settings.stroke.color,
                stroke_width if stroke_width is not None else settings.stroke.width,
                dash,
            )

        sld = marker.to_sld(settings.sld)
    except StylizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(sld)
        return

    output.write_text(sld, encoding="utf-8")
    print_success(f"{marker} written to {output}")


@app.command()
def bands(
    raster_file: Annotated[
        Path,
        typer.Argument(help="Path to a raster image (TIFF, PNG, ...)", show_default=False),
    ],
) -> None:
    """List the bands of a raster in channel order."""
    print_header(__version__)
    print_step("Reading raster")

    try:
        raster = RasterReader(raster_file).read()
    except StylizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_bands(raster)


@app.command()
def tile(
    image_file: Annotated[
        Path,
        typer.Argument(help="Path to an image file used as the tile payload", show_default=False),
    ],
    z: Annotated[int, typer.Option("--z", "-z", help="Zoom level")] = 0,
    x: Annotated[int, typer.Option("--x", "-x", help="Column")] = 0,
    y: Annotated[int, typer.Option("--y", "-y", help="Row")] = 0,
) -> None:
    """Load an image file as a tile payload and describe it."""
    if not image_file.is_file():
        print_error(
            f"Input file not found: {image_file}",
            details=f"The file '{image_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    print_header(__version__)
    print_step("Decoding tile")

    t = Tile(z, x, y, image_file.read_bytes())
    try:
        image = t.decoded_image()
    except StylizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    payload = t.base64_payload() or ""
    print_tile(t, image.size if image is not None else None, len(payload))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
