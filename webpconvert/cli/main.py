"""
Main CLI Application
Typer entry point resolving arguments into single-file or directory mode
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape

from webpconvert import __version__
from webpconvert.cli.ui.themes import create_console
from webpconvert.cli.utils.validation import normalize_format
from webpconvert.config import settings
from webpconvert.core.batch.manager import BatchManager
from webpconvert.core.conversion.converter import ImageConverter
from webpconvert.core.conversion.manager import ConversionManager
from webpconvert.core.exceptions import InputNotFoundError, UnsupportedInputError
from webpconvert.models.conversion import ConversionSettings
from webpconvert.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

EXAMPLES = (
    "[bold]Examples:[/bold]\n\n"
    "  webpconvert image.webp                 # Convert single file to jpg\n\n"
    "  webpconvert image.webp -f png          # Convert single file to png\n\n"
    "  webpconvert -i ./images                # Convert all WebP files in directory\n\n"
    "  webpconvert -i ./images -f png         # Convert all WebP files to png"
)

app = typer.Typer(
    name="webpconvert",
    help="WebP Converter - Convert WebP images to JPG or PNG",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool):
    if value:
        typer.echo(f"webpconvert {__version__}")
        raise typer.Exit()


@app.command(epilog=EXAMPLES)
def main(
    file: Annotated[
        Optional[Path],
        typer.Argument(
            help="Single WebP file to convert (takes precedence over --input)",
            show_default=False,
        ),
    ] = None,
    input_dir: Annotated[
        Optional[Path],
        typer.Option(
            "-i",
            "--input",
            help="Input directory (default: current directory)",
            show_default=False,
        ),
    ] = None,
    format: Annotated[
        str,
        typer.Option(
            "-f",
            "--format",
            help="Output format: jpg or png. Shorthand: j for jpg, p for png",
        ),
    ] = settings.default_format,
    verbose: Annotated[
        bool, typer.Option("-v", "--verbose", help="Enable debug logging")
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
):
    """
    Convert WebP images to JPG or PNG.

    Give a single FILE to convert it into a [bold]converted[/bold] folder next
    to it, or scan a directory and write every result into a timestamped
    [bold]output_*[/bold] folder inside it.
    """
    setup_logging(
        log_level="DEBUG" if verbose else settings.log_level,
        json_logs=settings.json_logs,
    )
    output_format = normalize_format(format)

    console = create_console(settings.theme)
    error_console = create_console(settings.theme, stderr=True)
    converter = ImageConverter(
        ConversionSettings(
            jpeg_quality=settings.jpeg_quality,
            png_compress_level=settings.png_compress_level,
        )
    )
    conversion_manager = ConversionManager(
        converter=converter, console=console, error_console=error_console
    )

    if file is not None:
        try:
            result = conversion_manager.convert_file(file, output_format)
        except (InputNotFoundError, UnsupportedInputError) as e:
            error_console.print(f"Error: {escape(e.message)}", style="error")
            raise typer.Exit(1)
        except OSError as e:
            logger.error("Could not create output folder", error=str(e))
            error_console.print(f"Error: {escape(str(e))}", style="error")
            raise typer.Exit(1)
        raise typer.Exit(0 if result.success else 1)

    input_folder = input_dir if input_dir is not None else Path.cwd()
    batch_manager = BatchManager(conversion_manager)
    try:
        batch_manager.process_directory(input_folder, output_format)
    except InputNotFoundError as e:
        error_console.print(f"Error: {escape(e.message)}", style="error")
        raise typer.Exit(1)
    except OSError as e:
        logger.error("Could not create output folder", error=str(e))
        error_console.print(f"Error: {escape(str(e))}", style="error")
        raise typer.Exit(1)

    # Per-file failures never change the exit code in directory mode
    raise typer.Exit(0)


def run() -> None:
    """Console script entry point"""
    app(prog_name="webpconvert")
