"""Conversion manager for single-file conversions."""

from pathlib import Path
from typing import Callable, Optional, Union

from rich.console import Console
from rich.markup import escape

from webpconvert.cli.ui.themes import create_console
from webpconvert.core.constants import CONVERTED_FOLDER_NAME
from webpconvert.core.conversion.converter import ImageConverter
from webpconvert.core.exceptions import InputNotFoundError, UnsupportedInputError
from webpconvert.models.conversion import (
    ConversionRequest,
    ConversionResult,
    OutputFormat,
)
from webpconvert.utils.files import is_webp_file
from webpconvert.utils.logging import get_logger

logger = get_logger(__name__)

# (source path, target format) -> encoded image bytes
ConvertFunc = Callable[[Path, OutputFormat], bytes]


class ConversionManager:
    """Runs conversions through an image conversion primitive and writes the output."""

    def __init__(
        self,
        converter: Optional[ConvertFunc] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
    ) -> None:
        self.converter = converter or ImageConverter()
        self.console = console or create_console()
        self.error_console = error_console or create_console(stderr=True)

    def convert(
        self, request: ConversionRequest, output_path: Path, show_saved_path: bool = False
    ) -> ConversionResult:
        """Convert one file, reporting progress and isolating its failure.

        The output folder must already exist.
        """
        source_name = request.source_path.name
        self.console.print(f"Converting: {escape(source_name)}")

        try:
            output_data = self.converter(request.source_path, request.target_format)
            output_path.write_bytes(output_data)
        except Exception as e:
            # One bad file is reported and counted, never fatal for the caller
            logger.warning("Conversion failed", file_name=source_name, error=str(e))
            self.error_console.print(
                f"Error converting {escape(source_name)}: {escape(str(e))}",
                style="error",
            )
            return ConversionResult(
                source_path=request.source_path,
                output_path=output_path,
                success=False,
                error=str(e),
            )

        self.console.print(
            f"Successfully converted: {escape(source_name)} -> {escape(output_path.name)}",
            style="success",
        )
        if show_saved_path:
            self.console.print(f"Saved to: {escape(str(output_path))}")
        logger.debug("Conversion succeeded", file_name=source_name)

        return ConversionResult(
            source_path=request.source_path, output_path=output_path, success=True
        )

    def validate_input_file(self, input_path: Path) -> None:
        """Check single-file preconditions.

        Raises:
            InputNotFoundError: the file does not exist.
            UnsupportedInputError: the extension is not ``.webp``.
        """
        if not input_path.exists():
            raise InputNotFoundError(
                f"File not found: {input_path}", details={"path": str(input_path)}
            )
        if not is_webp_file(input_path):
            raise UnsupportedInputError(
                f"File is not a WebP image: {input_path}",
                details={"path": str(input_path), "extension": input_path.suffix},
            )

    def convert_file(
        self, input_path: Union[str, Path], output_format: OutputFormat
    ) -> ConversionResult:
        """Convert a single WebP file into a ``converted`` folder beside it."""
        input_path = Path(input_path)
        self.validate_input_file(input_path)

        request = ConversionRequest(source_path=input_path, target_format=output_format)
        output_folder = input_path.parent / CONVERTED_FOLDER_NAME
        output_folder.mkdir(parents=True, exist_ok=True)

        return self.convert(
            request, output_folder / request.output_name, show_saved_path=True
        )
