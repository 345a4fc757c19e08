"""Pillow-backed image conversion primitive."""

from io import BytesIO
from pathlib import Path
from typing import Dict, Optional, Union

import structlog

from webpconvert.core.conversion.formats.base import BaseFormatHandler
from webpconvert.core.conversion.formats.jpeg_handler import JPEGHandler
from webpconvert.core.conversion.formats.png_handler import PNGHandler
from webpconvert.core.conversion.formats.webp_handler import WebPHandler
from webpconvert.core.exceptions import ConversionFailedError
from webpconvert.models.conversion import ConversionSettings, OutputFormat

logger = structlog.get_logger()


class ImageConverter:
    """Decodes a WebP file and re-encodes it as JPG or PNG.

    Instances are callable so they can be handed to the managers wherever
    a ``(path, format) -> bytes`` function is expected.
    """

    def __init__(self, settings: Optional[ConversionSettings] = None) -> None:
        self.settings = settings or ConversionSettings()
        self.input_handler: BaseFormatHandler = WebPHandler()
        self.output_handlers: Dict[OutputFormat, BaseFormatHandler] = {
            OutputFormat.JPG: JPEGHandler(),
            OutputFormat.PNG: PNGHandler(),
        }

    def get_handler(self, output_format: OutputFormat) -> BaseFormatHandler:
        handler = self.output_handlers.get(OutputFormat(output_format))
        if handler is None:
            raise ConversionFailedError(
                f"No encoder registered for {output_format}",
                details={"output_format": str(output_format)},
            )
        return handler

    def convert(
        self, input_path: Union[str, Path], output_format: OutputFormat
    ) -> bytes:
        """Convert the image at ``input_path`` and return the encoded bytes.

        Raises:
            ConversionFailedError: if the file cannot be read, decoded or encoded.
        """
        input_path = Path(input_path)
        output_format = OutputFormat(output_format)

        try:
            image_data = input_path.read_bytes()
        except OSError as e:
            raise ConversionFailedError(
                f"Failed to read {input_path.name}: {e.strerror or e}",
                details={"file_name": input_path.name, "stage": "read"},
            ) from e

        image = self.input_handler.load_image(image_data)
        try:
            buffer = BytesIO()
            self.get_handler(output_format).save_image(image, buffer, self.settings)
        finally:
            image.close()

        output = buffer.getvalue()
        logger.debug(
            "Image converted",
            file_name=input_path.name,
            output_format=output_format.value,
            input_bytes=len(image_data),
            output_bytes=len(output),
        )
        return output

    __call__ = convert
