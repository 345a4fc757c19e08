"""PNG format handler."""

from typing import Any, BinaryIO, Dict

import structlog
from PIL import Image

from webpconvert.core.conversion.formats.base import BaseFormatHandler
from webpconvert.core.exceptions import ConversionFailedError
from webpconvert.models.conversion import ConversionSettings

logger = structlog.get_logger()


class PNGHandler(BaseFormatHandler):
    """Encoder for PNG output."""

    def __init__(self) -> None:
        """Initialize PNG handler."""
        super().__init__()
        self.supported_formats = ["png"]
        self.format_name = "PNG"

    def save_image(
        self, image: Image.Image, output_buffer: BinaryIO, settings: ConversionSettings
    ) -> None:
        """Save image as PNG."""
        try:
            image = self.prepare_image(image)
            logger.debug("Encoding image", format=self.format_name, mode=image.mode)
            image.save(output_buffer, format="PNG", **self.get_save_params(settings))
            output_buffer.seek(0)

        except Exception as e:
            raise ConversionFailedError(
                f"Failed to save image as PNG: {str(e)}",
                details={"output_format": "png", "stage": "encode"},
            ) from e

    def get_save_params(self, settings: ConversionSettings) -> Dict[str, Any]:
        """PNG is lossless, only the zlib level is tunable."""
        return {"compress_level": settings.png_compress_level}

    def _supports_transparency(self) -> bool:
        """PNG supports transparency."""
        return True

    def _supports_mode(self, mode: str) -> bool:
        """Check if PNG supports the given color mode."""
        return mode in ("RGB", "RGBA", "L", "LA", "P", "1")
