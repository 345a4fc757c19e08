"""JPEG format handler."""

from typing import Any, BinaryIO, Dict

import structlog
from PIL import Image

from webpconvert.core.conversion.formats.base import BaseFormatHandler
from webpconvert.core.exceptions import ConversionFailedError
from webpconvert.models.conversion import ConversionSettings

logger = structlog.get_logger()


class JPEGHandler(BaseFormatHandler):
    """Encoder for JPEG output."""

    def __init__(self) -> None:
        """Initialize JPEG handler."""
        super().__init__()
        self.supported_formats = ["jpeg", "jpg"]
        self.format_name = "JPEG"

    def save_image(
        self, image: Image.Image, output_buffer: BinaryIO, settings: ConversionSettings
    ) -> None:
        """Save image as JPEG."""
        try:
            # JPEG has no alpha channel, transparent areas become white
            image = self.prepare_image(image)
            logger.debug("Encoding image", format=self.format_name, mode=image.mode)
            image.save(output_buffer, format="JPEG", **self.get_save_params(settings))
            output_buffer.seek(0)

        except Exception as e:
            raise ConversionFailedError(
                f"Failed to save image as JPEG: {str(e)}",
                details={"output_format": "jpg", "stage": "encode"},
            ) from e

    def get_save_params(self, settings: ConversionSettings) -> Dict[str, Any]:
        """Get JPEG-specific quality parameters."""
        return {
            "quality": settings.jpeg_quality,
            # 4:4:4 chroma for high quality output
            "subsampling": 0 if settings.jpeg_quality > 90 else 2,
        }

    def _supports_transparency(self) -> bool:
        """JPEG doesn't support transparency."""
        return False

    def _supports_mode(self, mode: str) -> bool:
        """Check if JPEG supports the given color mode."""
        return mode in ("RGB", "L", "CMYK")
