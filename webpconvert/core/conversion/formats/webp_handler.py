"""WebP format handler."""

from io import BytesIO

import structlog
from PIL import Image

from webpconvert.core.conversion.formats.base import BaseFormatHandler
from webpconvert.core.exceptions import ConversionFailedError

logger = structlog.get_logger()


class WebPHandler(BaseFormatHandler):
    """Decoder for WebP input files."""

    def __init__(self) -> None:
        """Initialize WebP handler."""
        super().__init__()
        self.supported_formats = ["webp"]
        self.format_name = "WEBP"

    def load_image(self, image_data: bytes) -> Image.Image:
        """Load WebP image from bytes."""
        try:
            with BytesIO(image_data) as buffer:
                img = Image.open(buffer)
                # Force decoding while the buffer is still open
                img.load()
                # Animated WebP: only the first frame is converted
                if getattr(img, "is_animated", False):
                    logger.debug("Animated WebP, using first frame", frames=img.n_frames)
                    img.seek(0)
                    img = img.copy()
                return img

        except Exception as e:
            raise ConversionFailedError(
                f"Failed to load WebP image: {str(e)}", details={"stage": "decode"}
            ) from e
