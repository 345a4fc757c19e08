"""Base format handler interface."""

from typing import Any, BinaryIO, Dict

from PIL import Image

from webpconvert.core.constants import FLATTEN_BACKGROUND
from webpconvert.models.conversion import ConversionSettings


class BaseFormatHandler:
    """Base class for format handlers.

    Input handlers implement ``load_image``, output handlers implement
    ``save_image``.
    """

    def __init__(self) -> None:
        """Initialize format handler."""
        self.supported_formats: list[str] = []
        self.format_name: str = ""

    def can_handle(self, format_name: str) -> bool:
        """Check if this handler can process the given format."""
        return format_name.lower() in self.supported_formats

    def load_image(self, image_data: bytes) -> Image.Image:
        """Load image from bytes."""
        raise NotImplementedError(f"{self.format_name} cannot be used as input")

    def save_image(
        self, image: Image.Image, output_buffer: BinaryIO, settings: ConversionSettings
    ) -> None:
        """Save image to buffer with given settings."""
        raise NotImplementedError(f"{self.format_name} cannot be used as output")

    def get_save_params(self, settings: ConversionSettings) -> Dict[str, Any]:
        """Get format-specific encoder parameters."""
        return {}

    def prepare_image(self, image: Image.Image) -> Image.Image:
        """Prepare image for encoding (e.g., convert color mode if needed)."""
        if self._has_alpha(image) and not self._supports_transparency():
            return self._flatten(image)

        if not self._supports_mode(image.mode):
            if self._has_alpha(image):
                return image.convert("RGBA")
            return image.convert("RGB")

        return image

    @staticmethod
    def _has_alpha(image: Image.Image) -> bool:
        return image.mode in ("RGBA", "LA", "PA") or (
            image.mode == "P" and "transparency" in image.info
        )

    @staticmethod
    def _flatten(image: Image.Image) -> Image.Image:
        """Composite an image with transparency onto an opaque background."""
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        background = Image.new("RGB", image.size, FLATTEN_BACKGROUND)
        background.paste(image, mask=image.split()[3])
        return background

    def _supports_transparency(self) -> bool:
        """Check if format supports transparency."""
        # Override in subclasses
        return False

    def _supports_mode(self, mode: str) -> bool:
        """Check if format supports the given color mode."""
        # Override in subclasses
        return mode == "RGB"
