"""Data models for image conversion."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from webpconvert.core.constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_PNG_COMPRESS_LEVEL,
)


class OutputFormat(str, Enum):
    """Supported output image formats."""

    JPG = "jpg"
    PNG = "png"


class ConversionSettings(BaseModel):
    """Encoder settings for image conversion."""

    jpeg_quality: int = Field(
        default=DEFAULT_JPEG_QUALITY, ge=1, le=100, description="JPEG quality (1-100)"
    )
    png_compress_level: int = Field(
        default=DEFAULT_PNG_COMPRESS_LEVEL,
        ge=0,
        le=9,
        description="PNG zlib compression level (0-9)",
    )


class ConversionRequest(BaseModel):
    """A single file queued for conversion."""

    model_config = ConfigDict(frozen=True)

    source_path: Path = Field(..., description="WebP file to convert")
    target_format: OutputFormat = Field(..., description="Requested output format")

    @property
    def output_name(self) -> str:
        """Output file name: the source base name with the target extension."""
        return f"{self.source_path.stem}.{self.target_format.value}"


class ConversionResult(BaseModel):
    """Outcome of converting one file."""

    source_path: Path
    output_path: Path
    success: bool
    error: Optional[str] = Field(None, description="Error message if failed")
