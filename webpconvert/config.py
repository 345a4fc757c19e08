from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from webpconvert.core.constants import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_PNG_COMPRESS_LEVEL,
)


class Settings(BaseSettings):
    # Conversion
    default_format: str = Field(
        default=DEFAULT_OUTPUT_FORMAT,
        description="Output format used when --format is omitted",
    )
    jpeg_quality: int = Field(
        default=DEFAULT_JPEG_QUALITY, ge=1, le=100, description="JPEG quality (1-100)"
    )
    png_compress_level: int = Field(
        default=DEFAULT_PNG_COMPRESS_LEVEL,
        ge=0,
        le=9,
        description="PNG compression level (0-9)",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    json_logs: bool = Field(default=False, description="Render logs as JSON")

    # Terminal output
    theme: str = Field(default="dark", description="Console theme (dark, light, minimal)")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, v):
        allowed = ["dark", "light", "minimal"]
        if v.lower() not in allowed:
            raise ValueError(f"theme must be one of {allowed}")
        return v.lower()

    # Environment only, there is no configuration file
    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="WEBPCONVERT_",
    )


settings = Settings()
