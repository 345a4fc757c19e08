"""Unit tests for the Pillow-backed conversion primitive."""

from io import BytesIO

import pytest
from PIL import Image

from webpconvert.core.conversion.converter import ImageConverter
from webpconvert.core.exceptions import ConversionFailedError
from webpconvert.models.conversion import ConversionSettings, OutputFormat


@pytest.fixture
def converter():
    return ImageConverter()


class TestImageConverter:
    @pytest.mark.parametrize(
        "output_format, pillow_format",
        [(OutputFormat.JPG, "JPEG"), (OutputFormat.PNG, "PNG"), ("png", "PNG")],
    )
    def test_convert_returns_encoded_bytes(
        self, converter, webp_file, output_format, pillow_format
    ):
        data = converter.convert(webp_file, output_format)

        with Image.open(BytesIO(data)) as result:
            assert result.format == pillow_format
            assert result.size == (16, 12)

    def test_instance_is_callable(self, converter, webp_file):
        assert converter(webp_file, OutputFormat.JPG)[:2] == b"\xff\xd8"

    def test_settings_are_passed_to_encoder(self, tmp_path):
        noisy = tmp_path / "noisy.webp"
        Image.effect_noise((64, 64), 80).convert("RGB").save(noisy, format="WEBP")

        low = ImageConverter(ConversionSettings(jpeg_quality=5)).convert(
            noisy, OutputFormat.JPG
        )
        high = ImageConverter(ConversionSettings(jpeg_quality=100)).convert(
            noisy, OutputFormat.JPG
        )

        assert len(low) < len(high)

    def test_missing_file_raises(self, converter, tmp_path):
        with pytest.raises(ConversionFailedError) as exc_info:
            converter.convert(tmp_path / "gone.webp", OutputFormat.JPG)

        assert exc_info.value.details["stage"] == "read"

    def test_corrupt_file_raises(self, converter, tmp_path):
        corrupt = tmp_path / "corrupt.webp"
        corrupt.write_bytes(b"RIFF\x00\x00\x00\x00WEBPgarbage")

        with pytest.raises(ConversionFailedError):
            converter.convert(corrupt, OutputFormat.PNG)

    def test_content_is_not_validated_against_extension(self, converter, tmp_path):
        # A PNG renamed to .webp still converts, only the extension is checked
        disguised = tmp_path / "disguised.webp"
        Image.new("RGB", (3, 3), "green").save(disguised, format="PNG")

        data = converter.convert(disguised, OutputFormat.JPG)

        assert data[:2] == b"\xff\xd8"

    def test_unknown_format_rejected(self, converter, webp_file):
        with pytest.raises(ValueError):
            converter.convert(webp_file, "gif")
