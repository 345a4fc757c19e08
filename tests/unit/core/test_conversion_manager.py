"""Unit tests for single-file conversion."""

import pytest
from PIL import Image

from webpconvert.cli.ui.themes import create_console
from webpconvert.core.conversion.manager import ConversionManager
from webpconvert.core.exceptions import InputNotFoundError, UnsupportedInputError
from webpconvert.models.conversion import ConversionRequest, OutputFormat


@pytest.fixture
def consoles():
    """Consoles that record output for inspection."""
    return (
        create_console(record=True, width=200),
        create_console(record=True, width=200),
    )


def make_manager(converter, consoles):
    console, error_console = consoles
    return ConversionManager(
        converter=converter, console=console, error_console=error_console
    )


class TestConvertFile:
    def test_writes_into_converted_sibling_folder(self, webp_file, consoles):
        manager = ConversionManager(console=consoles[0], error_console=consoles[1])

        result = manager.convert_file(webp_file, OutputFormat.PNG)

        expected = webp_file.parent / "converted" / "photo.png"
        assert result.success is True
        assert result.error is None
        assert result.output_path == expected
        with Image.open(expected) as img:
            assert img.format == "PNG"

        output = consoles[0].export_text()
        assert "Converting: photo.webp" in output
        assert "Successfully converted: photo.webp -> photo.png" in output
        assert f"Saved to: {expected}" in output

    def test_base_name_is_preserved(self, tmp_path, make_webp, consoles):
        source = make_webp(tmp_path / "my.holiday photo.WEBP")
        manager = ConversionManager(console=consoles[0], error_console=consoles[1])

        result = manager.convert_file(source, OutputFormat.JPG)

        assert result.output_path.name == "my.holiday photo.jpg"
        assert result.output_path.exists()

    def test_existing_converted_folder_is_reused(self, webp_file, fake_converter, consoles):
        (webp_file.parent / "converted").mkdir()
        manager = make_manager(fake_converter(), consoles)

        result = manager.convert_file(webp_file, OutputFormat.JPG)

        assert result.success is True
        assert result.output_path.read_bytes() == b"converted-bytes"

    def test_missing_file(self, tmp_path, fake_converter, consoles):
        converter = fake_converter()
        manager = make_manager(converter, consoles)

        with pytest.raises(InputNotFoundError) as exc_info:
            manager.convert_file(tmp_path / "missing.webp", OutputFormat.JPG)

        assert "File not found" in exc_info.value.message
        assert converter.calls == []
        assert not (tmp_path / "converted").exists()

    def test_non_webp_extension(self, tmp_path, fake_converter, consoles):
        source = tmp_path / "picture.png"
        Image.new("RGB", (2, 2)).save(source, format="PNG")
        converter = fake_converter()
        manager = make_manager(converter, consoles)

        with pytest.raises(UnsupportedInputError) as exc_info:
            manager.convert_file(source, OutputFormat.JPG)

        assert exc_info.value.error_code == "WPC002"
        assert converter.calls == []
        assert not (tmp_path / "converted").exists()

    def test_collaborator_failure_is_reported(self, webp_file, fake_converter, consoles):
        manager = make_manager(fake_converter(fail_names=["photo.webp"]), consoles)

        result = manager.convert_file(webp_file, OutputFormat.JPG)

        assert result.success is False
        assert "simulated failure" in result.error
        assert not result.output_path.exists()
        assert "Error converting photo.webp" in consoles[1].export_text()


class TestConvert:
    def test_unexpected_exception_is_isolated(self, webp_file, consoles, tmp_path):
        def exploding(path, fmt):
            raise RuntimeError("library crashed")

        manager = make_manager(exploding, consoles)
        request = ConversionRequest(source_path=webp_file, target_format=OutputFormat.JPG)

        result = manager.convert(request, tmp_path / "out.jpg")

        assert result.success is False
        assert result.error == "library crashed"
