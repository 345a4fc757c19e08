"""Directory-mode conversion of every WebP file in a folder."""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from rich.markup import escape

from webpconvert.core.constants import (
    OUTPUT_FOLDER_PREFIX,
    TIMESTAMP_REPLACEMENT,
    TIMESTAMP_UNSAFE_CHARS,
)
from webpconvert.core.batch.models import RunSummary
from webpconvert.core.conversion.manager import ConversionManager
from webpconvert.core.exceptions import InputNotFoundError
from webpconvert.models.conversion import ConversionRequest, OutputFormat
from webpconvert.utils.files import find_webp_files
from webpconvert.utils.logging import LoggingContext, get_logger

logger = get_logger(__name__)


def make_output_folder_name(now: Optional[datetime] = None) -> str:
    """Build a filesystem-safe folder name from a UTC timestamp.

    ``2026-10-16T08:30:12.345Z`` becomes ``output_2026_10_16T08_30_12_345Z``.
    """
    now = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    timestamp = now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"
    for char in TIMESTAMP_UNSAFE_CHARS:
        timestamp = timestamp.replace(char, TIMESTAMP_REPLACEMENT)
    return f"{OUTPUT_FOLDER_PREFIX}{timestamp}"


def create_output_folder(input_folder: Path, now: Optional[datetime] = None) -> Path:
    """Create a fresh timestamped output folder inside ``input_folder``.

    Runs landing on the same millisecond get a numeric suffix instead of
    sharing a folder.
    """
    base_name = make_output_folder_name(now)
    candidate = input_folder / base_name
    suffix = 0
    while True:
        try:
            candidate.mkdir(parents=True)
            return candidate
        except FileExistsError:
            suffix += 1
            candidate = input_folder / f"{base_name}_{suffix}"


class BatchManager:
    """Converts all WebP files of one directory, one after another."""

    def __init__(self, conversion_manager: Optional[ConversionManager] = None) -> None:
        self.conversion_manager = conversion_manager or ConversionManager()

    @property
    def console(self):
        return self.conversion_manager.console

    @property
    def error_console(self):
        return self.conversion_manager.error_console

    def process_directory(
        self,
        input_folder: Union[str, Path],
        output_format: OutputFormat,
        now: Optional[datetime] = None,
    ) -> RunSummary:
        """Convert every ``.webp`` entry of ``input_folder``.

        Per-file failures are counted in the returned summary and never stop
        the run.

        Raises:
            InputNotFoundError: ``input_folder`` is not an existing directory.
        """
        input_folder = Path(input_folder)
        if not input_folder.is_dir():
            raise InputNotFoundError(
                f"Directory not found: {input_folder}",
                details={"path": str(input_folder), "expected": "directory"},
            )

        output_format = OutputFormat(output_format)
        output_folder = create_output_folder(input_folder, now)
        summary = RunSummary(output_folder=output_folder)

        self.console.print(f"Input folder: {escape(str(input_folder))}")
        self.console.print(f"Output folder: {escape(str(output_folder))}")
        self.console.print(f"Output format: {output_format.value}")

        try:
            webp_files = find_webp_files(input_folder)
        except OSError as e:
            logger.error("Could not list input folder", error=str(e))
            self.error_console.print(
                f"Error reading input folder: {escape(str(e))}", style="error"
            )
            return summary

        self.console.print(f"Found {len(webp_files)} WebP files to convert.")
        if not webp_files:
            self.console.print("No WebP files found to process.", style="warning")
            return summary

        with LoggingContext(output_format=output_format.value):
            for webp_file in webp_files:
                request = ConversionRequest(
                    source_path=webp_file, target_format=output_format
                )
                result = self.conversion_manager.convert(
                    request, output_folder / request.output_name
                )
                summary.record(result)

        logger.info(
            "Directory conversion finished",
            processed=summary.processed_count,
            errors=summary.error_count,
        )
        self.console.print(
            f"\nConversion complete. {summary.processed_count} files converted, "
            f"{summary.error_count} errors.",
            style="highlight",
        )
        return summary
