"""Data models for directory conversion runs."""

from pathlib import Path
from typing import List

from pydantic import BaseModel, Field

from webpconvert.models.conversion import ConversionResult


class RunSummary(BaseModel):
    """Aggregated outcome of a directory-mode run."""

    output_folder: Path
    processed_count: int = Field(default=0, ge=0)
    error_count: int = Field(default=0, ge=0)
    results: List[ConversionResult] = Field(default_factory=list)

    @property
    def total_files(self) -> int:
        return self.processed_count + self.error_count

    def record(self, result: ConversionResult) -> None:
        """Count a finished conversion."""
        self.results.append(result)
        if result.success:
            self.processed_count += 1
        else:
            self.error_count += 1
