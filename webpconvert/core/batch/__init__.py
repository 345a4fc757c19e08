"""Directory-mode batch conversion."""

from webpconvert.core.batch.manager import BatchManager, make_output_folder_name
from webpconvert.core.batch.models import RunSummary

__all__ = ["BatchManager", "RunSummary", "make_output_folder_name"]
