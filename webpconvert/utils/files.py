"""Filesystem helpers for locating WebP inputs."""

from pathlib import Path
from typing import List, Union

from webpconvert.core.constants import INPUT_EXTENSION


def is_webp_file(path: Union[str, Path]) -> bool:
    """Check the extension only; image content is never inspected."""
    return Path(path).suffix.lower() == INPUT_EXTENSION


def find_webp_files(directory: Path) -> List[Path]:
    """List WebP entries of ``directory`` (non-recursive).

    Entries keep the order the filesystem returns them in.
    """
    return [entry for entry in directory.iterdir() if is_webp_file(entry.name)]
