"""Archive path validation."""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from .errors import ValidationError
from .models import ArchivePath

ARCHIVE_EXTENSION = "ipa"


def resolve_path(raw_path: str, cwd: Path) -> Path:
    """Resolve raw_path against cwd and collapse `.`/`..` segments.

    The path does not need to exist for this step.
    """
    if not raw_path or "\x00" in raw_path:
        raise ValidationError(f"Invalid path: {raw_path!r}")
    return Path(os.path.normpath(os.path.join(cwd, raw_path)))


def path_extension(path: Path) -> Optional[str]:
    """Substring after the final '.' of the last component, None if there is no '.'."""
    stem, dot, extension = path.name.rpartition(".")
    if not dot:
        return None
    return extension


def validate_archive_path(raw_path: str, cwd: Optional[Path] = None) -> ArchivePath:
    """Validate a user supplied path and return it as an ArchivePath.

    Args:
        raw_path: Absolute path, or a path relative to cwd
        cwd: Base directory for relative paths, defaults to the process cwd

    Returns:
        The validated ArchivePath

    Raises:
        ValidationError: If the path is malformed, is not an IPA file or does not exist
    """
    resolved = resolve_path(raw_path, cwd or Path.cwd())
    logger.debug(f"Resolved {raw_path!r} to {resolved}")

    if path_extension(resolved) != ARCHIVE_EXTENSION:
        raise ValidationError("The provided path is not an IPA file.")

    try:
        is_file = resolved.is_file()
    except OSError as e:
        raise ValidationError(f"Invalid path: {e.strerror}") from e

    if not is_file:
        raise ValidationError(f"No file found at {resolved}.")

    return ArchivePath(resolved)
