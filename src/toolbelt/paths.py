"""URL and filesystem path helpers.

The well-known directory accessors (`library_path`, `documents_path`,
`cache_path`) mirror the application sandbox of a mobile platform: a
``Library`` directory, a ``Documents`` directory and ``Library/Caches``,
all rooted at ``settings.APP_HOME``. They are created on demand and are
expected to always be available, so failure raises
`PlatformDirectoryError` instead of returning None.
"""

from __future__ import annotations

import logging
import shutil
from enum import Enum
from pathlib import Path
from urllib.parse import urlsplit, urlunsplit
from urllib.request import url2pathname

from toolbelt.config import settings
from toolbelt.exceptions import PlatformDirectoryError

logger = logging.getLogger(__name__)


class SystemDirectory(Enum):
    """Well-known directories relative to the application home."""

    LIBRARY = "Library"
    DOCUMENTS = "Documents"
    CACHES = "Library/Caches"


def url_without_query(url: str) -> str | None:
    """Remove the query component of a URL.

    Args:
        url: URL string to strip.

    Returns:
        The URL without its query (other components unchanged), or None
        if the string cannot be decomposed into URL components.

    Example:
        >>> url_without_query("https://x/y?a=1")
        'https://x/y'
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return None
    return urlunsplit(parts._replace(query=""))


def free_space(path: str | Path) -> int | None:
    """Return the number of free bytes on the volume holding `path`.

    Args:
        path: Any path on the volume of interest, as a string or a
            ``file://`` URL.

    Returns:
        Free bytes, or None if the filesystem query fails.
    """
    local = _local_path(path)
    try:
        return shutil.disk_usage(local).free
    except OSError as e:
        logger.debug("Filesystem query failed for %s: %s", local, e)
        return None


def _local_path(path: str | Path) -> Path:
    if isinstance(path, str) and path.startswith("file://"):
        return Path(url2pathname(urlsplit(path).path))
    return Path(path)


def system_directory(directory: SystemDirectory, home: Path | None = None) -> Path:
    """Resolve a well-known directory, creating it if missing.

    Args:
        directory: Which directory to resolve.
        home: Application home. Defaults to ``settings.APP_HOME``.

    Returns:
        Absolute path to the existing directory.

    Raises:
        PlatformDirectoryError: If the directory cannot be created. This is
            unrecoverable; callers are not expected to handle it.
    """
    root = home if home is not None else settings.APP_HOME
    path = (Path(root).expanduser() / directory.value).resolve()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PlatformDirectoryError(
            f"Cannot provide {directory.name.lower()} directory: {e}", path
        ) from e
    return path


def library_path() -> Path:
    """Application library directory."""
    return system_directory(SystemDirectory.LIBRARY)


def documents_path() -> Path:
    """Application documents directory."""
    return system_directory(SystemDirectory.DOCUMENTS)


def cache_path() -> Path:
    """Application cache directory."""
    return system_directory(SystemDirectory.CACHES)
