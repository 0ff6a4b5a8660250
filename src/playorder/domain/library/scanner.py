"""
File discovery for playback.

Walks a directory tree and collects every file whose extension is one of
the supported audio formats.
"""

import os
from pathlib import Path

from loguru import logger

from .exceptions import DiscoveryError, NoTracksFoundError


def is_supported_format(local_path: Path, supported_formats: list[str]) -> bool:
    """Check if file format is supported (case-insensitive)."""
    return local_path.suffix.lower() in supported_formats


def resolve_root(directory: str) -> Path:
    """Resolve the root directory to an absolute path.

    Raises:
        DiscoveryError: If the path is empty, missing, or not a directory
    """
    if not directory:
        raise DiscoveryError("No directory given")

    try:
        root = Path(directory).expanduser().resolve()
    except (OSError, RuntimeError) as e:
        raise DiscoveryError(f"Cannot resolve directory {directory}: {e}") from e

    if not root.exists():
        raise DiscoveryError(f"Directory does not exist: {root}")
    if not root.is_dir():
        raise DiscoveryError(f"Not a directory: {root}")
    return root


def _raise_walk_error(error: OSError) -> None:
    raise DiscoveryError(f"Error walking the directory: {error}") from error


def discover_tracks(
    directory: Path, supported_formats: list[str], recursive: bool = True
) -> list[str]:
    """Collect playable files under a directory.

    Directories and files are visited in lexical order so a given tree always
    yields the same list, but callers must not rely on this across runs:
    files can be added, removed or renamed between them.

    Args:
        directory: Root directory to scan
        supported_formats: Lower-case extensions including the dot (".mp3")
        recursive: Descend into subdirectories

    Returns:
        Absolute file paths as strings

    Raises:
        DiscoveryError: If the walk fails (permission denied, vanished directory)
        NoTracksFoundError: If no file qualifies
    """
    root = Path(directory).absolute()
    formats = [ext.lower() for ext in supported_formats]
    files: list[str] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
        if recursive:
            dirnames.sort()
        else:
            dirnames.clear()

        for filename in sorted(filenames):
            local_path = Path(dirpath) / filename
            if is_supported_format(local_path, formats):
                files.append(str(local_path))

    if not files:
        raise NoTracksFoundError(str(root), formats)

    logger.debug(f"Discovered {len(files)} files under {root}")
    return files
