"""Directory traversal for manifest discovery."""

import os
from pathlib import Path
from typing import Iterator, List, Pattern, Set, Union

from deps_report.exceptions import InvalidDirectoryError
from deps_report.logging_config import logger

from .patterns import matches_any

HIDDEN_PREFIX = "."


def resolve_root(directory: Union[str, Path]) -> Path:
    """
    Canonicalize the directory to scan.

    Args:
        directory: Path given by the user

    Returns:
        Absolute path with symlinks resolved

    Raises:
        InvalidDirectoryError: If the path does not exist or is not a directory
    """
    try:
        root = Path(directory).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise InvalidDirectoryError(f"Failed to canonicalize directory: {directory} ({e})") from e

    if not root.is_dir():
        raise InvalidDirectoryError(f"Not a directory: {directory}")
    return root


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def walk_manifests(root: Path, filename: str, exclude_patterns: List[Pattern[str]]) -> Iterator[Path]:
    """
    Yield every file named ``filename`` below ``root``.

    Symbolic links are followed. Hidden directories are not descended
    into and hidden files are ignored. Exclusion patterns are tested
    against the full path of each file only; a directory matching an
    exclusion pattern is still traversed.

    Args:
        root: Canonical directory to walk
        filename: Exact manifest base name (e.g. "go.mod")
        exclude_patterns: Compiled exclusion patterns

    Yields:
        Paths of matching manifest files
    """
    visited: Set[str] = set()

    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        real = os.path.realpath(dirpath)
        if real in visited:
            logger.debug(f"Skipping already visited directory: {dirpath}")
            dirnames[:] = []
            continue
        visited.add(real)

        dirnames[:] = [name for name in dirnames if not is_hidden(name)]

        for name in filenames:
            if is_hidden(name) or name != filename:
                continue

            path = Path(dirpath) / name
            if matches_any(exclude_patterns, str(path)):
                logger.debug(f"Excluded by pattern: {path}")
                continue
            if not path.is_file():
                continue

            yield path
