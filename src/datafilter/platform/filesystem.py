"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    parent = path.parent
    return ensure_directory(parent)


def nearest_existing_ancestor(path: Path) -> Path:
    """Return ``path`` itself or the closest parent that exists on disk."""

    for candidate in (path, *path.parents):
        if candidate.exists():
            return candidate
    return Path(path.anchor or os.curdir)


def check_directory_creatable(directory: Path) -> None:
    """Verify that ``directory`` exists or could be created, without creating it.

    Raises:
        NotADirectoryError: If the directory or one of its existing ancestors is a file.
        PermissionError: If the closest existing ancestor is not writable.
    """

    ancestor = nearest_existing_ancestor(directory)
    if not ancestor.is_dir():
        raise NotADirectoryError(f"Path exists but is not a directory: {ancestor}")
    if not os.access(ancestor, os.W_OK | os.X_OK):
        raise PermissionError(f"Directory is not writable: {ancestor}")


def check_file_creatable(path: Path) -> None:
    """Verify that the file ``path`` could be created, without creating it.

    Raises:
        IsADirectoryError: If ``path`` exists as a directory.
        NotADirectoryError: If an existing ancestor of ``path`` is a file.
        PermissionError: If the closest existing ancestor is not writable.
    """

    if path.is_dir():
        raise IsADirectoryError(f"Path exists but is a directory: {path}")
    if path.exists():
        return
    check_directory_creatable(path.parent)


__all__ = [
    "check_directory_creatable",
    "check_file_creatable",
    "ensure_directory",
    "ensure_parent_directory",
    "nearest_existing_ancestor",
]
