"""
File and directory helpers.

All functions accept `str` or `Path`. Failures raise `OSError` (or a
subclass) except the two existence checks, which answer False.
"""

import os
import shutil
from pathlib import Path

PathLike = str | os.PathLike[str]


def file_exists(path: PathLike) -> bool:
    """True if `path` exists and is not a directory."""
    return Path(path).exists() and not Path(path).is_dir()


def folder_exists(path: PathLike) -> bool:
    """True if `path` exists and is a directory."""
    return Path(path).is_dir()


def file_copy(src: PathLike, dst: PathLike) -> None:
    """Copy the contents of `src` to `dst` and flush them to disk.

    Raises:
        OSError: If either file cannot be opened, or the copy fails
    """
    with open(src, "rb") as source, open(dst, "wb") as destination:
        shutil.copyfileobj(source, destination)
        destination.flush()
        os.fsync(destination.fileno())


def permission_change(path: PathLike, mode: int) -> None:
    """Change the permission bits of `path`, e.g. 0o644."""
    os.chmod(path, mode)


def dir_isEmpty(path: PathLike) -> bool:
    """Check whether a directory has no entries.

    Raises:
        OSError: If the directory cannot be opened
    """
    with os.scandir(path) as entries:
        return next(entries, None) is None


def file_write(path: PathLike, content: str) -> None:
    """Write `content` to `path`, creating it readable by the owner only (0600).

    An existing file is truncated and keeps its current permissions.
    """
    fd: int = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(content)
