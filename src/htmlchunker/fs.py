"""Asynchronous filesystem helpers.

The blocking ``os``/``shutil`` calls run in a background thread so the
helpers can be awaited together, e.g. with ``asyncio.gather``.
"""

import asyncio
import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


async def mkdirs(path: Path | str) -> Path:
    """Create a directory and its parents, like ``mkdir -p``.

    Returns:
        The created path, for chaining.
    """
    path = Path(path)
    await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
    logger.debug(f"Created directory: {path}")
    return path


def _mtime(path: Path) -> float | None:
    try:
        return path.stat().st_mtime
    except FileNotFoundError:
        return None


async def source_is_newer_than(source: Path | str, target: Path | str) -> bool:
    """Check whether ``target`` needs rebuilding from ``source``.

    Returns:
        True if the target does not exist or the source was modified
        after it.

    Raises:
        FileNotFoundError: If the source does not exist.
    """
    source_time, target_time = await asyncio.gather(
        asyncio.to_thread(lambda: Path(source).stat().st_mtime),
        asyncio.to_thread(_mtime, Path(target)),
    )
    return target_time is None or source_time > target_time


async def exists(path: Path | str) -> bool:
    """Check whether a file or directory exists.

    Returns False when the path cannot be accessed.
    """
    return await asyncio.to_thread(os.access, path, os.F_OK)


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink(missing_ok=True)


async def rm(path: Path | str) -> Path:
    """Remove a path recursively, like ``rm -rf``.

    A missing path is not an error.

    Returns:
        The removed path.
    """
    path = Path(path)
    await asyncio.to_thread(_remove, path)
    logger.debug(f"Removed: {path}")
    return path
