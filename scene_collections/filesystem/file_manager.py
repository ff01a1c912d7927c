"""Async file access for the scene collections directory.

Blocking file-system calls run in a worker thread so callers on the event
loop are suspended rather than blocked. There is no locking: callers await
each operation before issuing the next one against the same file.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None


def _ensure_directory(path: Path) -> bool:
    if path.exists() and not path.is_dir():
        msg = f"Scene collections path exists but is not a directory: {path}"
        raise NotADirectoryError(msg)
    if path.is_dir():
        return False
    path.mkdir(parents=True, exist_ok=True)
    return True


class FileManager:
    """Reads, writes and copies whole files. Errors other than a missing file propagate."""

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(path.exists)

    async def read(self, path: Path) -> str | None:
        """Return the file's text, or None if the file does not exist."""
        return await asyncio.to_thread(_read_text, path)

    async def write(self, path: Path, data: str) -> None:
        """Replace the file's contents with ``data``."""
        await asyncio.to_thread(path.write_text, data, encoding="utf-8")

    async def copy(self, source: Path, dest: Path) -> None:
        await asyncio.to_thread(shutil.copyfile, source, dest)

    async def ensure_directory(self, path: Path) -> None:
        """Create ``path`` (and parents) unless it already exists."""
        if await asyncio.to_thread(_ensure_directory, path):
            logger.info("Created scene collections directory at %s", path)
