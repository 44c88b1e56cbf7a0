"""Local filesystem adapter implementing FilesystemPort."""

from __future__ import annotations

import asyncio
import os
import stat as stat_module
from pathlib import Path

from jarhunt.core.models import EntryStat


class LocalFilesystem:
    """Filesystem adapter backed by the local disk.

    Blocking calls run in worker threads so the event loop keeps
    traversing and looking up while the disk is busy.
    """

    async def list_directory(self, path: str) -> list[str]:
        """List entry names in the order the OS returns them.

        Args:
            path: Directory to list. Empty string lists the current directory.

        Raises:
            OSError: If the directory cannot be listed.
        """
        return await asyncio.to_thread(os.listdir, path or ".")

    async def stat(self, path: str) -> EntryStat:
        """Query an entry's status, following symlinks.

        Raises:
            OSError: If the entry cannot be queried (e.g. a dangling symlink).
        """
        result = await asyncio.to_thread(os.stat, path)
        return EntryStat(is_directory=stat_module.S_ISDIR(result.st_mode))

    async def read_file(self, path: str) -> bytes:
        """Read a whole file into memory.

        Raises:
            OSError: If the file cannot be opened or read.
        """
        return await asyncio.to_thread(Path(path).read_bytes)
