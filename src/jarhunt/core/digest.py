"""Content digests for candidate files."""

from __future__ import annotations

import hashlib
import logging
from typing import TYPE_CHECKING

from jarhunt.core.exceptions import ReadFailure
from jarhunt.core.models import DigestResult


if TYPE_CHECKING:
    from jarhunt.core.models import WorkItem
    from jarhunt.core.ports import FilesystemPort


logger = logging.getLogger(__name__)

# Maven Central indexes artifacts by SHA-1
HASH_ALGORITHM = "sha1"


def compute_digest(data: bytes) -> str:
    """Return the lowercase hex digest of data.

    Example:
        >>> compute_digest(b"")
        'da39a3ee5e6b4b0d3255bfef95601890afd80709'
    """
    return hashlib.new(HASH_ALGORITHM, data).hexdigest()


class Digester:
    """Reads whole files through a FilesystemPort and digests them."""

    def __init__(self, filesystem: FilesystemPort) -> None:
        self._filesystem = filesystem

    async def digest(self, item: WorkItem) -> DigestResult:
        """Read a work item's file and compute its digest.

        Args:
            item: The candidate file to digest.

        Returns:
            DigestResult for the file.

        Raises:
            ReadFailure: If the file could not be read.
        """
        try:
            data = await self._filesystem.read_file(item.file_path)
        except OSError as e:
            raise ReadFailure(item.file_path, cause=e) from e

        sha1 = compute_digest(data)
        logger.debug("Digested %s (%d bytes): %s", item.file_path, len(data), sha1)
        return DigestResult(file_path=item.file_path, sha1=sha1)
