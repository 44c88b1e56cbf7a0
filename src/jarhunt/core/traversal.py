"""Directory traversal and candidate filtering.

These functions and the Traverser contain no direct I/O; listing and
status queries go through a FilesystemPort.
"""

from __future__ import annotations

import logging
from fnmatch import fnmatchcase
from typing import TYPE_CHECKING

from jarhunt.core.models import HuntSummary, TraversalTask, WorkItem
from jarhunt.core.ports import NullReporter


if TYPE_CHECKING:
    from jarhunt.core.ports import FilesystemPort, HuntReporter
    from jarhunt.core.throttle import WorkThrottler


logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "*.jar"


def qualify(directory: str | None, name: str) -> str:
    """Join a directory and an entry name.

    Args:
        directory: Parent directory. Empty or None means the current directory.
        name: Entry name as returned by a directory listing.

    Returns:
        The qualified entry path.

    Examples:
        >>> qualify("libs", "a.jar")
        'libs/a.jar'
        >>> qualify("", "a.jar")
        'a.jar'
        >>> qualify("/", "a.jar")
        '/a.jar'
    """
    if not directory:
        return name
    if directory.endswith("/"):
        return f"{directory}{name}"
    return f"{directory}/{name}"


def is_candidate(name: str, pattern: str = DEFAULT_PATTERN) -> bool:
    """Check whether an entry name matches the archive pattern.

    Matching is case-sensitive on every platform, so ``A.JAR`` is not a
    candidate for the default pattern.
    """
    return fnmatchcase(name, pattern)


class Traverser:
    """Walks a directory tree and feeds candidate files to a throttler."""

    def __init__(
        self,
        filesystem: FilesystemPort,
        throttler: WorkThrottler,
        *,
        recursive: bool = False,
        pattern: str = DEFAULT_PATTERN,
        reporter: HuntReporter | None = None,
        summary: HuntSummary | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._throttler = throttler
        self._recursive = recursive
        self._pattern = pattern
        self._reporter = reporter or NullReporter()
        self.summary = summary if summary is not None else HuntSummary()

    async def traverse(self, task: TraversalTask) -> None:
        """List one directory and dispatch each of its entries.

        Entries are handled in listing order. Subdirectories are walked
        depth-first when recursion is enabled. Failures to list the
        directory or to stat a single entry are reported and skipped;
        they never abort the walk.
        """
        directory = task.path
        try:
            names = await self._filesystem.list_directory(directory)
        except OSError as e:
            logger.info("Cannot list %s: %s", directory or ".", e)
            self.summary.unlisted_directories += 1
            self._reporter.no_files(directory)
            return

        for name in names:
            path = qualify(directory, name)
            try:
                stat = await self._filesystem.stat(path)
            except OSError as e:
                logger.debug("Skipping %s: %s", path, e)
                self.summary.skipped_entries += 1
                continue

            if stat.is_directory and self._recursive:
                await self.traverse(TraversalTask(path))
            elif is_candidate(name, self._pattern):
                self.summary.discovered += 1
                self._throttler.submit(WorkItem(path))
            else:
                self.summary.ignored += 1
