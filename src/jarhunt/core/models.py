"""Core domain models for jarhunt.

These models are pure Python dataclasses with no I/O dependencies.
They carry a single run's work from discovery through to output records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DrainOrder(str, Enum):
    """Order in which the throttler drains its pending queue.

    LIFO dispatches the most recently discovered file next. FIFO dispatches
    files in discovery order.
    """

    LIFO = "lifo"
    FIFO = "fifo"


@dataclass(frozen=True, slots=True)
class TraversalTask:
    """A directory about to be listed.

    Attributes:
        path: Directory path. Empty at the root means the current directory.
        is_root: Whether this is the directory the run started from.
    """

    path: str
    is_root: bool = False


@dataclass(frozen=True, slots=True)
class EntryStat:
    """Result of a filesystem status query for one directory entry."""

    is_directory: bool


@dataclass(frozen=True, slots=True)
class WorkItem:
    """A candidate file awaiting digest computation.

    Attributes:
        file_path: Qualified path of the candidate file.

    Example:
        >>> WorkItem(file_path="libs/commons-io.jar").file_path
        'libs/commons-io.jar'
    """

    file_path: str

    def __post_init__(self) -> None:
        """Validate the path is present."""
        if not self.file_path:
            raise ValueError("WorkItem file_path cannot be empty")


@dataclass(frozen=True, slots=True)
class DigestResult:
    """Content digest of one candidate file.

    Attributes:
        file_path: Path of the file that was read.
        sha1: Lowercase hex SHA-1 of the file's bytes.
    """

    file_path: str
    sha1: str


@dataclass(frozen=True, slots=True)
class Resolved:
    """Lookup outcome for a digest that matched a known artifact.

    Attributes:
        group_id: Maven groupId of the first search hit.
        artifact_id: Maven artifactId of the first search hit.
        version: Version of the first search hit.
        file_path: Path of the file whose digest was looked up.
    """

    group_id: str
    artifact_id: str
    version: str
    file_path: str = ""


@dataclass(frozen=True, slots=True)
class Unresolved:
    """Lookup outcome for a digest that could not be resolved.

    Attributes:
        file_path: Path of the file whose digest was looked up.
        host: Search host the request was sent to.
        request_path: Exact request path (with query string) that was used.
    """

    file_path: str
    host: str
    request_path: str


LookupOutcome = Resolved | Unresolved


@dataclass(slots=True)
class HuntSummary:
    """Counters accumulated over one run.

    Attributes:
        discovered: Candidate files handed to the throttler.
        ignored: Entries that were neither candidates nor traversed.
        unreadable: Candidates whose contents could not be read.
        resolved: Lookups written to the dependency sink.
        unresolved: Lookups written to the error sink.
        skipped_entries: Entries whose status query failed.
        unlisted_directories: Directories that could not be listed.
    """

    discovered: int = 0
    ignored: int = 0
    unreadable: int = 0
    resolved: int = 0
    unresolved: int = 0
    skipped_entries: int = 0
    unlisted_directories: int = 0

    @property
    def completed(self) -> int:
        """Number of candidates that reached a final state."""
        return self.unreadable + self.resolved + self.unresolved
