"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core pipeline
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from jarhunt.core.models import DigestResult, EntryStat


@runtime_checkable
class FilesystemPort(Protocol):
    """Asynchronous access to the directory tree being searched.

    All methods raise OSError (or a subclass) on failure.
    """

    async def list_directory(self, path: str) -> list[str]:
        """List entry names of a directory, in listing order.

        Args:
            path: Directory path. An empty string means the current directory.

        Returns:
            Entry names (not qualified paths).
        """
        ...

    async def stat(self, path: str) -> EntryStat:
        """Query the status of a single entry."""
        ...

    async def read_file(self, path: str) -> bytes:
        """Read a file's entire contents."""
        ...


@runtime_checkable
class SearchPort(Protocol):
    """Remote artifact search service."""

    async def get(self, request_path: str) -> bytes:
        """Issue a GET for a request path and return the response body.

        Args:
            request_path: Path plus query string, already URL-encoded.

        Returns:
            The raw response body, whatever the status code.

        Raises:
            LookupTransportError: If the service could not be reached.
        """
        ...


@runtime_checkable
class SinkPort(Protocol):
    """Append-only destination for formatted records."""

    def write(self, text: str) -> None:
        """Append one complete record.

        Raises:
            SinkWriteError: If the record could not be written.
        """
        ...


@runtime_checkable
class HuntReporter(Protocol):
    """Reports run progress to the user.

    The core pipeline uses this to print console messages without
    depending on any specific UI library.
    """

    def found(self, result: DigestResult) -> None:
        """Announce a candidate file and its digest."""
        ...

    def no_files(self, directory: str) -> None:
        """Announce that a directory could not be listed."""
        ...


class NullReporter:
    """A HuntReporter that produces no output.

    Used as the default when no console reporting is desired.
    """

    def found(self, result: DigestResult) -> None:
        """Do nothing."""
        _ = result  # Unused but required by protocol

    def no_files(self, directory: str) -> None:
        """Do nothing."""
        _ = directory
