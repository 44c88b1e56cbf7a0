"""Domain exceptions for jarhunt.

All library errors inherit from JarhuntError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class JarhuntError(Exception):
    """Base class for all jarhunt exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class ConfigurationError(JarhuntError):
    """Raised for startup problems (missing directory, invalid settings)."""

    pass


class ReadFailure(JarhuntError):
    """Raised when a candidate file cannot be read for digesting.

    Isolated per file: the run continues with the next candidate.

    Attributes:
        file_path: The path that could not be read.
        cause: The underlying exception, if any.
    """

    def __init__(self, file_path: str, cause: Exception | None = None) -> None:
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"Could not read '{file_path}'")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the file."""
        return f"Check that {self.file_path} exists and is readable"


class LookupTransportError(JarhuntError):
    """Raised when the search service cannot be reached at all.

    This is fatal for the whole run.

    Attributes:
        host: The search host that was contacted.
        request_path: The request path that was being fetched.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        host: str,
        request_path: str,
        cause: Exception | None = None,
    ) -> None:
        self.host = host
        self.request_path = request_path
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Lookup request to '{host}' failed{detail}")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking connectivity."""
        return f"Check network connectivity to {self.host} or pass --host/--port"


class SinkWriteError(JarhuntError):
    """Raised when an output sink cannot be opened or written.

    Attributes:
        path: The sink's file path.
        cause: The underlying exception, if any.
    """

    def __init__(self, path: Path, cause: Exception | None = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Could not write to '{path}'")

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the output location."""
        return f"Check permissions and free space for {self.path}"
