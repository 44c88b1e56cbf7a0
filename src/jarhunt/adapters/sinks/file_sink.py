"""Output sink adapters implementing SinkPort."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from jarhunt.core.exceptions import SinkWriteError


if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType


class FileSink:
    """Append-only text file sink.

    The file is opened in write mode when the context is entered, so each
    run starts from an empty file, and stays open until the context exits.

    Attributes:
        path: Output file path.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._stream: TextIO | None = None

    def __enter__(self) -> FileSink:
        """Open (and truncate) the output file.

        Raises:
            SinkWriteError: If the file cannot be created.
        """
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the output file."""
        self.close()

    def open(self) -> None:
        """Open the output file if not already open."""
        if self._stream is not None:
            return
        try:
            self._stream = self.path.open("w", encoding="utf-8")
        except OSError as e:
            raise SinkWriteError(self.path, cause=e) from e

    def close(self) -> None:
        """Close the output file. Safe to call more than once."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def write(self, text: str) -> None:
        """Append one record.

        The sink is opened on first write when used outside a context manager.

        Raises:
            SinkWriteError: If the record cannot be written.
        """
        self.open()
        assert self._stream is not None
        try:
            self._stream.write(text)
        except OSError as e:
            raise SinkWriteError(self.path, cause=e) from e


class MemorySink:
    """Sink that keeps records in a list.

    Useful for library callers that post-process records themselves.

    Attributes:
        records: Records in the order they were written.
    """

    def __init__(self) -> None:
        self.records: list[str] = []

    def write(self, text: str) -> None:
        """Append one record."""
        self.records.append(text)

    def getvalue(self) -> str:
        """Return all records concatenated."""
        return "".join(self.records)
