"""Rich-based console reporter for terminal output."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console


if TYPE_CHECKING:
    from jarhunt.core.models import DigestResult


FOUND_TEMPLATE = "found \t: {path}\nhash \t: {sha1}"
NO_FILES_TEMPLATE = "no files found : {directory}"


class RichReporter:
    """HuntReporter that prints to the terminal using Rich.

    Lines are printed without markup, highlighting or wrapping so that
    paths containing brackets or long names come out verbatim.

    Example:
        reporter = RichReporter()
        summary = hunt(config, reporter=reporter)
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the reporter.

        Args:
            console: Console to print to. Defaults to stdout.
        """
        self.console = console or Console(highlight=False)

    def _print(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, soft_wrap=True)

    def found(self, result: DigestResult) -> None:
        """Print the path and digest of a candidate file."""
        self._print(FOUND_TEMPLATE.format(path=result.file_path, sha1=result.sha1))

    def no_files(self, directory: str) -> None:
        """Print a notice for a directory that could not be listed."""
        self._print(NO_FILES_TEMPLATE.format(directory=directory))
