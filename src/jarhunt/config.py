"""Run configuration for jarhunt.

A HuntConfig is built once at startup and passed explicitly to the
pipeline; nothing reads configuration from global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jarhunt.core.exceptions import ConfigurationError
from jarhunt.core.models import DrainOrder
from jarhunt.core.traversal import DEFAULT_PATTERN


DEFAULT_HOST = "search.maven.org"
DEFAULT_PORT = 80
DEFAULT_DEPENDENCY_XML = Path("dependency.xml")
DEFAULT_ERROR_XML = Path("error.xml")


@dataclass(frozen=True, slots=True)
class HuntConfig:
    """Immutable settings for one run.

    Attributes:
        root: Directory to search.
        recursive: Descend into subdirectories.
        show_found: Print a console message for each candidate file.
        dependency_xml: Output path for <dependency> records.
        error_xml: Output path for <error> records.
        host: Search service host.
        port: Search service port.
        pattern: Case-sensitive glob matched against entry names.
        order: Drain order of the throttler's pending queue.
        timeout: Per-request timeout in seconds. None waits indefinitely.

    Example:
        >>> config = HuntConfig(root="libs", recursive=True)
        >>> config.base_url
        'http://search.maven.org:80'
    """

    root: str
    recursive: bool = False
    show_found: bool = True
    dependency_xml: Path = DEFAULT_DEPENDENCY_XML
    error_xml: Path = DEFAULT_ERROR_XML
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    pattern: str = DEFAULT_PATTERN
    order: DrainOrder = DrainOrder.LIFO
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not self.host:
            raise ConfigurationError("Search host cannot be empty")
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"Invalid port: {self.port}")
        if not self.pattern:
            raise ConfigurationError("File pattern cannot be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive: {self.timeout}")

    @property
    def base_url(self) -> str:
        """Base URL of the search service."""
        return f"http://{self.host}:{self.port}"


def validate_root(root: str | Path) -> None:
    """Check that the directory to search exists and is a directory.

    Args:
        root: Path given on the command line.

    Raises:
        ConfigurationError: If the path is missing or not a directory.
    """
    path = Path(root)
    if not path.exists():
        raise ConfigurationError(f'directory, "{root}" does not exist.')
    if not path.is_dir():
        raise ConfigurationError(f'argument, "{root}" is not a directory')
