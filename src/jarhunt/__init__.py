"""jarhunt - Identify jar files by content hash against Maven Central.

This library walks a directory for jar files, computes each file's SHA-1,
looks the digest up on the Maven Central search service, and writes
``<dependency>`` fragments for hits and ``<error>`` fragments for misses.

Example:
    >>> from jarhunt import HuntConfig, hunt
    >>> config = HuntConfig(root="lib", recursive=True)
    >>> summary = hunt(config)  # doctest: +SKIP
    >>> print(open("dependency.xml").read())  # doctest: +SKIP
    <dependency>
    	<groupId>commons-io</groupId>
    	<artifactId>commons-io</artifactId>
    	<version>2.4</version>
    </dependency>
"""

from jarhunt.adapters.filesystem import LocalFilesystem
from jarhunt.adapters.search import HttpSearchClient
from jarhunt.adapters.sinks import FileSink, MemorySink
from jarhunt.config import HuntConfig, validate_root
from jarhunt.core.digest import Digester, compute_digest
from jarhunt.core.exceptions import (
    ConfigurationError,
    JarhuntError,
    LookupTransportError,
    ReadFailure,
    SinkWriteError,
)
from jarhunt.core.lookup import LookupClient, build_request_path, parse_search_response
from jarhunt.core.models import (
    DigestResult,
    DrainOrder,
    EntryStat,
    HuntSummary,
    LookupOutcome,
    Resolved,
    TraversalTask,
    Unresolved,
    WorkItem,
)
from jarhunt.core.ports import (
    FilesystemPort,
    HuntReporter,
    NullReporter,
    SearchPort,
    SinkPort,
)
from jarhunt.core.records import ResultWriter, format_dependency, format_error
from jarhunt.core.services import JarHunt, hunt, run_hunt
from jarhunt.core.throttle import WorkThrottler
from jarhunt.core.traversal import Traverser
from jarhunt.progress import RichReporter


__version__ = "1.1.0"

__all__ = [
    "ConfigurationError",
    "DigestResult",
    "Digester",
    "DrainOrder",
    "EntryStat",
    "FileSink",
    "FilesystemPort",
    "HttpSearchClient",
    "HuntConfig",
    "HuntReporter",
    "HuntSummary",
    "JarHunt",
    "JarhuntError",
    "LocalFilesystem",
    "LookupClient",
    "LookupOutcome",
    "LookupTransportError",
    "MemorySink",
    "NullReporter",
    "ReadFailure",
    "Resolved",
    "ResultWriter",
    "RichReporter",
    "SearchPort",
    "SinkPort",
    "SinkWriteError",
    "Traverser",
    "TraversalTask",
    "Unresolved",
    "WorkItem",
    "WorkThrottler",
    "__version__",
    "build_request_path",
    "compute_digest",
    "format_dependency",
    "format_error",
    "hunt",
    "parse_search_response",
    "run_hunt",
    "validate_root",
]
