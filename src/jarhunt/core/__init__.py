"""Core domain module for jarhunt.

This module contains the pipeline components, domain models and port
definitions. It performs no I/O itself and can be tested in isolation.
"""

from jarhunt.core.models import (
    DigestResult,
    DrainOrder,
    HuntSummary,
    LookupOutcome,
    Resolved,
    Unresolved,
    WorkItem,
)
from jarhunt.core.ports import FilesystemPort, HuntReporter, SearchPort, SinkPort


__all__ = [
    "DigestResult",
    "DrainOrder",
    "FilesystemPort",
    "HuntReporter",
    "HuntSummary",
    "LookupOutcome",
    "Resolved",
    "SearchPort",
    "SinkPort",
    "Unresolved",
    "WorkItem",
]
