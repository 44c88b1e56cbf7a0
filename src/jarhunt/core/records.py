"""Formatting and routing of lookup outcomes to the two output sinks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from jarhunt.core.models import Resolved, Unresolved


if TYPE_CHECKING:
    from jarhunt.core.models import HuntSummary, LookupOutcome
    from jarhunt.core.ports import SinkPort


DEPENDENCY_TEMPLATE = (
    "<dependency>\n"
    "\t<groupId>{group_id}</groupId>\n"
    "\t<artifactId>{artifact_id}</artifactId>\n"
    "\t<version>{version}</version>\n"
    "</dependency>\n"
)

ERROR_TEMPLATE = '<error\nfile="{file_path}"\nurl="{host}{request_path}" />\n'


def format_dependency(resolved: Resolved) -> str:
    """Format a resolution as a pom.xml <dependency> fragment."""
    return DEPENDENCY_TEMPLATE.format(
        group_id=resolved.group_id,
        artifact_id=resolved.artifact_id,
        version=resolved.version,
    )


def format_error(unresolved: Unresolved) -> str:
    """Format a failed resolution as an <error> fragment.

    The url attribute is the host directly followed by the request path.
    """
    return ERROR_TEMPLATE.format(
        file_path=unresolved.file_path,
        host=unresolved.host,
        request_path=unresolved.request_path,
    )


class ResultWriter:
    """Routes lookup outcomes to the dependency or error sink.

    Every record goes out in a single write() call, so records from
    different lookups never interleave.
    """

    def __init__(
        self,
        dependency_sink: SinkPort,
        error_sink: SinkPort,
        summary: HuntSummary | None = None,
    ) -> None:
        self._dependency_sink = dependency_sink
        self._error_sink = error_sink
        self._summary = summary

    def on_resolved(self, resolved: Resolved) -> None:
        self._dependency_sink.write(format_dependency(resolved))
        if self._summary is not None:
            self._summary.resolved += 1

    def on_unresolved(self, unresolved: Unresolved) -> None:
        self._error_sink.write(format_error(unresolved))
        if self._summary is not None:
            self._summary.unresolved += 1

    def write(self, outcome: LookupOutcome) -> None:
        """Write an outcome to the sink matching its type."""
        if isinstance(outcome, Resolved):
            self.on_resolved(outcome)
        elif isinstance(outcome, Unresolved):
            self.on_unresolved(outcome)
        else:
            raise TypeError(f"Unknown lookup outcome: {outcome!r}")
