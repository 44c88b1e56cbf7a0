"""Pipeline coordinator for jarhunt."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any

from jarhunt.core.digest import Digester
from jarhunt.core.exceptions import ReadFailure
from jarhunt.core.lookup import LookupClient
from jarhunt.core.models import HuntSummary, TraversalTask
from jarhunt.core.ports import NullReporter
from jarhunt.core.records import ResultWriter
from jarhunt.core.throttle import WorkThrottler
from jarhunt.core.traversal import Traverser


if TYPE_CHECKING:
    from jarhunt.config import HuntConfig
    from jarhunt.core.models import WorkItem
    from jarhunt.core.ports import (
        FilesystemPort,
        HuntReporter,
        SearchPort,
        SinkPort,
    )


logger = logging.getLogger(__name__)


class JarHunt:
    """Wires traversal, throttling, digesting, lookup and output into one run.

    Each admitted work item runs as its own task: digest, release the
    throttle slot, look up, write. Traversal runs concurrently with those
    tasks. The first unexpected error (a transport failure, a sink failure)
    aborts the run: pending work is abandoned, outstanding tasks are
    cancelled, and the error is re-raised from run().

    A JarHunt instance performs one run at a time.
    """

    def __init__(
        self,
        config: HuntConfig,
        filesystem: FilesystemPort,
        search: SearchPort,
        dependency_sink: SinkPort,
        error_sink: SinkPort,
        reporter: HuntReporter | None = None,
    ) -> None:
        self._config = config
        self._filesystem = filesystem
        self._search = search
        self._dependency_sink = dependency_sink
        self._error_sink = error_sink
        self._reporter = reporter or NullReporter()

        self._tasks: set[asyncio.Task[None]] = set()
        self._failure: BaseException | None = None

    async def run(self) -> HuntSummary:
        """Search the configured root and resolve every candidate file.

        Returns:
            Counters for the completed run.

        Raises:
            LookupTransportError: If the search service could not be reached.
            SinkWriteError: If an output record could not be written.
        """
        summary = HuntSummary()
        self._tasks = set()
        self._failure = None

        self._throttler = WorkThrottler(self._start, order=self._config.order)
        self._digester = Digester(self._filesystem)
        self._lookup = LookupClient(self._search, self._config.host)
        self._writer = ResultWriter(self._dependency_sink, self._error_sink, summary)
        self._summary = summary

        traverser = Traverser(
            self._filesystem,
            self._throttler,
            recursive=self._config.recursive,
            pattern=self._config.pattern,
            reporter=self._reporter,
            summary=summary,
        )
        self._finished = asyncio.Event()
        root = TraversalTask(self._config.root, is_root=True)
        self._spawn(traverser.traverse(root))

        # Set once traversal and every item task, including late arrivals, are done
        await self._finished.wait()

        if self._failure is not None:
            raise self._failure
        return summary

    def _start(self, item: WorkItem) -> None:
        self._spawn(self._process(item))

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> None:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if not task.cancelled():
            exc = task.exception()
            if exc is not None:
                self._abort(exc)
        if not self._tasks:
            self._finished.set()

    async def _process(self, item: WorkItem) -> None:
        try:
            result = await self._digester.digest(item)
        except ReadFailure as e:
            logger.warning("%s: %s", e, e.cause)
            self._summary.unreadable += 1
            return
        finally:
            # Release the slot once reading is over, success or not
            self._throttler.complete()

        if self._config.show_found:
            self._reporter.found(result)

        outcome = await self._lookup.lookup(result)
        self._writer.write(outcome)

    def _abort(self, exc: BaseException) -> None:
        if self._failure is not None:
            logger.debug("Ignoring error after abort: %r", exc)
            return

        logger.error("Aborting run: %s", exc)
        self._failure = exc
        self._throttler.close()
        for task in self._tasks:
            task.cancel()


async def run_hunt(
    config: HuntConfig,
    reporter: HuntReporter | None = None,
) -> HuntSummary:
    """Run a hunt with the default adapters.

    Opens both output files, connects to the configured search host, and
    searches config.root on the local filesystem.
    """
    from jarhunt.adapters.filesystem import LocalFilesystem
    from jarhunt.adapters.search import HttpSearchClient
    from jarhunt.adapters.sinks import FileSink

    with FileSink(config.dependency_xml) as dependency_sink, FileSink(
        config.error_xml
    ) as error_sink:
        async with HttpSearchClient(
            config.host, config.port, timeout=config.timeout
        ) as search:
            hunt = JarHunt(
                config,
                LocalFilesystem(),
                search,
                dependency_sink,
                error_sink,
                reporter=reporter,
            )
            return await hunt.run()


def hunt(config: HuntConfig, reporter: HuntReporter | None = None) -> HuntSummary:
    """Synchronous wrapper around run_hunt().

    Example:
        >>> from jarhunt import HuntConfig, hunt
        >>> summary = hunt(HuntConfig(root="libs", recursive=True))  # doctest: +SKIP
        >>> summary.resolved  # doctest: +SKIP
        12
    """
    return asyncio.run(run_hunt(config, reporter))
