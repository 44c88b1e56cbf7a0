"""Wiring the pipeline by hand.

Use JarHunt directly to swap adapters: here the records are collected
in memory instead of files, and lookups go to a local Solr mirror of
the search service with a request timeout.
"""

import asyncio

from jarhunt import (
    DrainOrder,
    HttpSearchClient,
    HuntConfig,
    JarHunt,
    LocalFilesystem,
    MemorySink,
)


async def main() -> None:
    config = HuntConfig(
        root="lib",
        show_found=False,
        host="localhost",
        port=8983,
        order=DrainOrder.FIFO,
        timeout=10.0,
    )
    dependencies, errors = MemorySink(), MemorySink()

    async with HttpSearchClient(
        config.host, config.port, timeout=config.timeout
    ) as search:
        summary = await JarHunt(
            config, LocalFilesystem(), search, dependencies, errors
        ).run()

    print(dependencies.getvalue(), end="")
    print(f"{summary.unresolved} files could not be resolved")


if __name__ == "__main__":
    asyncio.run(main())
