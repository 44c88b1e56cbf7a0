"""Output sink adapters."""

from jarhunt.adapters.sinks.file_sink import FileSink, MemorySink


__all__ = ["FileSink", "MemorySink"]
