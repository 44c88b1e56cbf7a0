"""Console reporting adapters."""

from jarhunt.progress.console import RichReporter


__all__ = ["RichReporter"]
