"""Search service adapters."""

from jarhunt.adapters.search.http import HttpSearchClient


__all__ = ["HttpSearchClient"]
