"""Filesystem adapters."""

from jarhunt.adapters.filesystem.local import LocalFilesystem


__all__ = ["LocalFilesystem"]
