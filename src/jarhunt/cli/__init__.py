"""CLI for jarhunt."""

from jarhunt.cli.main import app, main


__all__ = ["app", "main"]
