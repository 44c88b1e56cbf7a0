"""Adapters implementing the jarhunt core ports."""
