"""Command implementations exposed by the gsw CLI."""

from .scan import scan

__all__ = ["scan"]
