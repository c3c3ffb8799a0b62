"""CLI command groups."""

from .manifest import manifest_app

__all__ = ["manifest_app"]
