"""Structured resource identifiers, glob selectors and selector matching."""

__version__ = "0.0.2"

__all__ = ["errors", "span", "format", "path", "id", "selector", "matcher"]