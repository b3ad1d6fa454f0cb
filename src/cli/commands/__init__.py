"""CLI commands."""

from . import find, generate, public, thumbprint

__all__ = [
    "find",
    "generate",
    "public",
    "thumbprint",
]
