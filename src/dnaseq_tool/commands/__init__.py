"""CLI subcommand implementations."""

from . import (
    transform,
    codes,
)

__all__ = [
    "transform",
    "codes",
]
