"""Command line interface: one-shot subcommands and the interactive menu."""

from .cli import CLI, main

__all__ = ["CLI", "main"]
