"""Command-line interface for medoc-check."""

from medoc_check.cli.runner import CLIRunner

__all__ = ["CLIRunner"]
