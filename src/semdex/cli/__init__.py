# src/semdex/cli/__init__.py
"""CLI package for semdex.

This package provides the command-line interface using Typer.
The CLI is a thin wrapper around the commands layer.
"""

from semdex.cli.app import app, console

__all__ = ["app", "console"]
