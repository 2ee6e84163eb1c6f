"""Command-line interface for exploring terminal input and output."""

from ansi_console.cli.app import create_app

__all__ = ["create_app"]
