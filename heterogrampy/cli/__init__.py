"""Command-line interface for HeterogramPy."""

from heterogrampy.cli.parser import create_parser

__all__ = ["create_parser"]
