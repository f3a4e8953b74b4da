"""Command-line interface package for the converter."""

from .app import build_parser, create_service, main, render_table, run

__all__ = [
    "build_parser",
    "create_service",
    "main",
    "render_table",
    "run",
]
