"""
Command-line interface module for underbar.

Typer application with Rich formatting over JSON documents.
"""

from .main import app

__all__ = ["app"]
