"""
Utility modules for underbar.

Structured logging and the exception hierarchy used by the command line.
"""

from . import exceptions, logging

__all__ = ["exceptions", "logging"]
