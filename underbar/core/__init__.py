"""
Core collection functions for underbar.

Functional implementations of iteration, transformation, merging,
combinators, sorting and multi-sequence operations.
"""

from . import arrays, functions, iteration, objects, primitives, sorting, transforms

__all__ = [
    "arrays",
    "functions",
    "iteration",
    "objects",
    "primitives",
    "sorting",
    "transforms",
]
