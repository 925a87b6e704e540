"""
underbar - functional collection helpers

Higher-order functions over sequences and mappings: iteration, filtering,
reducing, sorting, set operations, flattening and function combinators.
"""

from . import cli, config, core, utils
from .core.arrays import difference, flatten, intersection, shuffle, zip
from .core.functions import delay, memoize, once
from .core.iteration import (
    contains,
    each,
    every,
    filter,
    first,
    index_of,
    last,
    reject,
    some,
    uniq,
)
from .core.objects import defaults, extend
from .core.primitives import is_truthy, strictly_equal
from .core.sorting import sort_by
from .core.transforms import invoke, map, pluck, reduce

__version__ = "0.1.0"
__all__ = [
    "cli",
    "config",
    "core",
    "utils",
    "contains",
    "defaults",
    "delay",
    "difference",
    "each",
    "every",
    "extend",
    "filter",
    "first",
    "flatten",
    "index_of",
    "intersection",
    "invoke",
    "is_truthy",
    "last",
    "map",
    "memoize",
    "once",
    "pluck",
    "reduce",
    "reject",
    "shuffle",
    "some",
    "sort_by",
    "strictly_equal",
    "uniq",
    "zip",
]
