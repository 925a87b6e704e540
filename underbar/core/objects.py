"""
Mapping merge functions for underbar.

Both functions mutate and return their target.
"""

from collections.abc import Mapping, MutableMapping
from typing import Any


def extend(
    target: MutableMapping[str, Any], *sources: Mapping[str, Any]
) -> MutableMapping[str, Any]:
    """Copy every key of each source into ``target``, later sources winning."""
    for source in sources:
        for key in source:
            target[key] = source[key]
    return target


def defaults(
    target: MutableMapping[str, Any], *sources: Mapping[str, Any]
) -> MutableMapping[str, Any]:
    """Fill in keys missing from ``target``; the first source to supply a key wins."""
    for source in sources:
        for key in source:
            if key not in target:
                target[key] = source[key]
    return target
