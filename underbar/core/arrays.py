"""
Multi-sequence shape functions for underbar.

``difference`` and ``shuffle`` mutate their first argument; callers that need
the original must pass a copy.
"""

import random
from collections.abc import Sequence
from typing import Any

from ..config import get_settings
from ..utils.logging import get_logger
from .iteration import index_of

logger = get_logger(__name__)


def zip(*arrays: Sequence[Any]) -> list[tuple[Any, ...]]:
    """Group elements sharing an index into tuples.

    The longest input sets the length; shorter inputs contribute None.
    """
    longest = max((len(array) for array in arrays), default=0)
    return [
        tuple(array[index] if index < len(array) else None for array in arrays)
        for index in range(longest)
    ]


def flatten(nested: Sequence[Any]) -> list[Any]:
    """Flatten lists and tuples at any depth, depth first and left to right."""
    result: list[Any] = []

    def collect(array: Sequence[Any]) -> None:
        for item in array:
            if isinstance(item, (list, tuple)):
                collect(item)
            else:
                result.append(item)

    collect(nested)
    return result


def intersection(array: Sequence[Any], *others: Sequence[Any]) -> list[Any]:
    """Return the elements of ``array`` found in every other sequence.

    Order and repeats follow ``array``.
    """
    return [
        value
        for value in array
        if all(index_of(other, value) > -1 for other in others)
    ]


def difference(array: list[Any], *others: Sequence[Any]) -> list[Any]:
    """Remove from ``array``, in place, everything present in the other sequences.

    Returns ``array`` itself.
    """
    before = len(array)
    array[:] = [
        value
        for value in array
        if not any(index_of(other, value) > -1 for other in others)
    ]
    logger.debug("difference removed elements in place", removed=before - len(array))
    return array


def _default_rng() -> random.Random:
    # An unset seed makes Random() seed itself from the OS
    return random.Random(get_settings().shuffle_seed)


def shuffle(array: list[Any], rng: random.Random | None = None) -> list[Any]:
    """Return the elements of ``array`` in random order, draining ``array``.

    Each step pops a uniformly chosen remaining element from the input, so
    the input list is empty afterwards.
    """
    rng = rng or _default_rng()
    result: list[Any] = []
    while array:
        result.append(array.pop(rng.randrange(len(array))))
    logger.debug("shuffle drained input", size=len(result))
    return result
