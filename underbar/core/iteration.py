"""
Iteration and predicate functions for underbar.

Pure functions for walking, searching and testing collections.
"""

from collections.abc import Callable, Sequence
from typing import Any

from .primitives import is_truthy, iter_items, iter_values, strictly_equal


def first(array: Sequence[Any], n: int | None = None) -> Any:
    """Return the first element, or a new list of the first ``n`` elements.

    An empty sequence has no first element and yields None.
    """
    if n is None:
        return array[0] if len(array) else None
    return list(array[:n])


def last(array: Sequence[Any], n: int | None = None) -> Any:
    """Return the last element, or a new list of the last ``n`` elements.

    When ``n`` reaches the length of the sequence the sequence itself is
    returned, not a copy.
    """
    length = len(array)
    if n is None:
        return array[length - 1] if length else None
    if n >= length:
        return array
    return list(array[length - n :])


def each(collection: Any, iterator: Callable[[Any, Any, Any], Any]) -> None:
    """Call ``iterator(value, key, collection)`` for every element.

    Mappings pass their keys, sequences their indices.
    """
    for key, value in iter_items(collection):
        iterator(value, key, collection)


def index_of(array: Sequence[Any], target: Any) -> int:
    """Return the first index holding ``target``, or -1."""
    for index, value in enumerate(array):
        if strictly_equal(value, target):
            return index
    return -1


def filter(array: Sequence[Any], predicate: Callable[[Any], Any]) -> list[Any]:
    """Return the elements for which ``predicate`` returns exactly True."""
    return [value for value in array if predicate(value) is True]


def reject(array: Sequence[Any], predicate: Callable[[Any], Any]) -> list[Any]:
    """Return the elements for which ``predicate`` does not return exactly True."""
    return [value for value in array if predicate(value) is not True]


def uniq(array: Sequence[Any]) -> list[Any]:
    """Return a duplicate-free copy, keeping first occurrences in order."""
    result: list[Any] = []
    for value in array:
        if index_of(result, value) == -1:
            result.append(value)
    return result


def contains(collection: Any, target: Any) -> bool:
    """Check whether any element or mapping value strictly equals ``target``."""
    return any(strictly_equal(value, target) for value in iter_values(collection))


def every(collection: Any, predicate: Callable[[Any], Any] | None = None) -> bool:
    """Check that all elements pass ``predicate`` (or are truthy)."""
    for value in iter_values(collection):
        result = predicate(value) if predicate else value
        if not is_truthy(result):
            return False
    return True


def some(collection: Any, predicate: Callable[[Any], Any] | None = None) -> bool:
    """Check whether any element passes ``predicate`` (or is truthy)."""
    for value in iter_values(collection):
        result = predicate(value) if predicate else value
        if is_truthy(result):
            return True
    return False
