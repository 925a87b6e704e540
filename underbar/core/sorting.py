"""
Sorting for underbar.

Stable ordered-insertion sort over the values of a sequence or mapping.
"""

from collections.abc import Callable
from typing import Any

from .primitives import get_property, is_truthy, iter_values


def sort_by(collection: Any, criterion: str | Callable[[Any], Any]) -> list[Any]:
    """Return the collection's values sorted by a derived key.

    ``criterion`` is a property name or a function of one value. Each value
    is inserted before the first placed value whose key is falsy or greater
    than its own, so equal keys keep their visiting order. Values with a
    falsy key are appended when visited and therefore end up after every
    value with a truthy key.
    """

    def key_of(value: Any) -> Any:
        if isinstance(criterion, str):
            return get_property(value, criterion)
        return criterion(value)

    result: list[Any] = []
    keys: list[Any] = []

    for value in iter_values(collection):
        key = key_of(value)
        position = len(result)
        if is_truthy(key):
            for index, placed in enumerate(keys):
                if not is_truthy(placed) or placed > key:
                    position = index
                    break
        result.insert(position, value)
        keys.insert(position, key)

    return result
