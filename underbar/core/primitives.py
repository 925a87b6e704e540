"""
Shared primitives for the collection functions.

Truthiness, strict equality and uniform access to sequences and mappings.
"""

import math
import numbers
from collections.abc import Iterator, Mapping
from typing import Any


def is_truthy(value: Any) -> bool:
    """Return False for None, False, numeric zero, NaN and "", True otherwise.

    Unlike Python's ``bool()``, empty lists, tuples and dicts are truthy.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, numbers.Number):
        if isinstance(value, numbers.Real) and math.isnan(value):
            return False
        return value != 0
    return True


def strictly_equal(left: Any, right: Any) -> bool:
    """Compare two values without type coercion.

    Booleans only equal booleans, numbers compare numerically with each
    other, and everything else must share its exact type.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, numbers.Number) and isinstance(right, numbers.Number):
        return left == right
    return type(left) is type(right) and left == right


def get_property(record: Any, name: str) -> Any:
    """Look up ``name`` on a mapping or an object, None when absent."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def iter_items(collection: Any) -> Iterator[tuple[Any, Any]]:
    """Yield (key, value) for mappings and (index, value) for sequences."""
    if isinstance(collection, Mapping):
        for key in collection:
            yield key, collection[key]
    else:
        yield from enumerate(collection)


def iter_values(collection: Any) -> Iterator[Any]:
    """Yield the values of a mapping or the elements of a sequence."""
    if isinstance(collection, Mapping):
        yield from collection.values()
    else:
        yield from collection
