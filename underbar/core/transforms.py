"""
Transformation functions for underbar.

Pure functions for deriving new values from sequences.
"""

from collections.abc import Callable, Sequence
from typing import Any

from ..utils.logging import get_logger
from .primitives import get_property

logger = get_logger(__name__)

_MISSING = object()


def map(array: Sequence[Any], iterator: Callable[[Any], Any]) -> list[Any]:
    """Return the results of applying ``iterator`` to each element."""
    return [iterator(value) for value in array]


def pluck(records: Sequence[Any], property_name: str) -> list[Any]:
    """Return the value of ``property_name`` from each record.

    Records may be mappings or plain objects; absent properties yield None.
    """
    return [get_property(record, property_name) for record in records]


def invoke(
    array: Sequence[Any],
    method: str | Callable[[Any], Any],
    args: Sequence[Any] | None = None,
) -> Sequence[Any] | None:
    """Call a method on every element and return the same sequence.

    ``method`` is either the name of a method, called with no arguments, or a
    callable receiving the element as its receiver. ``args`` is accepted but
    never forwarded. Whatever the invoked methods mutate is visible through
    the returned sequence, which is ``array`` itself.
    """
    if args:
        logger.debug("invoke ignores positional arguments", args=list(args))

    if isinstance(method, str):
        for value in array:
            getattr(value, method)()
        return array
    if callable(method):
        for value in array:
            method(value)
        return array
    return None


def reduce(
    array: Sequence[Any],
    iterator: Callable[[Any, Any], Any],
    initial: Any = _MISSING,
) -> Any:
    """Fold the sequence from the left with ``iterator(accumulator, value)``.

    Without an explicit ``initial`` the accumulator starts at 0, not at the
    first element: ``reduce([1, 2, 3], add)`` computes ``0 + 1 + 2 + 3``.
    """
    accumulator = 0 if initial is _MISSING else initial
    for value in array:
        accumulator = iterator(accumulator, value)
    return accumulator
