"""
Function combinators for underbar.

Wrappers that control when and how often a function runs.
"""

import asyncio
import functools
import threading
from collections.abc import Callable, Hashable
from typing import Any

from ..config import get_settings
from ..utils.logging import get_logger

logger = get_logger(__name__)


def once(func: Callable[[], Any]) -> Callable[..., Any]:
    """Run ``func`` once and return a wrapper that replays its result.

    ``func`` is called immediately, when ``once`` is applied, not on the
    first call of the wrapper. The wrapper ignores its arguments.
    """
    result = func()
    logger.debug("once evaluated", function=getattr(func, "__name__", repr(func)))

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return result

    return wrapper


def memoize(
    func: Callable[[Any], Any], cache: bool | None = None
) -> Callable[[Any], Any]:
    """Wrap a single-argument function, caching its result per argument.

    ``cache`` defaults to the ``memoize_cache`` setting. When disabled the
    wrapper delegates every call to ``func``. Unhashable arguments are never
    cached.
    """
    if cache is None:
        cache = get_settings().memoize_cache

    results: dict[Hashable, Any] = {}

    @functools.wraps(func)
    def wrapper(argument: Any) -> Any:
        if not cache:
            return func(argument)
        try:
            return results[argument]
        except KeyError:
            value = results[argument] = func(argument)
            return value
        except TypeError:
            # unhashable
            return func(argument)

    wrapper.cache = results
    wrapper.cache_clear = results.clear
    return wrapper


def delay(func: Callable[..., Any], wait: float, *args: Any, **kwargs: Any) -> None:
    """Call ``func(*args, **kwargs)`` once, no sooner than ``wait`` milliseconds.

    Uses the running asyncio loop of the calling thread when there is one,
    otherwise a daemon timer thread. Returns immediately; there is no way to
    cancel the call.
    """
    seconds = max(wait, 0) / 1000
    callback = functools.partial(func, *args, **kwargs)

    if get_settings().delay_use_event_loop:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        if loop is not None:
            logger.debug("delay scheduled on event loop", wait_ms=wait)
            loop.call_later(seconds, callback)
            return

    timer = threading.Timer(seconds, callback)
    timer.daemon = True
    timer.start()
    logger.debug("delay scheduled on timer thread", wait_ms=wait)
