import asyncio
import threading
import time

from underbar.core.functions import delay, memoize, once


class TestOnce:
    def test_calls_function_at_wrap_time(self):
        calls = []

        def increment():
            calls.append(1)
            return len(calls)

        wrapped = once(increment)
        assert calls == [1]

        assert wrapped() == 1
        assert wrapped() == 1
        assert wrapped() == 1
        assert calls == [1]

    def test_wrapper_ignores_arguments(self):
        wrapped = once(lambda: "value")
        assert wrapped(1, 2, key="x") == "value"

    def test_wrapper_keeps_function_name(self):
        def compute():
            return 1

        assert once(compute).__name__ == "compute"


class TestMemoize:
    def test_caches_per_argument(self):
        calls = []

        def square(n):
            calls.append(n)
            return n * n

        fast_square = memoize(square, cache=True)
        assert fast_square(4) == 16
        assert fast_square(4) == 16
        assert fast_square(5) == 25
        assert calls == [4, 5]
        assert fast_square.cache == {4: 16, 5: 25}

    def test_cache_clear(self):
        calls = []
        wrapped = memoize(lambda n: calls.append(n) or n, cache=True)
        wrapped(1)
        wrapped.cache_clear()
        wrapped(1)
        assert calls == [1, 1]

    def test_passthrough_when_disabled(self):
        calls = []
        wrapped = memoize(lambda n: calls.append(n) or n, cache=False)
        assert wrapped(3) == 3
        assert wrapped(3) == 3
        assert calls == [3, 3]
        assert wrapped.cache == {}

    def test_default_follows_settings(self, monkeypatch):
        calls = []
        monkeypatch.setenv("UNDERBAR_MEMOIZE_CACHE", "false")
        wrapped = memoize(lambda n: calls.append(n) or n)
        wrapped(1)
        wrapped(1)
        assert calls == [1, 1]

    def test_caches_by_default(self):
        calls = []
        wrapped = memoize(lambda n: calls.append(n) or n)
        wrapped("a")
        wrapped("a")
        assert calls == ["a"]

    def test_unhashable_argument_is_computed(self):
        wrapped = memoize(len, cache=True)
        assert wrapped([1, 2, 3]) == 3
        assert wrapped.cache == {}


class TestDelay:
    def test_runs_later_on_timer_thread(self):
        fired = threading.Event()
        received = []

        def callback(*args):
            received.extend(args)
            fired.set()

        start = time.monotonic()
        assert delay(callback, 50, "a", "b") is None
        assert not fired.is_set()
        assert fired.wait(timeout=5)
        assert time.monotonic() - start >= 0.04
        assert received == ["a", "b"]

    def test_runs_on_event_loop_when_available(self):
        async def scenario():
            loop_thread = threading.get_ident()
            results = []
            delay(lambda value: results.append((value, threading.get_ident())), 10, "x")
            assert results == []
            await asyncio.sleep(0.1)
            return loop_thread, results

        loop_thread, results = asyncio.run(scenario())
        assert results == [("x", loop_thread)]

    def test_event_loop_can_be_disabled(self, monkeypatch):
        monkeypatch.setenv("UNDERBAR_DELAY_USE_EVENT_LOOP", "false")
        fired = threading.Event()
        threads = []

        def callback():
            threads.append(threading.get_ident())
            fired.set()

        async def scenario():
            delay(callback, 10)
            return threading.get_ident()

        loop_thread = asyncio.run(scenario())
        assert fired.wait(timeout=5)
        assert threads and threads[0] != loop_thread
