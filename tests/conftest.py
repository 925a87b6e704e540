import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep UNDERBAR_* variables and stray .env files out of every test."""
    for name in (
        "UNDERBAR_LOG_LEVEL",
        "UNDERBAR_LOG_FORMAT",
        "UNDERBAR_LOG_FILE",
        "UNDERBAR_MEMOIZE_CACHE",
        "UNDERBAR_DELAY_USE_EVENT_LOOP",
        "UNDERBAR_SHUFFLE_SEED",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class Person:
    def __init__(self, name, age=None):
        self.name = name
        self.age = age
        self.greeted = 0

    def greet(self):
        self.greeted += 1
        return f"hi {self.name}"


@pytest.fixture
def people():
    return [Person("moe", 40), Person("larry", 50), Person("curly", 60)]


@pytest.fixture
def restore_logging():
    """Undo the global logging configuration installed by setup_logging()."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
