from __future__ import annotations

import os

import pytest

# IMPORTANT:
# Set env BEFORE importing aristeides (settings are read at import time)
os.environ.setdefault("ARISTEIDES_APP_ENV", "dev")
os.environ.setdefault("ARISTEIDES_LOG_LEVEL", "WARNING")

from aristeides import bus  # noqa: E402
from aristeides.core.config import BusSettings  # noqa: E402
from aristeides.core.logging import configure_logging  # noqa: E402
from aristeides.infrastructure.messaging.dispatcher import CommandDispatcher  # noqa: E402

configure_logging()


class RecordingHandler:
    """Handler that records every call and returns a fixed result."""

    def __init__(self, result=None) -> None:
        self.result = result
        self.calls: list[tuple[dict, dict]] = []

    async def handle(self, context, payload, bus):
        self.calls.append((context, payload))
        return self.result


class FailingHandler:
    def __init__(self, error: BaseException) -> None:
        self.error = error

    async def handle(self, context, payload, bus):
        raise self.error


@pytest.fixture()
def settings() -> BusSettings:
    return BusSettings()


@pytest.fixture()
def dispatcher(settings) -> CommandDispatcher:
    return CommandDispatcher(settings=settings)


@pytest.fixture()
def make_handler():
    def _mk(result=None) -> RecordingHandler:
        return RecordingHandler(result)
    return _mk


@pytest.fixture()
def make_failing_handler():
    def _mk(error: BaseException) -> FailingHandler:
        return FailingHandler(error)
    return _mk


@pytest.fixture()
def default_bus():
    bus.reset_default_dispatcher()
    yield bus
    bus.reset_default_dispatcher()
