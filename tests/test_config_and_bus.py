from __future__ import annotations

import pytest
from pydantic import ValidationError

from aristeides.core.config import BusSettings
from aristeides.domain.errors import NotRegistered, UnknownCommand


def test_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("ARISTEIDES_LOG_LEVEL", "debug")
    monkeypatch.setenv("ARISTEIDES_INTERCEPT_NESTED_COMMANDS", "false")

    s = BusSettings()

    assert s.LOG_LEVEL == "DEBUG"
    assert s.INTERCEPT_NESTED_COMMANDS is False


def test_settings_reject_unknown_env():
    with pytest.raises(ValidationError):
        BusSettings(APP_ENV="qa")


def test_settings_reject_unknown_log_level():
    with pytest.raises(ValidationError):
        BusSettings(LOG_LEVEL="chatty")


@pytest.mark.asyncio
async def test_module_level_bus(default_bus, make_handler):
    handler = make_handler(result={"id": 7})
    default_bus.register_command("CREATE_TASK", handler)

    outcome = await default_bus.handle("CREATE_TASK", {"user_id": "u-1"}, {"title": "x"})

    assert outcome.result == {"id": 7}
    assert handler.calls == [({"user_id": "u-1"}, {"title": "x"})]

    def deny(command, context, payload):
        return False

    default_bus.register_interceptor(deny)
    assert (await default_bus.handle("CREATE_TASK")).vetoed
    assert default_bus.deregister_interceptor(deny) is True

    default_bus.deregister_command("CREATE_TASK")
    with pytest.raises(NotRegistered):
        default_bus.deregister_command("CREATE_TASK")
    with pytest.raises(UnknownCommand):
        await default_bus.handle("CREATE_TASK")


def test_reset_default_dispatcher_drops_registrations(default_bus, make_handler):
    default_bus.register_command("CREATE_TASK", make_handler())
    first = default_bus.get_default_dispatcher()

    default_bus.reset_default_dispatcher()

    assert default_bus.get_default_dispatcher() is not first
    assert "CREATE_TASK" not in default_bus.get_default_dispatcher().registry
