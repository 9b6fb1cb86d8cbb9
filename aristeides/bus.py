"""Module-level command bus bound to a process default dispatcher.

Prefer an explicit ``CommandDispatcher`` where the owner is known; these
functions exist for code that wants a single process-wide bus.
"""
from __future__ import annotations

from typing import Any, Optional

from aristeides.domain.interfaces.command_handler import CommandHandler, Interceptor
from aristeides.domain.outcome import Outcome
from aristeides.infrastructure.messaging.dispatcher import CommandDispatcher

_default_dispatcher: Optional[CommandDispatcher] = None


def get_default_dispatcher() -> CommandDispatcher:
    global _default_dispatcher
    if _default_dispatcher is None:
        _default_dispatcher = CommandDispatcher()
    return _default_dispatcher


def reset_default_dispatcher() -> None:
    """Drop every registered command and interceptor of the default bus."""
    global _default_dispatcher
    _default_dispatcher = None


async def handle(
    command: str,
    context: Optional[dict[str, Any]] = None,
    payload: Optional[dict[str, Any]] = None,
) -> Outcome:
    return await get_default_dispatcher().handle(command, context, payload)


def register_command(name: str, handler: CommandHandler) -> None:
    get_default_dispatcher().register_command(name, handler)


def deregister_command(name: str) -> None:
    get_default_dispatcher().deregister_command(name)


def register_interceptor(interceptor: Interceptor) -> None:
    get_default_dispatcher().register_interceptor(interceptor)


def deregister_interceptor(interceptor: Interceptor) -> bool:
    return get_default_dispatcher().deregister_interceptor(interceptor)
