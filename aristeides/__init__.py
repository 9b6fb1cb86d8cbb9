from __future__ import annotations

from aristeides.bus import (
    deregister_command,
    deregister_interceptor,
    get_default_dispatcher,
    handle,
    register_command,
    register_interceptor,
    reset_default_dispatcher,
)
from aristeides.domain.errors import (
    CommandBusError,
    DuplicateCommand,
    InterceptorVetoed,
    InvalidHandler,
    InvalidName,
    NotRegistered,
    UnknownCommand,
)
from aristeides.domain.interfaces.command_handler import BusHandle, CommandHandler, Interceptor
from aristeides.domain.outcome import Outcome
from aristeides.domain.value_objects.command_name import CommandName, constant_case, is_constant_case
from aristeides.infrastructure.messaging.command_registry import InMemoryCommandRegistry
from aristeides.infrastructure.messaging.dispatcher import CommandDispatcher
from aristeides.infrastructure.messaging.interceptor_chain import InterceptorChain

__all__ = [
    "BusHandle",
    "CommandBusError",
    "CommandDispatcher",
    "CommandHandler",
    "CommandName",
    "DuplicateCommand",
    "InMemoryCommandRegistry",
    "Interceptor",
    "InterceptorChain",
    "InterceptorVetoed",
    "InvalidHandler",
    "InvalidName",
    "NotRegistered",
    "Outcome",
    "UnknownCommand",
    "constant_case",
    "deregister_command",
    "deregister_interceptor",
    "get_default_dispatcher",
    "handle",
    "is_constant_case",
    "register_command",
    "register_interceptor",
    "reset_default_dispatcher",
]
