from __future__ import annotations

from typing import Dict, Optional

from aristeides.domain.errors import DuplicateCommand, InvalidHandler, InvalidName, NotRegistered
from aristeides.domain.interfaces.command_handler import CommandHandler
from aristeides.domain.value_objects.command_name import CommandName


class InMemoryCommandRegistry:
    """Maps command names to handlers. Holds references only; callers own the handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> None:
        if not isinstance(name, str):
            raise InvalidName(f"Invalid command name: {name!r}", command=repr(name))
        if name in self._handlers:
            raise DuplicateCommand(f"Command already registered: {name}", command=name)
        if handler is None:
            raise InvalidHandler(f"Invalid handler: {name}", command=name)
        if not callable(getattr(handler, "handle", None)):
            raise InvalidHandler(f"Invalid handler function: {name}", command=name)
        command_name = CommandName(name)
        self._handlers[command_name.value] = handler

    def deregister(self, name: str) -> None:
        if not isinstance(name, str) or name not in self._handlers:
            raise NotRegistered(f"Command not registered: {name}", command=name)
        del self._handlers[name]

    def lookup(self, name: str) -> Optional[CommandHandler]:
        if not isinstance(name, str):
            return None
        return self._handlers.get(name)

    def names(self) -> list[str]:
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)
