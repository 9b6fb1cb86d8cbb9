from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from aristeides.domain.outcome import Outcome


@dataclass(frozen=True)
class BusHandle:
    """Restricted reference to the dispatcher handed to every handler.

    Only exposes ``handle`` so a handler can issue nested commands.
    """

    handle: Callable[..., Awaitable["Outcome"]]


@runtime_checkable
class CommandHandler(Protocol):
    """Port for command handlers; ``handle`` may be a plain or a coroutine method."""

    def handle(self, context: dict[str, Any], payload: dict[str, Any], bus: BusHandle) -> Any:
        ...


InterceptorResult = Union[Optional[bool], Awaitable[Optional[bool]]]

# Called with (command name, context, payload); returning exactly False vetoes the command.
Interceptor = Callable[[str, dict, dict], InterceptorResult]
