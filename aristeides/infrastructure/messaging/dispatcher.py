from __future__ import annotations

import asyncio
import inspect
from typing import Any, Optional

from aristeides.core.config import BusSettings, get_settings
from aristeides.core.logging import log
from aristeides.domain.errors import InterceptorVetoed, UnknownCommand
from aristeides.domain.interfaces.command_handler import BusHandle, CommandHandler, Interceptor
from aristeides.domain.outcome import Outcome
from aristeides.infrastructure.messaging.command_registry import InMemoryCommandRegistry
from aristeides.infrastructure.messaging.interceptor_chain import InterceptorChain


class CommandDispatcher:
    """In-memory command bus: a handler registry, an interceptor chain and ``handle``.

    ``handle`` raises when the command cannot be attempted (unknown command,
    failing interceptor) and returns an ``Outcome`` once it was attempted
    (vetoed, succeeded, or failed inside the handler).
    """

    def __init__(
        self,
        registry: Optional[InMemoryCommandRegistry] = None,
        interceptors: Optional[InterceptorChain] = None,
        settings: Optional[BusSettings] = None,
    ) -> None:
        self._registry = registry if registry is not None else InMemoryCommandRegistry()
        self._interceptors = interceptors if interceptors is not None else InterceptorChain()
        self._settings = settings or get_settings()
        if self._settings.INTERCEPT_NESTED_COMMANDS:
            self._bus_handle = BusHandle(handle=self.handle)
        else:
            self._bus_handle = BusHandle(handle=self._handle_without_interceptors)

    @property
    def registry(self) -> InMemoryCommandRegistry:
        return self._registry

    @property
    def interceptors(self) -> InterceptorChain:
        return self._interceptors

    def register_command(self, name: str, handler: CommandHandler) -> None:
        self._registry.register(name, handler)
        log.debug("command_registered", command=name)

    def deregister_command(self, name: str) -> None:
        self._registry.deregister(name)
        log.debug("command_deregistered", command=name)

    def register_interceptor(self, interceptor: Interceptor) -> None:
        self._interceptors.register(interceptor)
        log.debug("interceptor_registered", interceptor=_describe(interceptor), chain_length=len(self._interceptors))

    def deregister_interceptor(self, interceptor: Interceptor) -> bool:
        removed = self._interceptors.deregister(interceptor)
        if removed:
            log.debug("interceptor_deregistered", interceptor=_describe(interceptor), chain_length=len(self._interceptors))
        return removed

    async def handle(
        self,
        command: str,
        context: Optional[dict[str, Any]] = None,
        payload: Optional[dict[str, Any]] = None,
    ) -> Outcome:
        return await self._dispatch(command, context, payload, intercept=True)

    async def _handle_without_interceptors(
        self,
        command: str,
        context: Optional[dict[str, Any]] = None,
        payload: Optional[dict[str, Any]] = None,
    ) -> Outcome:
        return await self._dispatch(command, context, payload, intercept=False)

    async def _dispatch(
        self,
        command: str,
        context: Optional[dict[str, Any]],
        payload: Optional[dict[str, Any]],
        *,
        intercept: bool,
    ) -> Outcome:
        context = {} if context is None else context
        payload = {} if payload is None else payload

        handler = self._registry.lookup(command)
        if handler is None:
            log.debug("unknown_command", command=command)
            raise UnknownCommand(f"Unknown command: {command}", command=command)

        log.debug("command_handling", command=command, intercepted=intercept)
        if intercept:
            try:
                should_continue = await self._interceptors.run(command, context, payload)
            except Exception as exc:
                log.error("interceptor_failed", command=command, error=repr(exc))
                raise
            if not should_continue:
                log.info("command_vetoed", command=command)
                return Outcome(result=None, error=InterceptorVetoed(command=command))

        outcome = await self._invoke_on_next_tick(handler, context, payload)
        if outcome.error is not None:
            log.warning("command_failed", command=command, error=repr(outcome.error))
        return outcome

    async def _invoke_on_next_tick(
        self,
        handler: CommandHandler,
        context: dict[str, Any],
        payload: dict[str, Any],
    ) -> Outcome:
        # The handler starts in its own task on a later loop iteration, never on the caller's stack.
        task = asyncio.get_running_loop().create_task(self._run_handler(handler, context, payload))
        return await task

    async def _run_handler(
        self,
        handler: CommandHandler,
        context: dict[str, Any],
        payload: dict[str, Any],
    ) -> Outcome:
        try:
            result = handler.handle(context, payload, self._bus_handle)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            return Outcome(result=None, error=exc)
        return Outcome(result=result, error=None)


def _describe(interceptor: Interceptor) -> str:
    return getattr(interceptor, "__qualname__", None) or repr(interceptor)
