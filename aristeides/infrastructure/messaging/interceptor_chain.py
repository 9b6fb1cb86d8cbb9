from __future__ import annotations

import inspect
from typing import Any, Iterable, Iterator

from aristeides.domain.interfaces.command_handler import Interceptor


class InterceptorChain:
    """Ordered interceptors run before every command handler.

    Registration order is execution order. The same interceptor may be
    registered more than once and then runs once per registration.
    """

    def __init__(self, interceptors: Iterable[Interceptor] | None = None) -> None:
        self._interceptors: list[Interceptor] = []
        for interceptor in interceptors or []:
            self.register(interceptor)

    def register(self, interceptor: Interceptor) -> None:
        self._interceptors.append(interceptor)

    def deregister(self, interceptor: Interceptor) -> bool:
        for index, registered in enumerate(self._interceptors):
            if registered is interceptor:
                del self._interceptors[index]
                return True
        return False

    def snapshot(self) -> tuple[Interceptor, ...]:
        return tuple(self._interceptors)

    async def run(self, command: str, context: dict[str, Any], payload: dict[str, Any]) -> bool:
        """Run interceptors one at a time; False as soon as one vetoes.

        Only an exact ``False`` vetoes. Exceptions propagate untouched.
        """
        for interceptor in self.snapshot():
            should_continue = interceptor(command, context, payload)
            if inspect.isawaitable(should_continue):
                should_continue = await should_continue
            if should_continue is False:
                return False
        return True

    def __contains__(self, interceptor: object) -> bool:
        return any(registered is interceptor for registered in self._interceptors)

    def __iter__(self) -> Iterator[Interceptor]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._interceptors)
