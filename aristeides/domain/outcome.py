from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from aristeides.domain.errors import InterceptorVetoed


@dataclass(frozen=True)
class Outcome:
    """Result of a dispatched command: exactly one of ``result``/``error`` is meaningful."""

    result: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def vetoed(self) -> bool:
        return isinstance(self.error, InterceptorVetoed)

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.result
