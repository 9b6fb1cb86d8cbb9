from __future__ import annotations


class CommandBusError(Exception):
    """
    Base exception for everything the command bus raises on its own.

    Carries a stable ``code`` so callers can branch without parsing
    messages, and the ``command`` name the error concerns, when known.
    """

    code: str = "COMMAND_BUS_ERROR"

    def __init__(self, message: str, *, command: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.command = command

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class InvalidName(CommandBusError):
    """Raised at registration when the command name is not in CONSTANT_CASE."""

    code = "INVALID_NAME"


class DuplicateCommand(CommandBusError):
    """
    Raised when a command name already has a handler.

    A command maps to exactly one handler; the existing mapping is left untouched.
    """

    code = "DUPLICATE_COMMAND"


class InvalidHandler(CommandBusError):
    """Raised when the handler is missing or exposes no callable ``handle``."""

    code = "INVALID_HANDLER"


class NotRegistered(CommandBusError):
    code = "NOT_REGISTERED"


class UnknownCommand(CommandBusError):
    """
    Raised by dispatch when no handler is registered for the command.

    This is a precondition failure: the command was never attempted, so it
    is raised to the caller instead of being returned inside an ``Outcome``.
    """

    code = "UNKNOWN_COMMAND"


class InterceptorVetoed(CommandBusError):
    """
    Placed in ``Outcome.error`` when an interceptor returned ``False``.

    Never raised by the dispatcher itself.
    """

    code = "INTERCEPTOR_VETOED"

    def __init__(self, message: str = "Interceptor canceled command execution", *, command: str | None = None) -> None:
        super().__init__(message, command=command)
