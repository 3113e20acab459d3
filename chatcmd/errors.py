"""Exceptions raised by the command system."""

from typing import Any


class CommandError(Exception):
    """Base error for command registration and parsing."""

    def __init__(self, message: str, code: str = "COMMAND_ERROR") -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"


class ConfigurationError(CommandError):
    """A command or argument specification is malformed.

    Raised at registration time and never caught by the command system, so
    the registering code sees exactly which command could not be added.
    """


class InvalidArgumentError(CommandError):
    """An argument token failed validation.

    Raised by argument types while parsing and always captured by
    ``ArgumentType.get``, which turns it into a failed ``ArgumentResult``.
    """

    def __init__(self, arg_type: str, code: str, descriptor: Any = None, value: Any = None) -> None:
        key = getattr(descriptor, "key", None)
        super().__init__(
            f"Invalid {arg_type} argument{f' {key!r}' if key else ''}: {value!r} ({code.lower()})",
            code.upper(),
        )
        self.type = arg_type
        self.descriptor = descriptor
        self.value = value
