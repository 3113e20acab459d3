"""Text command parsing and dispatch for chat bots.

The classes are the main interface. The functions below are shortcuts that
all operate on one shared default registry, for hosts that only need one.
"""

from pathlib import Path
from typing import Any, Mapping, Optional

from .arguments import ArgumentDescriptor, ArgumentResult, ArgumentType, ArgumentTypeFactory, parse_duration
from .core import (
    Command,
    CommandArguments,
    CommandDispatcher,
    CommandLoader,
    CommandRegistry,
    ResolvedCommand,
    command,
    tokenize,
)
from .errors import CommandError, ConfigurationError, InvalidArgumentError
from .localization import MessageCatalog
from .permissions import PermissionManager

__version__ = "1.0.0"

_default_dispatcher = CommandDispatcher()


def get_registry() -> CommandRegistry:
    """Get the default command registry."""
    return _default_dispatcher.registry


def register(spec_or_specs: Any) -> CommandRegistry:
    return _default_dispatcher.registry.register(spec_or_specs)


def register_directory(directory: str | Path = "", recursive: bool = True) -> CommandRegistry:
    return _default_dispatcher.registry.register_directory(directory, recursive)


def deregister(name: str, include_aliases: bool = True) -> CommandRegistry:
    return _default_dispatcher.registry.deregister(name, include_aliases)


def clear() -> None:
    _default_dispatcher.registry.clear()


def parse(line: str, context: Optional[Mapping[str, Any]] = None, **extra: Any) -> Optional[CommandArguments]:
    return _default_dispatcher.parse(line, context, **extra)


__all__ = [
    "ArgumentDescriptor",
    "ArgumentResult",
    "ArgumentType",
    "ArgumentTypeFactory",
    "Command",
    "CommandArguments",
    "CommandDispatcher",
    "CommandError",
    "CommandLoader",
    "CommandRegistry",
    "ConfigurationError",
    "InvalidArgumentError",
    "MessageCatalog",
    "PermissionManager",
    "ResolvedCommand",
    "clear",
    "command",
    "deregister",
    "get_registry",
    "parse",
    "parse_duration",
    "register",
    "register_directory",
    "tokenize",
]
