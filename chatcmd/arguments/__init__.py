"""Argument types for commands."""

from .argument_types import ArgumentDescriptor, ArgumentResult
from .duration import parse_duration
from .parsers import (
    ArgumentType,
    ArgumentTypeFactory,
    CommandArgumentType,
    CustomArgumentType,
    DurationArgumentType,
    GenericArgumentType,
    IntegerArgumentType,
    StringArgumentType,
    SubredditArgumentType,
    UserArgumentType,
)

__all__ = [
    "ArgumentDescriptor",
    "ArgumentResult",
    "ArgumentType",
    "ArgumentTypeFactory",
    "CommandArgumentType",
    "CustomArgumentType",
    "DurationArgumentType",
    "GenericArgumentType",
    "IntegerArgumentType",
    "StringArgumentType",
    "SubredditArgumentType",
    "UserArgumentType",
    "parse_duration",
]
