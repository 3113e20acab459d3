from .command import Command, ResolvedCommand
from .decorators import command
from .dispatcher import CommandArguments, CommandDispatcher
from .loader import CommandLoader
from .registry import CommandRegistry
from .tokenizer import Tokens, split_arguments, split_command, tokenize

__all__ = [
    "Command",
    "ResolvedCommand",
    "command",
    "CommandArguments",
    "CommandDispatcher",
    "CommandLoader",
    "CommandRegistry",
    "Tokens",
    "split_arguments",
    "split_command",
    "tokenize",
]
