import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, List, Optional

from ..arguments import ArgumentType, ArgumentTypeFactory
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r"\s")

SPEC_KEYS = frozenset(
    {
        "name",
        "command",
        "handler",
        "run",
        "aliases",
        "description",
        "long_description",
        "longDescription",
        "arguments",
        "check",
        "permissionless",
        "category",
    }
)


def _validate_name(name: Any) -> str:
    if not isinstance(name, str) or not name:
        raise ConfigurationError("Commands must have names.", "MISSING_COMMAND_NAME")
    if WHITESPACE.search(name):
        raise ConfigurationError(f"Command names cannot contain whitespace: {name!r}", "INVALID_COMMAND_NAME")
    return name


def _normalize_checks(check: Any) -> tuple[Callable[..., bool], ...]:
    if check is None:
        return ()
    checks = tuple(check) if isinstance(check, (list, tuple)) else (check,)
    for predicate in checks:
        if not callable(predicate):
            raise ConfigurationError(f"Command checks must be callable, got {predicate!r}", "INVALID_CHECK")
    return checks


class Command:
    def __init__(
        self,
        name: str,
        handler: Optional[Callable[..., Any]] = None,
        aliases: Optional[List[str]] = None,
        description: str = "",
        long_description: str = "",
        arguments: Optional[List[Any]] = None,
        check: Any = None,
        permissionless: bool = False,
        category: Optional[str] = None,
    ):
        if handler is not None and not callable(handler):
            raise ConfigurationError(f"Handler for {name!r} is not callable.", "INVALID_HANDLER")

        self.name = _validate_name(name)
        self.aliases = [
            _validate_name(alias) for alias in dict.fromkeys(aliases or []) if alias != self.name
        ]
        self.handler = handler
        self.description = description
        self.long_description = long_description
        self.arguments: List[ArgumentType] = ArgumentTypeFactory.create_all(arguments)
        self.check = _normalize_checks(check)
        self.permissionless = permissionless
        self.category = category

    def __repr__(self) -> str:
        return f"<Command {self.name!r} aliases={self.aliases!r}>"

    @property
    def names(self) -> list[str]:
        """Canonical name followed by every alias."""
        return [self.name, *self.aliases]

    @property
    def permission(self) -> str:
        """Permission node guarding this command."""
        category = f"{self.category}." if self.category else ""
        return f"commands.{category}{self.name}"

    def passes_checks(self, args: Any) -> bool:
        return all(check(args) for check in self.check)

    def run(self, args: Any) -> Any:
        if self.handler is None:
            logger.debug(f"Command {self.name} has no handler")
            return None
        return self.handler(args)

    @classmethod
    def from_spec(cls, spec: Any) -> "Command":
        """Normalize a dict, decorated function or Command into a Command.

        Dict specs may spell ``long_description`` as ``longDescription``.
        Any key a command does not understand is a configuration error.
        """
        if isinstance(spec, Command):
            return spec
        if callable(spec) and hasattr(spec, "_command"):
            spec = spec._command
        if not isinstance(spec, Mapping):
            raise ConfigurationError(f"Invalid command specification: {spec!r}", "INVALID_COMMAND_SPEC")

        unknown = set(spec) - SPEC_KEYS
        if unknown:
            raise ConfigurationError(
                f"Unknown fields in command {spec.get('name') or spec.get('command')!r}: {sorted(unknown)}",
                "UNKNOWN_COMMAND_FIELD",
            )

        return cls(
            name=spec.get("name") or spec.get("command"),
            handler=spec.get("handler") or spec.get("run"),
            aliases=spec.get("aliases"),
            description=spec.get("description", ""),
            long_description=spec.get("long_description") or spec.get("longDescription", ""),
            arguments=spec.get("arguments"),
            check=spec.get("check"),
            permissionless=bool(spec.get("permissionless", False)),
            category=spec.get("category"),
        )


@dataclass(frozen=True)
class ResolvedCommand:
    """A command as seen through one of its registered names.

    ``name`` is the exact key that was looked up, ``aliases`` are the other
    names currently registered for the same command. Every other attribute
    is read from the shared ``Command``.
    """

    name: str
    command: Command
    aliases: tuple[str, ...] = ()

    def __getattr__(self, attr: str) -> Any:
        if attr == "command":
            raise AttributeError(attr)
        return getattr(self.command, attr)

    @property
    def original_name(self) -> str:
        return self.command.name

    @property
    def is_alias(self) -> bool:
        return self.name != self.command.name

    def run(self, args: Any) -> Any:
        return self.command.run(args)
