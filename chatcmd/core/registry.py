"""Command registration system."""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .command import Command, ResolvedCommand
from .loader import CommandLoader

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Maps every command name and alias to a single canonical Command."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        # Filed name -> canonical name
        self._aliases: dict[str, str] = {}
        # Canonical name -> filed names, canonical first
        self._names: dict[str, list[str]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._aliases

    def __len__(self) -> int:
        return len(self._aliases)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._aliases))

    def __repr__(self) -> str:
        return f"<CommandRegistry commands={len(self._commands)} names={len(self._aliases)}>"

    def register(self, spec_or_specs: Any) -> "CommandRegistry":
        """Register a single command or a list of commands."""
        if isinstance(spec_or_specs, (list, tuple)):
            for spec in spec_or_specs:
                self._register_single(spec)
        else:
            self._register_single(spec_or_specs)
        return self

    def _register_single(self, spec: Any) -> Command:
        command = Command.from_spec(spec)

        if command.name in self._names:
            logger.warning(f"Replacing existing command: {command.name}")
            self._remove_command(command.name)

        for name in command.names:
            owner = self._aliases.get(name)
            if owner is not None:
                logger.warning(f"Command name {name} taken over from {owner} by {command.name}")
                self._unfile(name)

        self._commands[command.name] = command
        self._names[command.name] = list(command.names)
        for name in command.names:
            self._aliases[name] = command.name

        logger.info(f"Registered command: {command.name} (aliases: {command.aliases})")
        return command

    def register_directory(self, directory: str | Path = "", recursive: bool = True) -> "CommandRegistry":
        """Register every command module found in a directory."""
        CommandLoader(self).load_directory(directory, recursive)
        return self

    def deregister(self, name: str, include_aliases: bool = True) -> "CommandRegistry":
        """
        Deregister a command.

        Args:
            name: Any registered name of the command
            include_aliases: If true, removes the owning command with all of its
                names, even when ``name`` is an alias. Otherwise only the exact
                name is removed.
        """
        canonical = self._aliases.get(name)
        if canonical is None:
            logger.debug(f"Cannot deregister unknown command: {name}")
            return self

        if include_aliases:
            self._remove_command(canonical)
        else:
            self._unfile(name)

        logger.info(f"Deregistered command: {name} (include aliases: {include_aliases})")
        return self

    def _remove_command(self, canonical: str) -> None:
        for name in self._names.pop(canonical, []):
            self._aliases.pop(name, None)
        self._commands.pop(canonical, None)

    def _unfile(self, name: str) -> None:
        canonical = self._aliases.pop(name)
        names = self._names[canonical]
        names.remove(name)
        if not names:
            del self._names[canonical]
            del self._commands[canonical]

    def clear(self) -> None:
        """Deregister every command."""
        self._commands.clear()
        self._aliases.clear()
        self._names.clear()

    def lookup(self, name: str) -> ResolvedCommand | None:
        canonical = self._aliases.get(name)
        if canonical is None:
            return None
        siblings = tuple(other for other in self._names[canonical] if other != name)
        return ResolvedCommand(name, self._commands[canonical], siblings)

    get = lookup

    def snapshot(self) -> dict[str, ResolvedCommand]:
        """Every registered name mapped to its resolved command."""
        return {name: self.lookup(name) for name in self._aliases}

    def commands(self) -> list[Command]:
        """Canonical commands, in registration order."""
        return list(self._commands.values())
