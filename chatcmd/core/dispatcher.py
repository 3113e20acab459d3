import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from ..errors import CommandError
from .command import ResolvedCommand
from .registry import CommandRegistry
from .tokenizer import tokenize
from .utils import snake_case

logger = logging.getLogger(__name__)


class CommandArguments(dict):
    """Arguments assembled for one command run.

    Holds the caller's context fields and every argument value, readable as
    ``args["ban-reason"]``, ``args["ban_reason"]`` or ``args.ban_reason``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.resolved_command: Optional[ResolvedCommand] = None
        self.errors: List[Exception] = []
        self.success = True
        self.invoked = False
        self.result: Any = None

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name) from None

    def respond(self, content: str) -> None:
        """Send a message through the context's ``send`` callback, if any."""
        send = self.get("send")
        if send is None:
            logger.debug(f"No send callback, dropping response: {content}")
            return
        send(content)


class CommandDispatcher:
    def __init__(self, registry: Optional[CommandRegistry] = None):
        self.registry = registry if registry is not None else CommandRegistry()

    def parse(
        self, line: str, context: Optional[Mapping[str, Any]] = None, **extra: Any
    ) -> Optional[CommandArguments]:
        """
        Parse a line and run its command if every check passes.

        Returns the assembled arguments, or None when the line is empty or
        does not start with a registered command.
        """
        tokens = tokenize(line, self.registry)
        if not tokens.command:
            return None

        command = self.registry.lookup(tokens.command)
        if command is None:
            logger.debug(f"Ignoring unknown command: {tokens.command}")
            return None

        passed: Dict[str, Any] = {**(context or {}), **extra}

        args = CommandArguments(passed)
        args.resolved_command = command

        logger.debug(f"Command called: {command.name} ({command.original_name}) with {tokens.arguments}")

        self._check_permission(command, args)
        self._validate_arguments(command, tokens.arguments, args, passed)

        if args.success:
            self._run(command, args)

        return args

    def _check_permission(self, command: ResolvedCommand, args: CommandArguments) -> None:
        test_permission = args.get("test_permission") or args.get("testPermission")
        if not test_permission or command.permissionless:
            return

        permission = command.permission
        if not test_permission(permission):
            logger.info(f"Permission denied for {command.name}: {permission}")
            args.success = False
            args.errors.append(CommandError(f"Missing permission: {permission}", "NO_PERMISSION"))
            self._notify(args, "no_permission", permission)

    def _validate_arguments(
        self,
        command: ResolvedCommand,
        tokens: List[str],
        args: CommandArguments,
        passed: Dict[str, Any],
    ) -> None:
        for index, argument in enumerate(command.arguments):
            token = tokens[index] if index < len(tokens) else None
            result = argument.get(token, passed, self.registry)

            args[snake_case(argument.key)] = result.value
            args[argument.key] = result.value

            if not result.success:
                args.success = False
                args.errors.append(result.error)

    def _run(self, command: ResolvedCommand, args: CommandArguments) -> None:
        try:
            if not command.passes_checks(args):
                logger.debug(f"Checks rejected command {command.name}")
                args.success = False
                args.errors.append(CommandError(f"Checks failed for {command.name}", "CHECK_FAILED"))
                return

            args.result = command.run(args)
            args.invoked = True

        except Exception as e:
            logger.error(f"Error executing command {command.name}: {e}")
            args.success = False
            args.errors.append(e)
            self._notify(args, "command_failed", command.original_name)

    def _notify(self, args: CommandArguments, code: str, *params: Any) -> None:
        localize = args.get("localize")
        send = args.get("send")
        if localize and send:
            message = localize(code, *params)
            if message:
                send(message)
