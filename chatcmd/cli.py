import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

import typer

from config.settings import settings
from chatcmd.core import CommandArguments, CommandDispatcher, CommandRegistry
from chatcmd.localization import MessageCatalog
from chatcmd.permissions import PermissionManager

app = typer.Typer(
    name="chatcmd",
    help="Text command parser and dispatcher",
    add_completion=False,
)

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def build_dispatcher(directories: Optional[List[str]] = None) -> CommandDispatcher:
    """Create a dispatcher with every command found in the given directories."""
    registry = CommandRegistry()
    for directory in directories or settings.command_directories:
        if not Path(directory).is_dir():
            logger.warning(f"Command directory does not exist: {directory}")
            continue
        registry.register_directory(directory, settings.recursive_loading)
    return CommandDispatcher(registry)


def build_context(dispatcher: CommandDispatcher, enforce_permissions: Optional[bool] = None) -> dict[str, Any]:
    """Context passed to every parse: messages, output and permissions."""
    if settings.messages_file:
        localize = MessageCatalog.from_file(settings.messages_file)
    else:
        localize = MessageCatalog()

    context: dict[str, Any] = {
        "localize": localize,
        "send": typer.echo,
        "registry": dispatcher.registry,
    }

    if settings.enforce_permissions if enforce_permissions is None else enforce_permissions:
        context["test_permission"] = PermissionManager(settings.granted_permissions)

    return context


def strip_prefix(line: str, prefix: str) -> Optional[str]:
    """Remove the command prefix, or return None if the line does not have it."""
    line = line.strip()
    if not prefix:
        return line
    if not line.startswith(prefix):
        return None
    return line[len(prefix):]


def describe_arguments(args: CommandArguments) -> List[str]:
    command = args.resolved_command
    lines = [f"{command.name} -> {command.original_name} ({'ok' if args.success else 'failed'})"]
    for argument in command.arguments:
        lines.append(f"  {argument.key} = {args.get(argument.key)!r}")
    for error in args.errors:
        lines.append(f"  ! {getattr(error, 'code', type(error).__name__)}: {error}")
    return lines


@app.command()
def run(
    directory: Optional[List[str]] = typer.Option(None, "--directory", "-d", help="Command directory"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Command prefix"),
    enforce_permissions: Optional[bool] = typer.Option(
        None, "--enforce-permissions/--no-enforce-permissions", help="Check permission nodes"
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Set log level"),
) -> None:
    """Read lines from stdin and run every command found."""
    setup_logging(log_level or ("DEBUG" if settings.debug else settings.log_level))

    dispatcher = build_dispatcher(directory)
    context = build_context(dispatcher, enforce_permissions)
    prefix = settings.command_prefix if prefix is None else prefix

    logger.info(f"Listening for commands with {len(dispatcher.registry.commands())} commands loaded")

    for line in sys.stdin:
        content = strip_prefix(line, prefix)
        if content is None:
            continue
        dispatcher.parse(content, context)


@app.command("parse")
def parse_line(
    line: str = typer.Argument(help="Command line to parse"),
    directory: Optional[List[str]] = typer.Option(None, "--directory", "-d", help="Command directory"),
    enforce_permissions: Optional[bool] = typer.Option(
        None, "--enforce-permissions/--no-enforce-permissions", help="Check permission nodes"
    ),
) -> None:
    """Parse and run a single command line, then show what was parsed."""
    dispatcher = build_dispatcher(directory)
    args = dispatcher.parse(line, build_context(dispatcher, enforce_permissions))

    if args is None:
        typer.echo(f"Not a command: {line}")
        raise typer.Exit(code=1)

    for output in describe_arguments(args):
        typer.echo(output)

    if not args.success:
        raise typer.Exit(code=1)


@app.command("list")
def list_commands(
    directory: Optional[List[str]] = typer.Option(None, "--directory", "-d", help="Command directory"),
) -> None:
    """List the available commands."""
    dispatcher = build_dispatcher(directory)
    commands = dispatcher.registry.commands()

    if not commands:
        typer.echo("No commands available.")
        return

    typer.echo("📦 Available Commands:")
    for command in commands:
        aliases = f" ({', '.join(command.aliases)})" if command.aliases else ""
        typer.echo(f"  {command.name}{aliases} - {command.description or 'No description'}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
