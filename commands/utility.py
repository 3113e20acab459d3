"""General purpose commands."""

import logging
import random

from chatcmd import ArgumentDescriptor, InvalidArgumentError, command
from chatcmd.arguments.duration import YEAR, format_duration

logger = logging.getLogger(__name__)


def usage(command) -> str:
    """Usage line, with <required> and [optional] arguments."""
    parts = [command.name]
    for argument in command.arguments:
        descriptor = argument.descriptor
        parts.append(f"<{descriptor.key}>" if descriptor.required else f"[{descriptor.key}]")
    return " ".join(parts)


def parse_options(token, context, registry):
    options = [option.strip() for option in str(token).strip('"').split(",") if option.strip()]
    if len(options) < 2:
        raise InvalidArgumentError("custom", "choose_argument_too_few", value=token)
    return options


@command(
    name="echo",
    description="Repeat a message",
    aliases=["say"],
    permissionless=True,
    arguments=[ArgumentDescriptor("message", "string", "Text to repeat", required=True, max_length=2001)],
)
def echo(args):
    args.respond(args.message)


@command(
    name="roll",
    description="Roll dice",
    aliases=["dice"],
    category="fun",
    permissionless=True,
    arguments=[
        ArgumentDescriptor("sides", "integer", "Sides per die", default=6, min=1, max=1001),
        ArgumentDescriptor("count", "integer", "Number of dice", default=1, min=0, max=101),
    ],
)
def roll(args):
    rolls = [random.randint(1, args.sides) for _ in range(args.count)]
    args.respond(f"🎲 {', '.join(map(str, rolls))} (total {sum(rolls)})")
    return rolls


@command(
    name="choose",
    description="Pick one of several comma separated options",
    aliases=["pick"],
    category="fun",
    permissionless=True,
    arguments=[
        ArgumentDescriptor("options", "custom", "Options separated by commas", required=True, parse=parse_options),
    ],
)
def choose(args):
    choice = random.choice(args.options)
    args.respond(f"🤔 I choose **{choice}**")
    return choice


@command(
    name="remind",
    description="Set a reminder",
    long_description="Reminds you after a delay of up to a year, e.g. `remind 2h check the oven`.",
    aliases=["reminder", "remindme"],
    arguments=[
        ArgumentDescriptor("delay", "duration", "When to remind you", required=True),
        ArgumentDescriptor("message", "string", "What to remind you of", default="Reminder!"),
    ],
    check=[
        lambda args: args.delay > 0,
        lambda args: args.delay <= YEAR,
    ],
)
def remind(args):
    logger.info(f"Reminder scheduled {format_duration(args.delay)}: {args.message}")
    args.respond(f"⏰ I will remind you {format_duration(args.delay)}: {args.message}")


@command(
    name="help",
    description="Show command information",
    aliases=["commands", "h"],
    permissionless=True,
    arguments=[ArgumentDescriptor("command", "command", "Command to describe")],
)
def help_command(args):
    target = args.command
    if target is not None:
        lines = [f"**{target.original_name}**: {target.description or 'No description'}"]
        if target.long_description:
            lines.append(target.long_description)
        lines.append(f"Usage: `{usage(target.command)}`")
        if target.command.aliases:
            lines.append(f"Aliases: {', '.join(target.command.aliases)}")
        args.respond("\n".join(lines))
        return

    registry = args.get("registry")
    if registry is None:
        args.respond("No commands available.")
        return

    lines = ["📚 Commands:"]
    for cmd in registry.commands():
        lines.append(f"`{usage(cmd)}` - {cmd.description or 'No description'}")
    args.respond("\n".join(lines))
