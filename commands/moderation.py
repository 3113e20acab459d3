"""Moderation commands: ban and unban users."""

import logging
import time
from typing import Any

from chatcmd import ArgumentDescriptor, command
from chatcmd.arguments.duration import format_duration

logger = logging.getLogger(__name__)

# username -> ban record
BANS: dict[str, dict[str, Any]] = {}


@command(
    name="ban",
    description="Ban a user",
    long_description="Bans a user, optionally for a limited time and with a reason. "
    "Quote durations that contain spaces, e.g. `ban u/someone \"2 days\" spam`.",
    aliases=["b"],
    category="moderation",
    arguments=[
        ArgumentDescriptor("user", "user", "User to ban", required=True),
        ArgumentDescriptor("duration", "duration", "How long the ban lasts"),
        ArgumentDescriptor("reason", "string", "Why the user is banned", default="No reason given", max_length=201),
    ],
    check=lambda args: args.duration is None or args.duration > 0,
)
def ban(args):
    expires = None if args.duration is None else time.time() + args.duration / 1000
    BANS[args.user.lower()] = {"user": args.user, "reason": args.reason, "expires": expires}

    logger.info(f"Banned {args.user} {format_duration(args.duration)}: {args.reason}")
    args.respond(f"🔨 Banned u/{args.user} {format_duration(args.duration)}. Reason: {args.reason}")


@command(
    name="unban",
    description="Lift a ban",
    aliases=["pardon"],
    category="moderation",
    arguments=[ArgumentDescriptor("user", "user", "User to unban", required=True)],
)
def unban(args):
    if BANS.pop(args.user.lower(), None) is None:
        args.respond(f"u/{args.user} is not banned.")
        return

    logger.info(f"Unbanned {args.user}")
    args.respond(f"✅ Unbanned u/{args.user}.")
