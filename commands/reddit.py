"""Subreddit subscription commands."""

import logging

logger = logging.getLogger(__name__)

# subreddit -> feed mode
SUBSCRIPTIONS: dict[str, str] = {}


def subscribe(args):
    SUBSCRIPTIONS[args.subreddit.lower()] = args.mode
    logger.info(f"Subscribed to r/{args.subreddit} ({args.mode})")
    args.respond(f"📬 Subscribed to r/{args.subreddit} ({args.mode} posts).")


def unsubscribe(args):
    if SUBSCRIPTIONS.pop(args.subreddit.lower(), None) is None:
        args.respond(f"You are not subscribed to r/{args.subreddit}.")
        return
    args.respond(f"📭 Unsubscribed from r/{args.subreddit}.")


COMMANDS = [
    {
        "name": "subscribe",
        "aliases": ["sub"],
        "description": "Follow new posts from a subreddit",
        "category": "reddit",
        "arguments": [
            {"key": "subreddit", "type": "subreddit", "required": True, "description": "Subreddit to follow"},
            {
                "key": "mode",
                "type": "string",
                "choices": ["new", "hot", "top"],
                "default": "new",
                "description": "Which posts to follow",
            },
        ],
        "handler": subscribe,
    },
    {
        "name": "unsubscribe",
        "aliases": ["unsub"],
        "description": "Stop following a subreddit",
        "category": "reddit",
        "arguments": [
            {"key": "subreddit", "type": "subreddit", "required": True, "description": "Subreddit to stop following"},
        ],
        "handler": unsubscribe,
    },
]
