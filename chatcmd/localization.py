"""Default user-facing messages and a catalog usable as a ``localize`` function."""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

logger = logging.getLogger(__name__)

# Argument failures are formatted with (descriptor, value); "argument_invalid"
# also receives the localized "argument_type_*" name as {2}.
DEFAULT_MESSAGES: dict[str, str] = {
    "argument_invalid": "The `{0.key}` argument must be {2}, but got `{1}`.",
    "argument_required": "The `{0.key}` argument is required.",
    "argument_unavailable_choice": "`{1}` is not an option for `{0.key}`. Options: {0.choices}",
    "string_argument_regexp_fail": "The `{0.key}` argument is not in the expected format.",
    "string_argument_too_long": "The `{0.key}` argument must be shorter than {0.max_length} characters.",
    "string_argument_too_short": "The `{0.key}` argument must be longer than {0.min_length} characters.",
    "integer_argument_too_high": "The `{0.key}` argument must be less than {0.max}.",
    "integer_argument_too_low": "The `{0.key}` argument must be greater than {0.min}.",
    "user_argument_too_short": "Usernames are at least 3 characters long.",
    "user_argument_too_long": "Usernames are at most 20 characters long.",
    "subreddit_argument_too_short": "Subreddit names are at least 3 characters long.",
    "subreddit_argument_too_long": "Subreddit names are at most 20 characters long.",
    "command_argument_nonexistent": "There is no command named `{1}`.",
    "command_argument_not_original": "`{1}` is an alias. Use the full command name instead.",
    "argument_type_generic": "a value",
    "argument_type_string": "text",
    "argument_type_integer": "a whole number",
    "argument_type_duration": "a duration like `1 week` or `3d`",
    "argument_type_user": "a username like `u/example`",
    "argument_type_subreddit": "a subreddit like `r/example`",
    "argument_type_command": "a command name",
    "argument_type_custom": "a valid value",
    "no_permission": "You don't have the required permission: `{0}`",
    "command_failed": "Command failed: `{0}`",
}


class MessageCatalog:
    """Maps message codes to ``str.format`` templates.

    Instances are callable with the ``localize(code, *params)`` signature the
    dispatcher expects. Unknown codes return None so callers can fall back.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None, use_defaults: bool = True) -> None:
        self.messages: dict[str, str] = dict(DEFAULT_MESSAGES) if use_defaults else {}
        if messages:
            self.update(messages)

    def __call__(self, code: str, *params: Any) -> Optional[str]:
        return self.localize(code, *params)

    def __contains__(self, code: object) -> bool:
        return str(code).lower() in self.messages

    def update(self, messages: Mapping[str, str]) -> None:
        self.messages.update({str(code).lower(): template for code, template in messages.items()})

    def localize(self, code: str, *params: Any) -> Optional[str]:
        template = self.messages.get(str(code).lower())
        if template is None:
            return None

        try:
            return template.format(*params)
        except (IndexError, KeyError, AttributeError) as e:
            logger.warning(f"Could not format message {code}: {e}")
            return template

    @classmethod
    def from_file(cls, path: str | Path, use_defaults: bool = True) -> "MessageCatalog":
        """Load message overrides from a JSON object of code -> template."""
        with open(path, encoding="utf-8") as f:
            messages = json.load(f)

        if not isinstance(messages, dict):
            raise ValueError(f"Message file {path} must contain a JSON object")

        logger.info(f"Loaded {len(messages)} messages from {path}")
        return cls(messages, use_defaults=use_defaults)
