"""Argument types using strategy pattern."""

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from ..errors import ConfigurationError, InvalidArgumentError
from .argument_types import ArgumentDescriptor, ArgumentResult
from .duration import parse_duration

if TYPE_CHECKING:
    from ..core.registry import CommandRegistry

logger = logging.getLogger(__name__)

USER_PREFIX = re.compile(r"^u/", re.IGNORECASE)
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
SUBREDDIT_PREFIX = re.compile(r"^r/", re.IGNORECASE)
SUBREDDIT_PATTERN = re.compile(r"[A-Za-z0-9]\w*", re.ASCII)
INTEGER_PATTERN = re.compile(r"\s*([+-]?\d+)", re.ASCII)

HANDLE_MIN_LENGTH = 3
HANDLE_MAX_LENGTH = 20


class ArgumentType(ABC):
    """Base class for argument types.

    Subclasses only implement ``parse``; ``get`` applies the required,
    default and choices rules the same way for every type.
    """

    type_name = "generic"

    def __init__(self, descriptor: ArgumentDescriptor) -> None:
        self.descriptor = descriptor

    @property
    def key(self) -> str:
        return self.descriptor.key

    def __repr__(self) -> str:
        return f"<{type(self).__name__} key={self.key!r}>"

    @abstractmethod
    def parse(self, token: Any, context: Mapping[str, Any], registry: "CommandRegistry | None") -> Any:
        """Convert a present token into a value, raising InvalidArgumentError on failure."""
        pass

    def fail(self, code: str, value: Any) -> None:
        raise InvalidArgumentError(self.type_name, code, self.descriptor, value)

    def get(
        self,
        token: Any,
        context: Mapping[str, Any] | None = None,
        registry: "CommandRegistry | None" = None,
    ) -> ArgumentResult:
        """Validate a token and resolve it against required, default and choices."""
        context = context if context is not None else {}
        descriptor = self.descriptor

        try:
            value = None if token is None else self.parse(token, context, registry)
        except InvalidArgumentError as error:
            if not descriptor.has_default:
                return self._reject(error, context)
            logger.debug(f"Argument {self.key} fell back to its default after {error.code}")
            value = descriptor.default

        if value is None:
            if descriptor.required:
                return self._reject(
                    InvalidArgumentError(self.type_name, "argument_required", descriptor, token), context
                )
            if descriptor.has_default:
                value = descriptor.default

        if descriptor.choices is not None and value not in descriptor.choices:
            return self._reject(
                InvalidArgumentError(self.type_name, "argument_unavailable_choice", descriptor, value), context
            )

        return ArgumentResult.ok(value)

    def _reject(self, error: InvalidArgumentError, context: Mapping[str, Any]) -> ArgumentResult:
        logger.debug(f"Argument {self.key} rejected: {error.code} ({error.value!r})")
        self.report(error, context)
        return ArgumentResult.failed(error)

    def report(self, error: InvalidArgumentError, context: Mapping[str, Any]) -> None:
        """Send the localized failure message, if the context can localize and send."""
        localize = context.get("localize")
        send = context.get("send")
        if not (localize and send):
            return

        message = localize(error.code.lower(), self.descriptor, error.value)
        if message is None:
            message = localize(
                "argument_invalid",
                self.descriptor,
                error.value,
                localize(f"argument_type_{self.type_name}"),
            )
        if message:
            send(message)


class GenericArgumentType(ArgumentType):
    """Returns the token unchanged."""

    def parse(self, token, context, registry):
        return token


class StringArgumentType(ArgumentType):
    """Text with an optional pattern and exclusive length bounds."""

    type_name = "string"

    def __init__(self, descriptor: ArgumentDescriptor) -> None:
        super().__init__(descriptor)
        matches = descriptor.matches if descriptor.matches is not None else ".*"
        try:
            self.pattern = matches if isinstance(matches, re.Pattern) else re.compile(matches)
        except re.error as e:
            raise ConfigurationError(
                f"Argument {descriptor.key} has an invalid pattern: {e}", "INVALID_ARGUMENT_PATTERN"
            ) from e

    def parse(self, token, context, registry):
        value = str(token)
        descriptor = self.descriptor

        if not self.pattern.search(value):
            self.fail("string_argument_regexp_fail", value)
        if descriptor.max_length is not None and len(value) >= descriptor.max_length:
            self.fail("string_argument_too_long", value)
        if descriptor.min_length is not None and len(value) <= descriptor.min_length:
            self.fail("string_argument_too_short", value)

        return value


class UserArgumentType(StringArgumentType):
    """A username, optionally written as ``u/name``."""

    type_name = "user"

    def parse(self, token, context, registry):
        name = USER_PREFIX.sub("", super().parse(token, context, registry), count=1)

        if not USERNAME_PATTERN.fullmatch(name):
            self.fail("user_argument_invalid", token)
        if len(name) < HANDLE_MIN_LENGTH:
            self.fail("user_argument_too_short", token)
        if len(name) > HANDLE_MAX_LENGTH:
            self.fail("user_argument_too_long", token)

        return name


class SubredditArgumentType(StringArgumentType):
    """A subreddit name, optionally written as ``r/name``."""

    type_name = "subreddit"

    def parse(self, token, context, registry):
        name = SUBREDDIT_PREFIX.sub("", super().parse(token, context, registry), count=1)

        if not SUBREDDIT_PATTERN.fullmatch(name):
            self.fail("subreddit_argument_invalid", token)
        if len(name) < HANDLE_MIN_LENGTH:
            self.fail("subreddit_argument_too_short", token)
        if len(name) > HANDLE_MAX_LENGTH:
            self.fail("subreddit_argument_too_long", token)

        return name


class IntegerArgumentType(ArgumentType):
    """Base 10 integer with exclusive bounds. Trailing garbage is ignored."""

    type_name = "integer"

    def parse(self, token, context, registry):
        if isinstance(token, int) and not isinstance(token, bool):
            value = token
        else:
            match = INTEGER_PATTERN.match(str(token))
            if not match:
                self.fail("integer_argument_invalid", token)
            value = int(match.group(1))

        descriptor = self.descriptor
        if descriptor.max is not None and value >= descriptor.max:
            self.fail("integer_argument_too_high", token)
        if descriptor.min is not None and value <= descriptor.min:
            self.fail("integer_argument_too_low", token)

        return value


class DurationArgumentType(ArgumentType):
    """Duration expression converted to milliseconds."""

    type_name = "duration"

    def parse(self, token, context, registry):
        value = parse_duration(token)
        if value is None:
            self.fail("duration_argument_invalid", token)
        return value


class CommandArgumentType(ArgumentType):
    """Name or alias of a registered command."""

    type_name = "command"

    def parse(self, token, context, registry):
        command = registry.lookup(str(token)) if registry is not None else None
        if command is None:
            self.fail("command_argument_nonexistent", token)
        if not self.descriptor.follow_aliases and command.is_alias:
            self.fail("command_argument_not_original", token)
        return command


class CustomArgumentType(ArgumentType):
    """Delegates to the descriptor's ``parse`` callable."""

    type_name = "custom"

    def __init__(self, descriptor: ArgumentDescriptor) -> None:
        if not callable(descriptor.parse):
            raise ConfigurationError(
                f"Custom argument {descriptor.key} needs a parse function.", "MISSING_CUSTOM_PARSER"
            )
        super().__init__(descriptor)

    def parse(self, token, context, registry):
        try:
            return self.descriptor.parse(token, context, registry)
        except InvalidArgumentError as error:
            if error.descriptor is None:
                error.descriptor = self.descriptor
            raise
        except ValueError:
            self.fail("custom_argument_invalid", token)


class ArgumentTypeFactory:
    """Factory for creating argument types from specifications."""

    _types: dict[str, type[ArgumentType]] = {
        "generic": GenericArgumentType,
        "string": StringArgumentType,
        "user": UserArgumentType,
        "subreddit": SubredditArgumentType,
        "integer": IntegerArgumentType,
        "duration": DurationArgumentType,
        "command": CommandArgumentType,
        "custom": CustomArgumentType,
    }

    @classmethod
    def type_names(cls) -> list[str]:
        return list(cls._types)

    @classmethod
    def get_type(cls, type_name: str) -> type[ArgumentType]:
        """Get the argument type class for a type tag."""
        arg_type = cls._types.get(str(type_name).lower())
        if arg_type is None:
            raise ConfigurationError(f"Unknown argument type: {type_name}", "UNKNOWN_ARGUMENT_TYPE")
        return arg_type

    @classmethod
    def create(cls, spec: ArgumentType | ArgumentDescriptor | Mapping[str, Any]) -> ArgumentType:
        """Create the argument type for a descriptor or a plain dict spec."""
        if isinstance(spec, ArgumentType):
            return spec
        if isinstance(spec, ArgumentDescriptor):
            descriptor = spec
        elif isinstance(spec, Mapping):
            descriptor = ArgumentDescriptor.from_spec(spec)
        else:
            raise ConfigurationError(f"Invalid argument specification: {spec!r}", "INVALID_ARGUMENT_SPEC")

        return cls.get_type(descriptor.type)(descriptor)

    @classmethod
    def create_all(cls, specs: Iterable[Any] | None) -> list[ArgumentType]:
        """Create argument types for a whole command, enforcing unique keys."""
        arguments = []
        seen = set()
        for spec in specs or []:
            argument = cls.create(spec)
            if argument.key in seen:
                raise ConfigurationError(f"Duplicate argument key: {argument.key}", "DUPLICATE_ARGUMENT_KEY")
            seen.add(argument.key)
            arguments.append(argument)
        return arguments
