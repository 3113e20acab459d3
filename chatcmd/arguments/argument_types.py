"""Command argument descriptors and results."""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from ..errors import ConfigurationError, InvalidArgumentError

# camelCase spec keys -> descriptor fields
SPEC_KEY_ALIASES = {
    "minLength": "min_length",
    "maxLength": "max_length",
    "followAliases": "follow_aliases",
    "allowAlias": "follow_aliases",
}


@dataclass(frozen=True)
class ArgumentDescriptor:
    """Declarative definition of one positional command argument.

    ``default`` of ``None`` means the argument has no default. Constraint
    fields only apply to the argument types that understand them.
    """

    key: str
    type: str = "generic"
    description: str = ""
    required: bool = False
    default: Any = None
    choices: tuple[Any, ...] | None = None

    # string, user, subreddit
    min_length: int | None = None
    max_length: int | None = None
    matches: str | re.Pattern | None = None

    # integer
    min: int | None = None
    max: int | None = None

    # command
    follow_aliases: bool = True

    # custom
    parse: Callable[..., Any] | None = field(default=None, compare=False)

    def __post_init__(self):
        if not isinstance(self.key, str) or not self.key:
            raise ConfigurationError("Arguments must have keys.", "MISSING_ARGUMENT_KEY")
        if self.choices is not None and not isinstance(self.choices, tuple):
            object.__setattr__(self, "choices", tuple(self.choices))

    @classmethod
    def from_spec(cls, spec: Mapping[str, Any]) -> "ArgumentDescriptor":
        """
        Build a descriptor from a plain dict.

        Keys may use the field names or their camelCase spellings
        (``minLength``, ``maxLength``, ``followAliases``/``allowAlias``).
        Any other key is a configuration error.
        """
        known = {f.name for f in fields(cls)}
        options: dict[str, Any] = {}

        for name, value in spec.items():
            field_name = SPEC_KEY_ALIASES.get(name, name)
            if field_name not in known:
                raise ConfigurationError(
                    f"Unknown field {name!r} in argument {spec.get('key')!r}", "UNKNOWN_ARGUMENT_FIELD"
                )
            if field_name in options:
                raise ConfigurationError(
                    f"Field {field_name!r} given twice in argument {spec.get('key')!r}", "DUPLICATE_ARGUMENT_FIELD"
                )
            options[field_name] = value

        return cls(options.pop("key", None), **options)

    @property
    def has_default(self) -> bool:
        return self.default is not None


@dataclass
class ArgumentResult:
    """Outcome of validating a single argument token."""

    success: bool
    value: Any = None
    error: InvalidArgumentError | None = None

    @classmethod
    def ok(cls, value: Any) -> "ArgumentResult":
        return cls(True, value)

    @classmethod
    def failed(cls, error: InvalidArgumentError) -> "ArgumentResult":
        return cls(False, None, error)
