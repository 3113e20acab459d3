"""Utility functions for the command system."""

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


def snake_case(key: str) -> str:
    """
    Convert an argument key into a snake_case identifier.

    Args:
        key: The key as written in the argument definition, e.g. ``ban-reason``
            or ``banReason``

    Returns:
        ``ban_reason`` for either example. Keys without any letters or digits
        are returned unchanged.
    """
    converted = _ACRONYM_BOUNDARY.sub(r"\1_\2", _CAMEL_BOUNDARY.sub(r"\1_\2", key))
    converted = _SEPARATORS.sub("_", converted).strip("_").lower()
    return converted or key
