"""Command decorator for declaring commands on plain functions."""

from typing import Any, Callable, Optional


def command(
    name: Optional[str] = None,
    description: str = "",
    aliases: Optional[list[str]] = None,
    long_description: str = "",
    arguments: Optional[list[Any]] = None,
    check: Any = None,
    permissionless: bool = False,
    category: Optional[str] = None,
):
    """
    Declare a command handled by the decorated function.

    This stores the command specification on the function; nothing is
    registered until the function is passed to ``CommandRegistry.register``
    or found by the directory loader.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        func._command = {
            "name": name or func.__name__,
            "description": description,
            "long_description": long_description,
            "aliases": list(aliases or []),
            "arguments": list(arguments or []),
            "check": check,
            "permissionless": permissionless,
            "category": category,
            "handler": func,
        }
        return func

    return decorator
