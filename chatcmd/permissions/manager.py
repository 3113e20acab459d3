import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class PermissionManager:
    """Grants permission nodes, with wildcard patterns, to a single caller.

    ``has_permission`` matches the ``test_permission(node)`` signature the
    dispatcher expects, so a manager can be passed straight into a parse
    context.
    """

    def __init__(self, granted: Iterable[str] | None = None) -> None:
        self._granted: set[str] = set(granted or [])

    def __call__(self, permission_node: str) -> bool:
        return self.has_permission(permission_node)

    @property
    def granted(self) -> list[str]:
        return sorted(self._granted)

    def grant(self, permission_pattern: str) -> bool:
        """Grant a node or pattern. Returns False if it was already granted."""
        if permission_pattern in self._granted:
            return False
        self._granted.add(permission_pattern)
        logger.info(f"Granted permission: {permission_pattern}")
        return True

    def revoke(self, permission_pattern: str) -> bool:
        """Revoke a node or pattern exactly as it was granted."""
        if permission_pattern not in self._granted:
            logger.warning(f"Cannot revoke permission that was not granted: {permission_pattern}")
            return False
        self._granted.discard(permission_pattern)
        logger.info(f"Revoked permission: {permission_pattern}")
        return True

    def has_permission(self, permission_node: str) -> bool:
        allowed = any(self._match_wildcard_pattern(pattern, permission_node) for pattern in self._granted)
        logger.debug(f"Permission result: {'HAS' if allowed else 'DENIED'} permission '{permission_node}'")
        return allowed

    def _match_wildcard_pattern(self, pattern: str, permission_node: str) -> bool:
        """Check if a permission node matches a wildcard pattern."""
        if "*" not in pattern:
            return pattern == permission_node

        if pattern == "*":
            return True
        elif pattern.endswith(".*"):
            # "commands.*" matches "commands.ban" and "commands.moderation.ban"
            prefix = pattern[:-2]
            return permission_node.startswith(prefix + ".")
        elif pattern.startswith("*."):
            # "*.ban" matches "commands.moderation.ban"
            suffix = pattern[2:]
            return permission_node.endswith("." + suffix)
        else:
            return pattern == permission_node
