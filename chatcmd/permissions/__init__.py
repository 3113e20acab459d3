from .manager import PermissionManager

__all__ = ["PermissionManager"]
