import importlib.util
import inspect
import logging
import re
import sys
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Any, Dict, List

from ..errors import ConfigurationError
from .command import Command

if TYPE_CHECKING:
    from .registry import CommandRegistry

logger = logging.getLogger(__name__)

MODULE_NAMESPACE = "chatcmd_commands"


class CommandLoader:
    """Imports command modules from a directory and registers their commands.

    A module contributes its ``COMMAND`` attribute, its ``COMMANDS`` list and
    every function decorated with ``@command``.
    """

    def __init__(self, registry: "CommandRegistry") -> None:
        self.registry = registry
        self.loaded_modules: Dict[str, List[str]] = {}

    def discover_modules(self, directory: str | Path, recursive: bool = True) -> List[Path]:
        path = Path(directory).resolve()
        if not path.is_dir():
            raise ConfigurationError(f"Command directory does not exist: {path}", "COMMAND_DIRECTORY_NOT_FOUND")

        pattern = "**/*.py" if recursive else "*.py"
        discovered = [
            module_path
            for module_path in sorted(path.glob(pattern))
            if not any(part.startswith("_") for part in module_path.relative_to(path).parts)
        ]

        logger.info(f"Discovered {len(discovered)} command modules in {path}")
        return discovered

    def _module_name(self, module_path: Path, root: Path) -> str:
        parts = module_path.relative_to(root).with_suffix("").parts
        return ".".join([MODULE_NAMESPACE, *(re.sub(r"\W", "_", part) for part in parts)])

    def _load_module(self, module_path: Path, module_name: str) -> ModuleType:
        spec = importlib.util.spec_from_file_location(module_name, module_path)
        if not spec or not spec.loader:
            raise ConfigurationError(f"Cannot import command module {module_path}", "COMMAND_MODULE_LOAD_FAILED")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            del sys.modules[module_name]
            raise ConfigurationError(
                f"Failed to load command module {module_path}: {e}", "COMMAND_MODULE_LOAD_FAILED"
            ) from e
        return module

    def _extract_specs(self, module: ModuleType) -> List[Any]:
        specs: List[Any] = []

        if hasattr(module, "COMMAND"):
            specs.append(module.COMMAND)
        if hasattr(module, "COMMANDS"):
            specs.extend(module.COMMANDS)

        for _, obj in inspect.getmembers(module, inspect.isfunction):
            if hasattr(obj, "_command") and obj.__module__ == module.__name__:
                specs.append(obj)

        return specs

    def load_module(self, module_path: str | Path, root: str | Path | None = None) -> List[str]:
        """Load one command module and register its commands."""
        module_path = Path(module_path).resolve()
        root = Path(root).resolve() if root else module_path.parent

        module = self._load_module(module_path, self._module_name(module_path, root))
        specs = self._extract_specs(module)
        if not specs:
            logger.warning(f"No commands found in {module_path}")

        registered = []
        for spec in specs:
            command = Command.from_spec(spec)
            self.registry.register(command)
            registered.append(command.name)

        self.loaded_modules[module.__name__] = registered
        logger.debug(f"Loaded {module.__name__}: {registered}")
        return registered

    def load_directory(self, directory: str | Path = "", recursive: bool = True) -> List[str]:
        """Register every command module in a directory. Returns the canonical names."""
        root = Path(directory).resolve()
        registered = []
        for module_path in self.discover_modules(root, recursive):
            registered.extend(self.load_module(module_path, root))

        logger.info(f"Registered {len(registered)} commands from {root}")
        return registered
