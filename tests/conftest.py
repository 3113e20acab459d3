"""Pytest configuration and shared fixtures."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from chatcmd import CommandDispatcher, CommandRegistry, MessageCatalog

# Disable logging during tests
logging.disable(logging.CRITICAL)

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def registry():
    """Empty command registry."""
    return CommandRegistry()


@pytest.fixture
def dispatcher(registry):
    """Dispatcher bound to the registry fixture."""
    return CommandDispatcher(registry)


@pytest.fixture
def mock_send():
    """Mock message send callback."""
    return MagicMock()


@pytest.fixture
def mock_localize():
    """Mock localize function that echoes the message code."""
    return MagicMock(side_effect=lambda code, *params: f"<{code}>")


@pytest.fixture
def context(mock_send, mock_localize):
    """Parse context with localization and a send callback."""
    return {"localize": mock_localize, "send": mock_send}


@pytest.fixture
def catalog():
    """Message catalog with the default messages."""
    return MessageCatalog()


@pytest.fixture
def commands_dir():
    """Directory holding the bundled example commands."""
    return PROJECT_ROOT / "commands"
