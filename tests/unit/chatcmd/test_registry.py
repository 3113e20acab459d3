"""Tests for the command registry and command records."""

from unittest.mock import MagicMock

import pytest

from chatcmd.core import Command, CommandRegistry, ResolvedCommand, command
from chatcmd.errors import ConfigurationError


class TestCommand:
    """Test Command class."""

    def test_command_creation(self):
        """Test creating a command."""
        handler = MagicMock()
        cmd = Command(
            name="ban",
            handler=handler,
            aliases=["b"],
            description="Ban a user",
            long_description="Bans a user for a while",
            arguments=[{"key": "user", "type": "user"}],
            category="moderation",
        )

        assert cmd.name == "ban"
        assert cmd.handler == handler
        assert cmd.aliases == ["b"]
        assert cmd.description == "Ban a user"
        assert cmd.long_description == "Bans a user for a while"
        assert [argument.key for argument in cmd.arguments] == ["user"]
        assert cmd.category == "moderation"
        assert cmd.names == ["ban", "b"]

    def test_command_defaults(self):
        """Test command default values."""
        cmd = Command(name="ping")

        assert cmd.handler is None
        assert cmd.aliases == []
        assert cmd.description == ""
        assert cmd.arguments == []
        assert cmd.check == ()
        assert cmd.permissionless is False
        assert cmd.category is None

    def test_aliases_deduplicated(self):
        """Test that repeated aliases and the canonical name are dropped."""
        assert Command(name="a", aliases=["b", "b", "a", "c"]).aliases == ["b", "c"]

    def test_permission_node(self):
        """Test permission node building."""
        assert Command(name="ban", category="moderation").permission == "commands.moderation.ban"
        assert Command(name="ping").permission == "commands.ping"

    def test_single_check_normalized(self):
        """Test that a single predicate becomes a tuple."""
        check = MagicMock(return_value=True)

        assert Command(name="a", check=check).check == (check,)

    def test_passes_checks(self):
        """Test that all predicates must accept."""
        accept = MagicMock(return_value=True)
        reject = MagicMock(return_value=False)

        assert Command(name="a", check=[accept, accept]).passes_checks({}) is True
        assert Command(name="a", check=[accept, reject]).passes_checks({}) is False

    def test_invalid_check(self):
        """Test that predicates must be callable."""
        with pytest.raises(ConfigurationError) as exc_info:
            Command(name="a", check=[lambda args: True, "nope"])

        assert exc_info.value.code == "INVALID_CHECK"

    def test_invalid_handler(self):
        """Test that the handler must be callable."""
        with pytest.raises(ConfigurationError) as exc_info:
            Command(name="a", handler="nope")

        assert exc_info.value.code == "INVALID_HANDLER"

    def test_name_with_whitespace(self):
        """Test that names cannot contain whitespace."""
        with pytest.raises(ConfigurationError) as exc_info:
            Command(name="two words")

        assert exc_info.value.code == "INVALID_COMMAND_NAME"

    def test_run_without_handler(self):
        """Test that a command without a handler does nothing."""
        assert Command(name="a").run({}) is None

    def test_from_spec_command_key(self):
        """Test that ``command`` works as the name key and ``run`` as the handler."""
        handler = MagicMock()
        cmd = Command.from_spec({"command": "ping", "run": handler})

        assert cmd.name == "ping"
        assert cmd.handler is handler

    def test_from_spec_decorated_function(self):
        """Test normalizing a decorated function."""

        @command(name="hello", aliases=["hi"])
        def hello(args):
            pass

        cmd = Command.from_spec(hello)

        assert cmd.name == "hello"
        assert cmd.aliases == ["hi"]
        assert cmd.handler is hello

    def test_from_spec_passes_commands_through(self):
        """Test that Command instances are returned as is."""
        cmd = Command(name="a")

        assert Command.from_spec(cmd) is cmd

    def test_from_spec_invalid(self):
        """Test that unsupported specs are rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            Command.from_spec(42)

        assert exc_info.value.code == "INVALID_COMMAND_SPEC"

    def test_from_spec_long_description_camel_case(self):
        """Test that ``longDescription`` fills the long description."""
        cmd = Command.from_spec({"name": "ban", "longDescription": "Bans a user for a while"})

        assert cmd.long_description == "Bans a user for a while"

    def test_from_spec_unknown_key(self):
        """Test that misspelled command keys are rejected instead of dropped."""
        with pytest.raises(ConfigurationError) as exc_info:
            Command.from_spec({"name": "ban", "alias": ["b"]})

        assert exc_info.value.code == "UNKNOWN_COMMAND_FIELD"


class TestCommandRegistry:
    """Test CommandRegistry class."""

    def test_register_and_lookup_every_name(self, registry):
        """Test that every name resolves to the canonical command."""
        registry.register({"name": "a", "aliases": ["b", "c"]})

        for name in ("a", "b", "c"):
            resolved = registry.lookup(name)
            assert isinstance(resolved, ResolvedCommand)
            assert resolved.name == name
            assert resolved.original_name == "a"

    def test_lookup_shares_one_command(self, registry):
        """Test that aliases share a single command record."""
        registry.register({"name": "a", "aliases": ["b"]})

        assert registry.lookup("a").command is registry.lookup("b").command

    def test_lookup_aliases_are_siblings(self, registry):
        """Test that a resolved command lists the other names."""
        registry.register({"name": "a", "aliases": ["b", "c"]})

        assert registry.lookup("a").aliases == ("b", "c")
        assert registry.lookup("b").aliases == ("a", "c")
        assert registry.lookup("b").is_alias is True
        assert registry.lookup("a").is_alias is False

    def test_resolved_command_exposes_fields(self, registry):
        """Test that command fields are readable through the resolved command."""
        registry.register({"name": "a", "description": "Does a", "category": "test"})

        resolved = registry.lookup("a")

        assert resolved.description == "Does a"
        assert resolved.permission == "commands.test.a"

    def test_lookup_unknown(self, registry):
        """Test that unknown names resolve to None."""
        assert registry.lookup("missing") is None
        assert registry.get("missing") is None

    def test_register_returns_registry(self, registry):
        """Test that register can be chained."""
        assert registry.register({"name": "a"}) is registry

    def test_register_list(self, registry):
        """Test registering several commands at once."""
        registry.register([{"name": "a"}, {"name": "b", "aliases": ["c"]}])

        assert set(registry) == {"a", "b", "c"}
        assert [cmd.name for cmd in registry.commands()] == ["a", "b"]

    def test_register_missing_name(self, registry):
        """Test that a command without a name is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            registry.register({"aliases": ["x"]})

        assert exc_info.value.code == "MISSING_COMMAND_NAME"
        assert len(registry) == 0

    def test_invalid_spec_is_not_filed(self, registry):
        """Test that a broken argument spec aborts registration of that command."""
        with pytest.raises(ConfigurationError):
            registry.register({"name": "x", "aliases": ["y"], "arguments": [{"key": "a", "type": "nope"}]})

        assert "x" not in registry
        assert "y" not in registry

    def test_deregister_with_aliases(self, registry):
        """Test that deregistering removes the command and all aliases."""
        registry.register({"name": "a", "aliases": ["b", "c"]})

        registry.deregister("a")

        for name in ("a", "b", "c"):
            assert registry.lookup(name) is None
        assert registry.commands() == []

    def test_deregister_through_alias(self, registry):
        """Test that deregistering an alias removes the whole command."""
        registry.register({"name": "a", "aliases": ["b"]})

        registry.deregister("b")

        assert len(registry) == 0

    def test_deregister_exact_alias(self, registry):
        """Test removing only one alias."""
        registry.register({"name": "a", "aliases": ["b", "c"]})

        registry.deregister("b", include_aliases=False)

        assert "b" not in registry
        assert registry.lookup("a").aliases == ("c",)
        assert registry.lookup("c").original_name == "a"

    def test_deregister_exact_canonical_name(self, registry):
        """Test that removing only the canonical name keeps the aliases."""
        registry.register({"name": "a", "aliases": ["b", "c"]})

        registry.deregister("a", include_aliases=False)

        assert "a" not in registry
        assert registry.lookup("b").original_name == "a"
        assert len(registry.commands()) == 1

        registry.deregister("b", include_aliases=False)
        registry.deregister("c", include_aliases=False)

        assert registry.commands() == []

    def test_deregister_unknown(self, registry):
        """Test that deregistering an unknown name does nothing."""
        registry.register({"name": "a"})

        assert registry.deregister("missing") is registry
        assert "a" in registry

    def test_clear(self, registry):
        """Test that clear removes everything."""
        registry.register([{"name": "a", "aliases": ["b"]}, {"name": "c"}])

        registry.clear()

        assert len(registry) == 0
        assert registry.commands() == []
        assert registry.lookup("a") is None

    def test_alias_takeover(self, registry):
        """Test that a later command takes over a name already in use."""
        registry.register({"name": "a", "aliases": ["x"]})
        registry.register({"name": "b", "aliases": ["x"]})

        assert registry.lookup("x").original_name == "b"
        assert registry.lookup("a").aliases == ()

    def test_reregister_replaces_command(self, registry):
        """Test that registering a name again replaces the old command."""
        registry.register({"name": "a", "aliases": ["b"]})
        registry.register({"name": "a", "aliases": ["c"]})

        assert "b" not in registry
        assert registry.lookup("c").original_name == "a"
        assert len(registry.commands()) == 1

    def test_snapshot(self, registry):
        """Test the name to command snapshot."""
        registry.register({"name": "a", "aliases": ["b"]})

        snapshot = registry.snapshot()

        assert set(snapshot) == {"a", "b"}
        assert snapshot["b"].name == "b"
        assert snapshot["b"].original_name == "a"

    def test_container_protocol(self, registry):
        """Test len, iteration and membership."""
        registry.register({"name": "a", "aliases": ["b"]})

        assert len(registry) == 2
        assert list(registry) == ["a", "b"]
        assert "b" in registry
        assert "z" not in registry

    def test_register_decorated_function(self, registry):
        """Test registering a decorated function directly."""

        @command(description="Say hi")
        def hello(args):
            pass

        registry.register(hello)

        assert registry.lookup("hello").handler is hello

    def test_register_directory(self, registry, tmp_path):
        """Test that register_directory loads command modules."""
        (tmp_path / "ping.py").write_text('COMMAND = {"name": "ping"}\n')

        assert registry.register_directory(tmp_path) is registry
        assert "ping" in registry
