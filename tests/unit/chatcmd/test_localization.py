"""Tests for the message catalog."""

import json

import pytest

from chatcmd import ArgumentDescriptor, ArgumentTypeFactory, MessageCatalog
from chatcmd.localization import DEFAULT_MESSAGES


class TestMessageCatalog:
    """Test MessageCatalog."""

    def test_every_argument_type_has_a_name(self):
        """Test that each argument type has a localized name."""
        for type_name in ArgumentTypeFactory.type_names():
            assert f"argument_type_{type_name}" in DEFAULT_MESSAGES

    @pytest.mark.parametrize(
        "code",
        ["string_argument_regexp_fail", "command_argument_nonexistent", "command_argument_not_original"],
    )
    def test_argument_failure_codes_have_messages(self, catalog, code):
        """Test that the string and command failure codes have default messages."""
        descriptor = ArgumentDescriptor("command", "command", matches=r"^\w+$")

        assert catalog(code, descriptor, "b") is not None

    def test_localize_with_descriptor(self, catalog):
        """Test formatting a template with a descriptor and a value."""
        descriptor = ArgumentDescriptor("count", "integer", max=10)

        assert catalog("integer_argument_too_high", descriptor, 12) == "The `count` argument must be less than 10."

    def test_localize_argument_invalid(self, catalog):
        """Test the generic failure message."""
        descriptor = ArgumentDescriptor("delay", "duration")
        type_name = catalog("argument_type_duration")

        message = catalog("argument_invalid", descriptor, "soon", type_name)

        assert message == "The `delay` argument must be a duration like `1 week` or `3d`, but got `soon`."

    def test_code_is_case_insensitive(self, catalog):
        """Test that codes are matched regardless of case."""
        assert catalog("NO_PERMISSION", "commands.ban") == "You don't have the required permission: `commands.ban`"
        assert "COMMAND_FAILED" in catalog

    def test_unknown_code(self, catalog):
        """Test that unknown codes return None."""
        assert catalog("nothing_here") is None

    def test_missing_parameters(self, catalog):
        """Test that a template that cannot be formatted is returned raw."""
        assert catalog("no_permission") == DEFAULT_MESSAGES["no_permission"]

    def test_overrides(self):
        """Test that custom messages replace the defaults."""
        catalog = MessageCatalog({"No_Permission": "Nope: {0}"})

        assert catalog("no_permission", "x") == "Nope: x"
        assert catalog("argument_type_string") == "text"

    def test_without_defaults(self):
        """Test a catalog with only custom messages."""
        catalog = MessageCatalog({"hello": "Hi"}, use_defaults=False)

        assert catalog("hello") == "Hi"
        assert catalog("no_permission") is None

    def test_from_file(self, tmp_path):
        """Test loading overrides from a JSON file."""
        path = tmp_path / "messages.json"
        path.write_text(json.dumps({"command_failed": "Oops: {0}"}), encoding="utf-8")

        catalog = MessageCatalog.from_file(path)

        assert catalog("command_failed", "ban") == "Oops: ban"
        assert "argument_required" in catalog

    def test_from_file_rejects_non_objects(self, tmp_path):
        """Test that a JSON file must hold an object."""
        path = tmp_path / "messages.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError):
            MessageCatalog.from_file(path)
