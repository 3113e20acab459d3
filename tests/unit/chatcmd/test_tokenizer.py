"""Tests for input tokenization."""

from chatcmd.core import Tokens, split_arguments, split_command, tokenize


class TestSplitCommand:
    """Test split_command."""

    def test_command_and_remainder(self):
        """Test splitting off the command token."""
        assert split_command("ban u/spammer 1d") == ("ban", "u/spammer 1d")

    def test_surrounding_whitespace(self):
        """Test that surrounding whitespace is ignored."""
        assert split_command("   ping   ") == ("ping", "")

    def test_remainder_keeps_inner_whitespace(self):
        """Test that the remainder is left untouched."""
        assert split_command("echo a    b") == ("echo", "a    b")

    def test_empty_line(self):
        """Test that an empty line has no command token."""
        assert split_command("") == ("", "")
        assert split_command("   ") == ("", "")


class TestSplitArguments:
    """Test split_arguments."""

    def test_whitespace_separated(self):
        """Test plain whitespace splitting."""
        assert split_arguments("a  b\tc") == ["a", "b", "c"]

    def test_quoted_spans_stay_together(self):
        """Test that double quoted text is a single token."""
        assert split_arguments('a "b c" d') == ["a", '"b c"', "d"]

    def test_quotes_inside_token(self):
        """Test that a quoted span glued to other text joins that token."""
        assert split_arguments('x"y z"w next') == ['x"y z"w', "next"]

    def test_unterminated_quote(self):
        """Test that an unterminated quote runs to the end."""
        assert split_arguments('a "b c') == ["a", '"b c']

    def test_limit_keeps_rest(self):
        """Test that the last token holds the remaining text."""
        assert split_arguments("u/x 1d being   very rude", 3) == ["u/x", "1d", "being   very rude"]

    def test_limit_of_one(self):
        """Test that a single argument takes the whole text."""
        assert split_arguments("hello   there world", 1) == ["hello   there world"]

    def test_limit_larger_than_tokens(self):
        """Test that a generous limit does not invent tokens."""
        assert split_arguments("a b", 5) == ["a", "b"]

    def test_zero_limit_is_unlimited(self):
        """Test that a zero limit splits everything."""
        assert split_arguments("a b c", 0) == ["a", "b", "c"]

    def test_empty_text(self):
        """Test that empty text has no tokens."""
        assert split_arguments("") == []
        assert split_arguments("   ", 2) == []


class TestTokenize:
    """Test tokenize."""

    def test_without_registry(self):
        """Test that every argument is split without a registry."""
        assert tokenize("roll 6 2 extra") == Tokens("roll", ["6", "2", "extra"])

    def test_sized_to_command(self, registry):
        """Test that a known command's argument count bounds the split."""
        registry.register({"name": "say", "aliases": ["s"], "arguments": [{"key": "target"}, {"key": "text"}]})

        tokens = tokenize("s bob hello  there", registry)

        assert tokens.command == "s"
        assert tokens.arguments == ["bob", "hello  there"]

    def test_unknown_command(self, registry):
        """Test that unknown commands are split without a limit."""
        assert tokenize("nope a b", registry).arguments == ["a", "b"]
