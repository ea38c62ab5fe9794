"""Tests for the command tokenizer."""

import pytest

from gtalkbot.core.commands.parser import HelpRequested, NoCommand, ParsedCommand, tokenize


class TestTokenize:
    """Tests for tokenize function."""

    def test_command_with_argument(self):
        """Split on the separator into command and argument."""
        print("\n INPUT: 'md5:hello world'")
        result = tokenize("md5:hello world", ":")
        print(f" OUTPUT: {result}")
        assert result == ParsedCommand(name="md5", argument="hello world")

    @pytest.mark.parametrize("body", ["help", " ? ", "HELP", "\tHeLp\n", "?"])
    def test_help_words(self, body):
        """help and ? are recognized regardless of case and padding."""
        assert tokenize(body, ":") == HelpRequested()

    @pytest.mark.parametrize("separator", [":", "=", "->", " "])
    def test_help_ignores_separator(self, separator):
        assert tokenize("help", separator) == HelpRequested()
        assert tokenize(" ? ", separator) == HelpRequested()

    def test_help_with_argument_is_a_command(self):
        """Only the whole body counts as a help request."""
        result = tokenize("help:me", ":")
        assert result == ParsedCommand(name="help", argument="me")

    def test_none_body(self):
        assert tokenize(None, ":") == NoCommand()

    def test_missing_separator(self):
        """A bare word is not actionable."""
        print("\n INPUT: 'hello world'")
        result = tokenize("hello world", ":")
        print(f" OUTPUT: {result}")
        assert result == NoCommand()

    def test_empty_body(self):
        assert tokenize("", ":") == NoCommand()

    def test_command_is_lowercased_and_trimmed(self):
        result = tokenize("  MD5 :abc", ":")
        assert result == ParsedCommand(name="md5", argument="abc")

    def test_argument_preserves_case_and_interior_whitespace(self):
        result = tokenize("t:  Hello   World  ", ":")
        assert result == ParsedCommand(name="t", argument="Hello   World")

    def test_splits_on_first_separator_only(self):
        result = tokenize("b:http://example.com", ":")
        assert result == ParsedCommand(name="b", argument="http://example.com")

    def test_multi_character_separator(self):
        result = tokenize("w => London", "=>")
        assert result == ParsedCommand(name="w", argument="London")

    def test_empty_argument(self):
        assert tokenize("s:", ":") == ParsedCommand(name="s", argument="")

    def test_non_ascii_whitespace_is_kept(self):
        """Only ASCII whitespace is trimmed."""
        result = tokenize("t:\u00a0caf\u00e9\u00a0", ":")
        assert result == ParsedCommand(name="t", argument="\u00a0caf\u00e9\u00a0")
