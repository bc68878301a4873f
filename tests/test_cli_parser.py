"""Tests for CLI command parsing."""

import pytest

from cli.models import JoinCommand, ShellCommand, SplitCommand, VerifyCommand
from cli.parser import ParseError, parse_args, parse_command
from common.exceptions import ConfigError


class TestSplitParsing:

    def test_split_without_size(self):
        assert parse_command("split big.img out/big") == SplitCommand(
            source_path="big.img", base_path="out/big", chunk_size_mb=None
        )

    def test_split_with_size(self):
        cmd = parse_command("split big.img out/big 250")
        assert cmd.chunk_size_mb == 250

    def test_split_quoted_paths(self):
        cmd = parse_command("split 'my disk.img' \"out dir/disk\"")
        assert cmd.source_path == "my disk.img"
        assert cmd.base_path == "out dir/disk"

    def test_split_rejects_non_numeric_size(self):
        with pytest.raises(ConfigError, match="whole number"):
            parse_command("split big.img out/big huge")

    @pytest.mark.parametrize("line", ["split", "split big.img", "split a b 1 extra"])
    def test_split_arity(self, line):
        with pytest.raises(ParseError, match="split requires"):
            parse_command(line)


class TestJoinVerifyParsing:

    def test_join_default_output(self):
        assert parse_command("join out/big.split") == JoinCommand(manifest_path="out/big.split")

    def test_join_with_output(self):
        cmd = parse_command("join out/big.split restored.img")
        assert cmd.output_path == "restored.img"

    def test_join_arity(self):
        with pytest.raises(ParseError):
            parse_command("join a b c")

    def test_verify(self):
        assert parse_command("verify out/big.split") == VerifyCommand(manifest_path="out/big.split")

    @pytest.mark.parametrize("line", ["verify", "verify a b"])
    def test_verify_arity(self, line):
        with pytest.raises(ParseError):
            parse_command(line)


class TestCommandNames:

    @pytest.mark.parametrize("name", ["split", "SPLIT", "-split", "-Split"])
    def test_case_and_dash_forms(self, name):
        assert isinstance(parse_args([name, "a", "b"]), SplitCommand)

    def test_shell(self):
        assert parse_args(["shell"]) == ShellCommand()

    def test_shell_takes_no_arguments(self):
        with pytest.raises(ParseError):
            parse_args(["shell", "x"])

    def test_unknown_command(self):
        with pytest.raises(ParseError, match="Unknown command"):
            parse_args(["shred", "a"])

    def test_empty_args(self):
        with pytest.raises(ParseError):
            parse_args([])

    def test_blank_line(self):
        with pytest.raises(ParseError):
            parse_command("   ")

    def test_unbalanced_quotes(self):
        with pytest.raises(ParseError, match="Invalid syntax"):
            parse_command("split 'a b")
