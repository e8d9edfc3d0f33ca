"""Tests for the command line inspector."""

import pytest
from typer.testing import CliRunner

from curses_chstr.cli.app import create_app, parse_op
from curses_chstr.config import ChstrConfig, set_default_config
from curses_chstr.core.attrs import AttrMasks
from curses_chstr.errors import InvalidArgument

runner = CliRunner()


class TestParseOp:
    """Tests for edit operation parsing."""

    def test_str_op(self) -> None:
        assert parse_op("str:4:XY:3") == ("str", 4, "XY", 3)

    def test_default_rep(self) -> None:
        assert parse_op("ch:2:Q") == ("ch", 2, "Q", 1)

    def test_colon_in_text(self) -> None:
        assert parse_op("str:1:a:b") == ("str", 1, "a:b", 1)

    @pytest.mark.parametrize("spec", ["put:1:x", "str:x:y", "str:1"])
    def test_invalid(self, spec: str) -> None:
        with pytest.raises(InvalidArgument):
            parse_op(spec)


class TestCommands:
    """Tests for CLI commands."""

    def test_show_text(self) -> None:
        result = runner.invoke(create_app(), ["show", "hi", "--attr", "bold"])
        assert result.exit_code == 0
        assert "U+0068" in result.output
        assert "0x00200000" in result.output
        assert "len: 2" in result.output

    def test_show_size(self) -> None:
        result = runner.invoke(create_app(), ["show", "--size", "3"])
        assert result.exit_code == 0
        assert "len: 3  size: 3" in result.output

    def test_show_empty_fails(self) -> None:
        result = runner.invoke(create_app(), ["show"])
        assert result.exit_code == 1

    def test_edit_grows(self) -> None:
        result = runner.invoke(create_app(), ["edit", "abcde", "--op", "str:4:XY:3"])
        assert result.exit_code == 0
        assert "len: 9  size: 9" in result.output

    def test_edit_out_of_range(self) -> None:
        result = runner.invoke(create_app(), ["edit", "abcde", "--op", "ch:5:A:2"])
        assert result.exit_code == 1

    def test_pair_uses_configured_masks(self) -> None:
        set_default_config(ChstrConfig(masks=AttrMasks(attributes=0xFFF00000, color=0x000F0000)))
        result = runner.invoke(create_app(), ["show", "x", "--attr", "0x30000"])
        assert result.exit_code == 0
        row = next(line for line in result.output.splitlines() if "U+0078" in line)
        columns = [c.strip() for c in row.split("│") if c.strip()]
        assert columns[-1] == "3"

    def test_bad_log_level(self) -> None:
        result = runner.invoke(create_app(), ["--log-level", "chatty", "show", "x"])
        assert result.exit_code == 1
