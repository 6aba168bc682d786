# SPDX-License-Identifier: MIT
"""Tests for the version commands."""

from __future__ import annotations

import json
import sys

import pytest
from click.testing import CliRunner

from pm_cli.main import cli


class TestParseCommand:
    """Tests for pm parse."""

    def test_parse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1.0.0-rc.1+build.5"])

        assert result.exit_code == 0
        assert "major:      1" in result.output
        assert "prerelease: rc.1" in result.output
        assert "build:      build.5" in result.output

    def test_parse_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "--json", "2.1.0-beta.11"])

        assert result.exit_code == 0
        fields = json.loads(result.output)
        assert fields == {
            "major": 2,
            "minor": 1,
            "patch": 0,
            "prerelease": ["beta", "11"],
            "build": None,
            "canonical": "2.1.0-beta.11",
        }

    def test_parse_malformed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "1.2.x"])

        assert result.exit_code == 1
        assert "Malformed version string" in result.output
        assert "Traceback" not in result.output


class TestCheckCommand:
    """Tests for pm check."""

    def test_all_valid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.0.0", "1.2.3-", "2.0.0+b"])

        assert result.exit_code == 0
        assert "3 version(s) valid" in result.output

    def test_reports_each_malformed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check", "1.2", "1.0.0", "1.2.-3"])

        assert result.exit_code == 1
        assert "'1.2'" in result.output
        assert "'1.2.-3'" in result.output

    def test_field_beyond_int_conversion_limit(self, cli_runner: CliRunner) -> None:
        if not getattr(sys, "get_int_max_str_digits", lambda: 0)():
            pytest.skip("interpreter has no int conversion limit")
        result = cli_runner.invoke(cli, ["check", "1.0." + "9" * 5000])

        assert result.exit_code == 1
        assert "Malformed version string" in result.output
        assert "Unexpected error" not in result.output

    def test_verbose(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "check", "1.0.0"])

        assert result.exit_code == 0
        assert "1.0.0: ok" in result.output


class TestCompareCommand:
    """Tests for pm compare."""

    def test_less(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0-beta.2", "1.0.0-beta.11"])
        assert result.exit_code == 0
        assert result.output.strip() == "<"

    def test_greater(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0", "1.0.0-rc.1"])
        assert result.output.strip() == ">"

    def test_build_metadata(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0+build1", "1.0.0+build2"])
        assert result.output.strip() == "="

        result = cli_runner.invoke(cli, ["compare", "--strict", "1.0.0+build1", "1.0.0+build2"])
        assert result.output.strip() == "~"

        result = cli_runner.invoke(cli, ["compare", "--strict", "1.0.0+b", "1.0.0+b"])
        assert result.output.strip() == "="

    def test_malformed(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["compare", "1.0.0", ""])
        assert result.exit_code == 1


class TestSortCommand:
    """Tests for pm sort."""

    def test_sort(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["sort", "1.0.0", "1.0.0-beta.11", "1.0.0-alpha", "1.0.0-beta.2", "0.9.0"]
        )

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "0.9.0",
            "1.0.0-alpha",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0",
        ]

    def test_sort_reverse(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort", "-r", "1.0.0-1", "1.0.0-alpha"])
        assert result.output.splitlines() == ["1.0.0-alpha", "1.0.0-1"]

    def test_sort_requires_arguments(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["sort"])
        assert result.exit_code == 2


class TestAdjacencyCommands:
    """Tests for pm next and pm prev."""

    def test_next(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["next", "1.2.3"])
        assert result.output.strip() == "1.2.4"

    def test_prev(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["prev", "1.2.3"])
        assert result.output.strip() == "1.2.2"

    def test_prev_rolls_over(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["prev", "1.1.0"])
        assert result.output.strip() == f"1.0.{sys.maxsize}"

    def test_prev_of_zero(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["prev", "0.0.0"])
        assert result.exit_code == 1
        assert "no predecessor" in result.output
