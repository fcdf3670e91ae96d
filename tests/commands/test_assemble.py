"""Tests for the assemble CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from contactctl.cli import cli


class TestAssembleCommand:
    def test_json_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "assemble", "Richard", "Chuo", "test@example.com", "--middle", "Andrew"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "assemble_contact"
        assert data["data"]["middle_name"] == "Andrew"
        assert data["data"]["email_state"] == "unverified"

    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["assemble", "Richard", "Chuo", "test@example.com"])
        assert result.exit_code == 0
        assert "Richard Chuo" in result.output
        assert "(unverified)" in result.output

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "assemble", "Richard", "Chuo", "test@example.com"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: assemble_contact"

    def test_invalid_email_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["assemble", "Richard", "Chuo", "nope"])
        assert result.exit_code == 1
        assert "Contact initialization failed" in result.output
