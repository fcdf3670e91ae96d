"""Tests for the format_result dispatcher and OutputSettings."""

import json

from contactctl.output.formatters import OutputSettings, format_result
from contactctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        settings = OutputSettings(json_output=True)
        data = json.loads(format_result(_ok("verify_contact", email="a@b.c"), settings=settings))
        assert data["ok"] is True
        assert data["data"]["email"] == "a@b.c"

    def test_json_beats_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        data = json.loads(format_result(_err(msg="Bad"), settings=settings))
        assert data["error"]["message"] == "Bad"

    def test_quiet_success(self) -> None:
        output = format_result(_ok("verify_contact"), settings=OutputSettings(quiet=True))
        assert output == "OK: verify_contact"

    def test_default_is_rich(self) -> None:
        output = format_result(_err("verify_contact", "Bad"))
        assert "ERROR" in output
        assert "Bad" in output
        assert not output.startswith("{")
