"""Tests for the Rich renderers."""

from elapsed.output.renderers import render_quiet, render_result
from elapsed.services.result import ServiceError, ServiceResult
from elapsed.services.since import SinceService

ORDERING = "'from' date should be less or equal to 'to' date"


def _since_result() -> ServiceResult:
    return SinceService().since("2020-01-30", "2020-03-01")


class TestRenderSince:
    def test_plain(self) -> None:
        assert render_result(_since_result()) == "1 month 1 day (30 days)"

    def test_verbose_lists_breakdown(self) -> None:
        output = render_result(_since_result(), verbose=True)
        lines = output.splitlines()
        assert lines[0] == "1 month 1 day (30 days)"
        assert "  from: 2020-01-30" in lines
        assert "  to: 2020-03-01" in lines
        assert "  format: default" in lines
        assert "  months: 1" in lines
        assert "  total_days: 30" in lines

    def test_no_ansi_without_color(self) -> None:
        assert "\x1b[" not in render_result(_since_result(), verbose=True)


class TestRenderError:
    def _error(self) -> ServiceResult:
        return SinceService().since("2021-01-01", "2020-01-01")

    def test_error_tag_is_literal(self) -> None:
        assert render_result(self._error()) == f"[ERROR] {ORDERING}"

    def test_color_styles_error_tag(self) -> None:
        output = render_result(self._error(), color=True)
        assert "\x1b[" in output
        assert "[ERROR]" in output
        assert ORDERING in output

    def test_verbose_shows_code_and_input(self) -> None:
        result = SinceService().since("2020-13-01", "2021-01-01")
        output = render_result(result, verbose=True)
        assert "  code: INVALID_DATE" in output
        assert "  input: 2020-13-01" in output

    def test_missing_error_payload(self) -> None:
        result = ServiceResult(ok=False, op="since")
        assert render_result(result) == "[ERROR] Unknown error"


class TestRenderGeneric:
    def test_unknown_op_renders_key_values(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"alpha": 1})
        assert render_result(result) == "  alpha: 1"


class TestRenderQuiet:
    def test_success(self) -> None:
        assert render_quiet(_since_result()) == "1 month 1 day (30 days)"

    def test_success_without_text(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="other")) == ""

    def test_error(self) -> None:
        error = ServiceError(code="INVALID_ORDER", message=ORDERING)
        result = ServiceResult(ok=False, op="since", error=error)
        assert render_quiet(result) == f"[ERROR] {ORDERING}"
