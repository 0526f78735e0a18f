"""ArgumentReporter のテスト。"""

from __future__ import annotations

import pytest

from procfixture.fixtures._arguments import (
    ARGUMENTS_HEADER,
    NO_ARGUMENTS_MESSAGE,
    format_argument_report,
    report_arguments,
)


# =============================================================================
# format_argument_report
# =============================================================================


class TestFormatArgumentReportEmpty:
    """引数なし。"""

    def test_header_then_no_arguments_line(self) -> None:
        assert format_argument_report([]) == [
            "Provided arguments:",
            "No arguments found",
        ]

    def test_constants(self) -> None:
        assert ARGUMENTS_HEADER == "Provided arguments:"
        assert NO_ARGUMENTS_MESSAGE == "No arguments found"


class TestFormatArgumentReportWithArgs:
    """引数あり → 1 始まりの番号付きで入力順に列挙。"""

    def test_single_argument(self) -> None:
        assert format_argument_report(["cmd-10"]) == [
            "Provided arguments:",
            "1 => cmd-10",
        ]

    def test_preserves_input_order(self) -> None:
        lines = format_argument_report(["b", "a", "c"])
        assert lines[1:] == ["1 => b", "2 => a", "3 => c"]

    def test_line_count_is_header_plus_n(self) -> None:
        args = [f"arg{i}" for i in range(12)]
        lines = format_argument_report(args)
        assert len(lines) == 13
        assert lines[-1] == "12 => arg11"

    @pytest.mark.parametrize(
        "arg",
        ["single arg", "", "--version", "-x", "  padded  ", "ユニコード"],
    )
    def test_arguments_reported_verbatim(self, arg: str) -> None:
        """検証・トリム・再クォートせずそのまま出力する。"""
        assert format_argument_report([arg])[1] == f"1 => {arg}"

    def test_accepts_tuple(self) -> None:
        assert format_argument_report(("x",)) == ["Provided arguments:", "1 => x"]


# =============================================================================
# report_arguments
# =============================================================================


class TestReportArguments:
    """stdout への出力。"""

    def test_no_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        report_arguments([])
        captured = capsys.readouterr()
        assert captured.out == "Provided arguments:\nNo arguments found\n"
        assert captured.err == ""

    def test_with_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        report_arguments(["node", "--version"])
        captured = capsys.readouterr()
        assert captured.out.splitlines() == [
            "Provided arguments:",
            "1 => node",
            "2 => --version",
        ]
