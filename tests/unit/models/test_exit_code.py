"""ExitCode IntEnum のテスト。"""

from enum import IntEnum

from procfixture.models.exit_code import ExitCode


class TestExitCodeValues:
    """ExitCode IntEnum の値を検証する。"""

    def test_success_is_zero(self) -> None:
        assert ExitCode.SUCCESS == 0

    def test_execution_error_is_one(self) -> None:
        assert ExitCode.EXECUTION_ERROR == 1

    def test_input_error_matches_click_usage_error(self) -> None:
        """Click の UsageError と同じ 2 である。"""
        assert ExitCode.INPUT_ERROR == 2

    def test_has_three_members(self) -> None:
        assert len(ExitCode) == 3


class TestExitCodeIsIntEnum:
    """ExitCode が IntEnum であることを検証する。"""

    def test_is_int_enum_subclass(self) -> None:
        assert issubclass(ExitCode, IntEnum)

    def test_can_be_used_as_process_exit_code(self) -> None:
        """int() で変換可能である（sys.exit() に渡せる）。"""
        assert int(ExitCode.INPUT_ERROR) == 2
