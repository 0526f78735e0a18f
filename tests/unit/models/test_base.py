"""ProcfixtureBaseModel と CaseInsensitiveStrEnum のテスト。"""

import pytest
from pydantic import ValidationError

from procfixture.models._base import CaseInsensitiveStrEnum, ProcfixtureBaseModel
from procfixture.models.config import LogLevel, ShutdownSignal


class Color(CaseInsensitiveStrEnum):
    """テスト用の列挙型。"""

    RED = "Red"
    BLUE = "blue"


class SampleModel(ProcfixtureBaseModel):
    """テスト用のサブクラス。"""

    name: str
    color: Color = Color.RED


class TestProcfixtureBaseModel:
    """extra="forbid" と frozen=True の検証。"""

    def test_valid_fields_accepted(self) -> None:
        model = SampleModel(name="test", color=Color.BLUE)
        assert model.name == "test"
        assert model.color is Color.BLUE

    def test_extra_field_rejected(self) -> None:
        with pytest.raises(ValidationError, match="extra_forbidden"):
            SampleModel(name="test", unknown_field="x")  # type: ignore[call-arg]

    def test_field_assignment_rejected(self) -> None:
        model = SampleModel(name="test")
        with pytest.raises(ValidationError, match="frozen"):
            model.name = "changed"


class TestCaseInsensitiveLookup:
    """値の大文字小文字を区別しないメンバー検索。"""

    @pytest.mark.parametrize("raw", ["red", "RED", "Red", "rEd"])
    def test_any_case_finds_member(self, raw: str) -> None:
        assert Color(raw) is Color.RED

    def test_exact_value_lookup(self) -> None:
        assert Color("blue") is Color.BLUE

    def test_canonical_value_preserved(self) -> None:
        """変換後の値は定義時の綴りのまま。"""
        assert Color("RED").value == "Red"

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ValueError):
            Color("green")

    def test_non_string_raises(self) -> None:
        with pytest.raises(ValueError):
            Color(1)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("sigint", ShutdownSignal.SIGINT),
            ("SigTerm", ShutdownSignal.SIGTERM),
            ("INFO", LogLevel.INFO),
            ("Warning", LogLevel.WARNING),
        ],
    )
    def test_config_enums(
        self, raw: str, expected: ShutdownSignal | LogLevel
    ) -> None:
        assert type(expected)(raw) is expected


class TestCoerce:
    """before バリデータ用の緩い変換。"""

    def test_matching_string_becomes_member(self) -> None:
        assert Color.coerce("BLUE") is Color.BLUE

    def test_member_passthrough(self) -> None:
        assert Color.coerce(Color.RED) is Color.RED

    def test_unknown_string_passthrough(self) -> None:
        """マッチしない文字列はそのまま返され、Pydantic が拒否する。"""
        assert ShutdownSignal.coerce("SIGKILL") == "SIGKILL"

    def test_non_string_passthrough(self) -> None:
        assert ShutdownSignal.coerce(15) == 15

    def test_none_passthrough(self) -> None:
        assert LogLevel.coerce(None) is None
