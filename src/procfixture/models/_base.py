"""設定モデルの共通基盤。

ProcfixtureBaseModel: 未知キーを拒否する不変モデル。
CaseInsensitiveStrEnum: TOML や CLI から来る名前を大文字小文字を問わず受け付ける。
"""

from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict


class ProcfixtureBaseModel(BaseModel):
    """設定モデルの基底クラス。未知キーは ValidationError、代入は禁止。"""

    model_config = ConfigDict(extra="forbid", frozen=True)


class CaseInsensitiveStrEnum(StrEnum):
    """値の大文字小文字を区別せずにメンバーを引ける StrEnum。

    ``ShutdownSignal("sigterm")`` は ``ShutdownSignal.SIGTERM`` を返す。
    """

    @classmethod
    def _missing_(cls, value: object) -> Self | None:
        if isinstance(value, str):
            folded = value.casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return None

    @classmethod
    def coerce(cls, value: object) -> object:
        """value をメンバーに変換する。変換できなければ value をそのまま返す。

        field_validator(mode="before") から使う。不正値の報告は後続の
        Pydantic バリデーションに任せる。
        """
        try:
            return cls(value)
        except ValueError:
            return value
