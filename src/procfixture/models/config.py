"""設定管理モデル。

設定項目の定義とバリデーション。
全モデルは ProcfixtureBaseModel を継承し不変。
"""

from __future__ import annotations

import logging
import signal
from typing import Final

from pydantic import Field, field_validator

from procfixture.models._base import CaseInsensitiveStrEnum, ProcfixtureBaseModel

DEFAULT_SHUTDOWN_DELAY_SECONDS: Final[float] = 5.0
DEFAULT_KEEPALIVE_INTERVAL_SECONDS: Final[float] = 1.0


class LogLevel(CaseInsensitiveStrEnum):
    """stderr へのログ出力レベル。"""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def to_logging_level(self) -> int:
        """logging モジュールの数値レベルに変換する。"""
        return logging.getLevelNamesMapping()[self.value.upper()]


class ShutdownSignal(CaseInsensitiveStrEnum):
    """シャットダウンフィクスチャが受け付けるシグナル名。"""

    SIGINT = "SIGINT"
    SIGTERM = "SIGTERM"
    SIGHUP = "SIGHUP"
    SIGQUIT = "SIGQUIT"

    def to_signal(self) -> signal.Signals:
        """signal.Signals メンバーに変換する。"""
        return signal.Signals[self.value]


DEFAULT_SHUTDOWN_SIGNALS: Final[tuple[ShutdownSignal, ...]] = (
    ShutdownSignal.SIGINT,
    ShutdownSignal.SIGTERM,
)


class ShutdownConfig(ProcfixtureBaseModel):
    """遅延終了シグナルレスポンダーの設定。

    Attributes:
        delay: シグナル受信から強制終了までの猶予時間（秒）。
        keepalive_interval: プロセスを生存させる no-op タイマーの周期（秒）。
        exit_code: 強制終了時の終了ステータス。
        signals: ハンドラを登録するシグナル。
    """

    delay: float = Field(
        default=DEFAULT_SHUTDOWN_DELAY_SECONDS, gt=0, allow_inf_nan=False
    )
    keepalive_interval: float = Field(
        default=DEFAULT_KEEPALIVE_INTERVAL_SECONDS, gt=0, allow_inf_nan=False
    )
    exit_code: int = Field(default=0, ge=0, le=255)
    signals: tuple[ShutdownSignal, ...] = Field(
        default=DEFAULT_SHUTDOWN_SIGNALS, min_length=1
    )

    @field_validator("signals", mode="before")
    @classmethod
    def normalize_signals(cls, v: object) -> object:
        """シグナル名を大文字小文字非依存で正規化する。"""
        if isinstance(v, (list, tuple)):
            return tuple(ShutdownSignal.coerce(item) for item in v)
        return v

    @field_validator("signals")
    @classmethod
    def validate_signals(
        cls, v: tuple[ShutdownSignal, ...]
    ) -> tuple[ShutdownSignal, ...]:
        """重複を除去し、現在のプラットフォームで利用可能なシグナルか検証する。"""
        for sig in v:
            if not hasattr(signal, sig.value):
                msg = f"Signal '{sig.value}' is not available on this platform"
                raise ValueError(msg)
        return tuple(dict.fromkeys(v))


class FixtureConfig(ProcfixtureBaseModel):
    """全設定項目を統合した不変モデル。

    デフォルト値のみで有効なインスタンスを構築可能。
    """

    log_level: LogLevel = LogLevel.WARNING
    shutdown: ShutdownConfig = Field(default_factory=ShutdownConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """log_level 入力を小文字に正規化する。"""
        return LogLevel.coerce(v)
