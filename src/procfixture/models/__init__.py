"""procfixture ドメインモデルパッケージ。"""

from procfixture.models._base import ProcfixtureBaseModel
from procfixture.models.config import (
    FixtureConfig,
    LogLevel,
    ShutdownConfig,
    ShutdownSignal,
)
from procfixture.models.exit_code import ExitCode

__all__ = [
    "ExitCode",
    "FixtureConfig",
    "LogLevel",
    "ProcfixtureBaseModel",
    "ShutdownConfig",
    "ShutdownSignal",
]
