"""プロセスランナー検証用フィクスチャ。

- 引数レポーター: 受け取った引数を番号付きで stdout に列挙する。
- 遅延終了シグナルレスポンダー: シグナル受信後、猶予時間を経てから終了する。
"""

from procfixture.fixtures._arguments import (
    ARGUMENTS_HEADER,
    NO_ARGUMENTS_MESSAGE,
    format_argument_report,
    report_arguments,
)
from procfixture.fixtures._shutdown import (
    FORCED_EXIT_MESSAGE,
    ShutdownResponder,
    format_signal_acknowledgement,
    run_shutdown_fixture,
)

__all__ = [
    "ARGUMENTS_HEADER",
    "FORCED_EXIT_MESSAGE",
    "NO_ARGUMENTS_MESSAGE",
    "ShutdownResponder",
    "format_argument_report",
    "format_signal_acknowledgement",
    "report_arguments",
    "run_shutdown_fixture",
]
