"""ExitCode — 終了コードの定義。"""

from enum import IntEnum


class ExitCode(IntEnum):
    """プロセス終了コード。

    フィクスチャ自体の終了ステータスは ShutdownConfig.exit_code で決まり、
    ここでは CLI 層が返す固定コードのみを定義する。
    INPUT_ERROR は Click の使用法エラーと同じ 2 に揃えている。
    """

    SUCCESS = 0
    EXECUTION_ERROR = 1
    INPUT_ERROR = 2
