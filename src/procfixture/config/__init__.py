"""設定管理モジュール。"""

from procfixture.config._resolver import resolve_config
from procfixture.config._sources import find_project_root

__all__ = [
    "find_project_root",
    "resolve_config",
]
