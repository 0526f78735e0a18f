"""CLI テスト共通フィクスチャ。"""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

PATCH_CONFIGURE_LOGGING = "procfixture.cli._app._configure_logging"
PATCH_RESOLVE_CONFIG = "procfixture.cli._app.resolve_config"
PATCH_RUN_SHUTDOWN_FIXTURE = "procfixture.cli._app.run_shutdown_fixture"


@pytest.fixture(autouse=True)
def mock_configure_logging() -> Iterator[MagicMock]:
    """CliRunner の差し替え stderr にルートロガーが残らないようにする。"""
    with patch(PATCH_CONFIGURE_LOGGING) as mock:
        yield mock
