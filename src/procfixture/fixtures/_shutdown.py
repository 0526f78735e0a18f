"""ShutdownResponder — 遅延強制終了を行うシグナルレスポンダー。

SIGINT/SIGTERM 受信時に受信メッセージを出力し、設定された猶予時間の後に
強制終了メッセージを出力して終了ステータスを確定させる。

- 2 回目以降のシグナルは受信メッセージのみ出力し、期限は変更しない。
- 受信直後には終了しない（猶予時間は必ず経過させる）。
- keepalive タイマーがフィクスチャの生存期間中ずっと周期実行される。
"""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import Final

from procfixture.fixtures._signal import (
    install_signal_handlers,
    uninstall_signal_handlers,
)
from procfixture.models.config import ShutdownConfig

logger = logging.getLogger(__name__)

FORCED_EXIT_MESSAGE: Final[str] = "Shutdown timeout reached. Forcing exit now."


def format_signal_acknowledgement(sig: signal.Signals, delay: float) -> str:
    """シグナル受信メッセージを構築する。

    出力フォーマット:
        "Received {SIGNAME}. Shutting down in {delay} seconds..."
    """
    return f"Received {sig.name}. Shutting down in {delay:g} seconds..."


class ShutdownResponder:
    """シグナル受信から強制終了までのタイマーを管理する。

    強制終了時は exit_future に ShutdownConfig.exit_code をセットする。
    プロセス終了自体は exit_future を待つ呼び出し側が行う。

    Args:
        loop: タイマーを登録するイベントループ。
        config: シャットダウン設定。
        exit_future: 終了ステータスを受け取る Future。
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        config: ShutdownConfig,
        exit_future: asyncio.Future[int],
    ) -> None:
        self._loop = loop
        self._config = config
        self._exit_future = exit_future
        self._deadline: asyncio.TimerHandle | None = None
        self._keepalive: asyncio.TimerHandle | None = None

    @property
    def deadline(self) -> float | None:
        """強制終了予定のループ時刻。シグナル未受信なら None。"""
        return self._deadline.when() if self._deadline is not None else None

    def on_signal(self, sig: signal.Signals) -> None:
        """シグナル受信時のコールバック。

        受信メッセージを出力し、初回のみ強制終了タイマーを登録する。
        """
        print(format_signal_acknowledgement(sig, self._config.delay), flush=True)
        if self._deadline is not None:
            logger.debug(
                "%s received while shutdown is pending; deadline kept", sig.name
            )
            return
        self._deadline = self._loop.call_later(self._config.delay, self._force_exit)
        logger.debug("Forced exit scheduled in %gs", self._config.delay)

    def start_keepalive(self) -> None:
        """keepalive タイマーを開始する。"""
        self._keepalive = self._loop.call_later(
            self._config.keepalive_interval, self._keepalive_tick
        )

    def close(self) -> None:
        """未発火のタイマーをすべてキャンセルする。"""
        for handle in (self._deadline, self._keepalive):
            if handle is not None:
                handle.cancel()
        self._keepalive = None

    def _keepalive_tick(self) -> None:
        self._keepalive = self._loop.call_later(
            self._config.keepalive_interval, self._keepalive_tick
        )

    def _force_exit(self) -> None:
        print(FORCED_EXIT_MESSAGE, flush=True)
        if not self._exit_future.done():
            self._exit_future.set_result(self._config.exit_code)


async def run_shutdown_fixture(config: ShutdownConfig) -> int:
    """シグナルを待ち受け、強制終了時の終了ステータスを返す。

    シグナルハンドラは戻る前に必ず解除される。

    Args:
        config: シャットダウン設定。

    Returns:
        強制終了時の終了ステータス（デフォルト 0）。

    Raises:
        ValueError: メインスレッド以外で実行した場合（シグナル登録不可）。
    """
    loop = asyncio.get_running_loop()
    exit_future: asyncio.Future[int] = loop.create_future()
    responder = ShutdownResponder(loop, config, exit_future)
    signals = [s.to_signal() for s in config.signals]

    install_signal_handlers(responder.on_signal, loop, signals)
    try:
        responder.start_keepalive()
        logger.info("Waiting for %s", ", ".join(s.name for s in signals))
        return await exit_future
    finally:
        responder.close()
        uninstall_signal_handlers(loop, signals)
