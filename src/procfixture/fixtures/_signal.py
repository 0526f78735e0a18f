"""シグナルハンドラの登録・解除。

イベントループの add_signal_handler を優先し、未対応のループ
（Windows の ProactorEventLoop 等）では signal.signal にフォールバックして
call_soon_threadsafe でコールバックをループ上に戻す。
"""

from __future__ import annotations

import asyncio
import logging
import signal
from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

SignalCallback = Callable[[signal.Signals], None]


def install_signal_handlers(
    callback: SignalCallback,
    loop: asyncio.AbstractEventLoop,
    signals: Iterable[signal.Signals],
) -> None:
    """各シグナルの受信時に callback(sig) がループ上で呼ばれるよう登録する。

    Args:
        callback: 受信したシグナルを引数に呼ばれる関数。
        loop: コールバックを実行するイベントループ。
        signals: 登録対象のシグナル。

    Raises:
        ValueError: メインスレッド以外から登録しようとした場合。
    """
    for sig in signals:
        try:
            loop.add_signal_handler(sig, callback, sig)
        except NotImplementedError:
            logger.debug("Event loop lacks add_signal_handler; using signal.signal")
            signal.signal(sig, _make_threadsafe_handler(callback, loop))


def uninstall_signal_handlers(
    loop: asyncio.AbstractEventLoop,
    signals: Iterable[signal.Signals],
) -> None:
    """install_signal_handlers で登録したハンドラを解除する。"""
    for sig in signals:
        try:
            loop.remove_signal_handler(sig)
        except NotImplementedError:
            # SIGINT は KeyboardInterrupt を送出する Python 既定ハンドラに戻す
            default = (
                signal.default_int_handler if sig == signal.SIGINT else signal.SIG_DFL
            )
            signal.signal(sig, default)


def _make_threadsafe_handler(
    callback: SignalCallback,
    loop: asyncio.AbstractEventLoop,
) -> Callable[[int, object], None]:
    """signal.signal 用ハンドラを生成する。コールバックはループ上で実行される。"""

    def _handler(signum: int, _frame: object) -> None:
        loop.call_soon_threadsafe(callback, signal.Signals(signum))

    return _handler
