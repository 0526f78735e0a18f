"""CliApp — Typer アプリケーション定義。

サブコマンド:
    args: 受け取った引数を番号付きで列挙する。
    shutdown: シグナル受信後、猶予時間を経てから終了する。

フィクスチャの出力は stdout、ログとエラーメッセージは stderr に分離する。
"""

from __future__ import annotations

import asyncio
import importlib.metadata
import logging
import sys
import tomllib
from typing import Annotated

import typer
from pydantic import ValidationError

from procfixture.config import resolve_config
from procfixture.fixtures import report_arguments, run_shutdown_fixture
from procfixture.models.config import ShutdownSignal
from procfixture.models.exit_code import ExitCode

_VERBOSE_KEY = "verbose"
_PROG_NAME = "procfixture"

_PLAIN_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)

app = typer.Typer(
    name=_PROG_NAME,
    help=(
        "Well-behaved child processes for exercising process runners.\n\n"
        "  args      print the received arguments\n\n"
        "  shutdown  exit a fixed delay after SIGINT/SIGTERM"
    ),
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """--version 指定時にバージョン番号を出力して終了する。"""
    if value:
        print(importlib.metadata.version("procfixture"))
        raise typer.Exit()


def _configure_logging(level: int) -> None:
    """ルートロガーを stderr に設定する。

    stderr が TTY の場合は Rich のハンドラ、それ以外はプレーンテキスト。
    """
    handler: logging.Handler
    if sys.stderr.isatty():
        from rich.console import Console
        from rich.logging import RichHandler

        handler = RichHandler(console=Console(stderr=True), show_path=False)
        fmt = "%(message)s"
    else:
        handler = logging.StreamHandler(sys.stderr)
        fmt = _PLAIN_LOG_FORMAT
    logging.basicConfig(level=level, format=fmt, handlers=[handler], force=True)


def main() -> None:
    """CLI エントリポイント。pyproject.toml の [project.scripts] から呼び出される。"""
    app(prog_name=_PROG_NAME)


@app.callback()
def root_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr.")
    ] = False,
) -> None:
    """Fixture processes for process runner tests."""
    ctx.ensure_object(dict)[_VERBOSE_KEY] = verbose
    _configure_logging(logging.DEBUG if verbose else logging.WARNING)


# help_option_names を空にし、--help も含めて全引数をそのまま受け取る
@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": [],
    },
)
def args(ctx: typer.Context) -> None:
    """Print the received arguments, one per line with a 1-based index."""
    logger.debug("Reporting %d argument(s)", len(ctx.args))
    report_arguments(ctx.args)


@app.command()
def shutdown(
    ctx: typer.Context,
    delay: Annotated[
        float | None,
        typer.Option(help="Seconds between the first signal and the forced exit."),
    ] = None,
    exit_code: Annotated[
        int | None,
        typer.Option(
            "--exit-code", help="Exit status after the forced exit.", min=0, max=255
        ),
    ] = None,
    signals: Annotated[
        list[ShutdownSignal] | None,
        typer.Option(
            "--signal",
            help="Signal to handle (repeatable). Default: SIGINT and SIGTERM.",
            case_sensitive=False,
        ),
    ] = None,
    keepalive_interval: Annotated[
        float | None,
        typer.Option("--keepalive-interval", help="Keepalive timer period in seconds."),
    ] = None,
) -> None:
    """Wait for a signal, then exit after a fixed delay.

    Every signal prints an acknowledgement. Only the first one schedules the
    forced exit; later signals do not shorten or cancel it.
    """
    config_overrides = _build_config_overrides(
        delay=delay,
        exit_code=exit_code,
        signals=signals,
        keepalive_interval=keepalive_interval,
    )

    try:
        config = resolve_config(cli_overrides=config_overrides)
    except (ValidationError, tomllib.TOMLDecodeError, TypeError) as e:
        print(
            f"Error: Invalid configuration: {e}\n"
            "Check .procfixture/config.toml, [tool.procfixture] in pyproject.toml "
            "and the command line options.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None
    except PermissionError as e:
        print(
            f"Error: Cannot read configuration file: {e}\n"
            "Check file permissions for .procfixture/config.toml.",
            file=sys.stderr,
        )
        raise typer.Exit(code=ExitCode.INPUT_ERROR) from None

    if not (ctx.obj or {}).get(_VERBOSE_KEY, False):
        _configure_logging(config.log_level.to_logging_level())

    try:
        status = asyncio.run(run_shutdown_fixture(config.shutdown))
    except (KeyboardInterrupt, SystemExit):
        raise
    except Exception as e:
        print(f"Error: Shutdown fixture failed: {e}", file=sys.stderr)
        raise typer.Exit(code=ExitCode.EXECUTION_ERROR) from e

    raise typer.Exit(code=status)


def _build_config_overrides(
    *,
    delay: float | None,
    exit_code: int | None,
    signals: list[ShutdownSignal] | None,
    keepalive_interval: float | None,
) -> dict[str, object]:
    """CLI オプションから config_overrides 辞書を構築する。

    None 値は「未指定」として resolve_config 側で除外される。
    """
    return {
        "shutdown": {
            "delay": delay,
            "exit_code": exit_code,
            "signals": tuple(signals) if signals else None,
            "keepalive_interval": keepalive_interval,
        },
    }
