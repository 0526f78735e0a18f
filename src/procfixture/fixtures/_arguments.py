"""ArgumentReporter — 受け取った位置引数を stdout に列挙する。"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

ARGUMENTS_HEADER: Final[str] = "Provided arguments:"
NO_ARGUMENTS_MESSAGE: Final[str] = "No arguments found"


def format_argument_report(args: Sequence[str]) -> list[str]:
    """引数レポートの出力行を構築する。

    出力フォーマット:
        "Provided arguments:"
        引数なし: "No arguments found"
        引数あり: "{i} => {arg}"（i は 1 始まり、入力順）

    引数は検証・トリム・再クォートせずそのまま出力する。
    """
    if not args:
        return [ARGUMENTS_HEADER, NO_ARGUMENTS_MESSAGE]
    return [
        ARGUMENTS_HEADER,
        *(f"{index} => {arg}" for index, arg in enumerate(args, start=1)),
    ]


def report_arguments(args: Sequence[str]) -> None:
    """引数レポートを stdout に出力する。"""
    for line in format_argument_report(args):
        print(line, flush=True)
