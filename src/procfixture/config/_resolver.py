"""設定リゾルバー。

設定ファイルの各レイヤーと CLI オプションを重ね、FixtureConfig を構築する。
shutdown セクションはフィールド単位でマージする。
CLI オプションの None は未指定として除外する。
"""

from __future__ import annotations

from pathlib import Path
from typing import cast

from procfixture.config._sources import SHUTDOWN_KEY, discover_config_layers
from procfixture.models.config import FixtureConfig


def merge_config_layers(
    *layers: dict[str, object] | None,
) -> dict[str, object]:
    """複数の設定レイヤーを項目単位でマージする。

    後のレイヤーが先のレイヤーを上書きする。
    shutdown セクションはフィールド単位でマージする。
    None のレイヤーはスキップされる。入力の辞書は変更しない。

    Args:
        layers: マージ対象の設定辞書。低優先度から高優先度の順。
            shutdown はテーブル（dict）であること。

    Returns:
        マージ済みの設定辞書。
    """
    result: dict[str, object] = {}
    for layer in layers:
        if layer is None:
            continue
        for key, value in layer.items():
            if key == SHUTDOWN_KEY:
                base = cast("dict[str, object]", result.get(key, {}))
                result[key] = {**base, **cast("dict[str, object]", value)}
            else:
                result[key] = value
    return result


def filter_cli_overrides(cli_options: dict[str, object]) -> dict[str, object]:
    """CLI オプション辞書から None 値を除外する。

    ネストした辞書の None も除外し、空になったセクションは落とす。
    """
    filtered: dict[str, object] = {}
    for key, value in cli_options.items():
        if isinstance(value, dict):
            section = {k: v for k, v in value.items() if v is not None}
            if section:
                filtered[key] = section
        elif value is not None:
            filtered[key] = value
    return filtered


def resolve_config(
    start_dir: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
) -> FixtureConfig:
    """設定ソースを解決し FixtureConfig を構築する。

    優先順位: CLI > .procfixture/config.toml > pyproject.toml [tool.procfixture]
    > ~/.config/procfixture/config.toml > デフォルト値

    Args:
        start_dir: 探索開始ディレクトリ。None の場合はカレントディレクトリ。
        cli_overrides: CLI オプションの辞書。None 値は未指定扱い。

    Returns:
        解決済みの FixtureConfig インスタンス。

    Raises:
        pydantic.ValidationError: マージ後の設定が不正な場合。
        tomllib.TOMLDecodeError: 設定ファイルの TOML 構文が不正な場合。
        PermissionError: 設定ファイルの読み取り権限がない場合。
        TypeError: 設定ファイルの shutdown がテーブルでない場合。
    """
    effective_start = start_dir if start_dir is not None else Path.cwd()
    layers: list[dict[str, object] | None] = [
        layer.values for layer in discover_config_layers(effective_start)
    ]
    if cli_overrides is not None:
        layers.append(filter_cli_overrides(cli_overrides))

    # デフォルト値は FixtureConfig のフィールドデフォルトが担う
    return FixtureConfig(**merge_config_layers(*layers))  # type: ignore[arg-type]
