"""設定ソースの列挙。

procfixture が読む TOML 設定を優先度の低い順に返す:
    1. ~/.config/procfixture/config.toml
    2. 最寄りの pyproject.toml の [tool.procfixture]
    3. 最寄りの .procfixture/config.toml

読み込み時に形だけを検査する（shutdown はテーブル）。
値そのものの検証は FixtureConfig が担当する。
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_DIR_NAME: str = ".procfixture"
CONFIG_FILE_NAME: str = "config.toml"
SHUTDOWN_KEY: str = "shutdown"


@dataclass(frozen=True)
class ConfigLayer:
    """1 つの設定ファイルから読み込んだ値。

    Attributes:
        origin: 読み込み元ファイル。
        values: トップレベルのキーと値（pyproject.toml はセクション内のみ）。
    """

    origin: Path
    values: dict[str, object]


def user_config_path() -> Path:
    """ユーザーグローバル設定のパス。存在チェックは行わない。"""
    return Path.home() / ".config" / "procfixture" / CONFIG_FILE_NAME


def _walk_up(start: Path) -> Iterator[Path]:
    current = start.resolve()
    yield current
    yield from current.parents


def find_project_root(start: Path) -> Path | None:
    """start から親方向に .procfixture/ ディレクトリを持つ最初のディレクトリを返す。"""
    for directory in _walk_up(start):
        if (directory / PROJECT_DIR_NAME).is_dir():
            return directory
    return None


def _find_pyproject(start: Path) -> Path | None:
    for directory in _walk_up(start):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _read_toml(path: Path) -> dict[str, object] | None:
    """TOML を読み込む。ファイルが存在しなければ None。

    Raises:
        tomllib.TOMLDecodeError: TOML 構文エラーの場合。
        PermissionError: 読み取り権限がない場合。
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return None


def _procfixture_section(data: dict[str, object]) -> dict[str, object] | None:
    tool = data.get("tool")
    section = tool.get("procfixture") if isinstance(tool, dict) else None
    return section if isinstance(section, dict) else None


def _make_layer(origin: Path, values: dict[str, object]) -> ConfigLayer:
    """shutdown がテーブルであることを確かめて ConfigLayer を作る。

    Raises:
        TypeError: shutdown がテーブルでない場合。
    """
    shutdown = values.get(SHUTDOWN_KEY)
    if shutdown is not None and not isinstance(shutdown, dict):
        msg = (
            f"{origin}: '{SHUTDOWN_KEY}' must be a table, "
            f"got {type(shutdown).__name__}"
        )
        raise TypeError(msg)
    logger.debug("Loaded config from %s", origin)
    return ConfigLayer(origin=origin, values=values)


def discover_config_layers(start: Path) -> list[ConfigLayer]:
    """start から見える設定ファイルを優先度の低い順に読み込む。

    存在しないファイルとセクションのない pyproject.toml は飛ばす。

    Raises:
        tomllib.TOMLDecodeError: TOML 構文エラーの場合。
        PermissionError: 読み取り権限がない場合。
        TypeError: shutdown がテーブルでない場合。
    """
    layers: list[ConfigLayer] = []

    user_path = user_config_path()
    user_data = _read_toml(user_path)
    if user_data is not None:
        layers.append(_make_layer(user_path, user_data))

    pyproject_path = _find_pyproject(start)
    if pyproject_path is not None:
        pyproject_data = _read_toml(pyproject_path)
        section = (
            _procfixture_section(pyproject_data) if pyproject_data is not None else None
        )
        if section is not None:
            layers.append(_make_layer(pyproject_path, section))

    project_root = find_project_root(start)
    if project_root is not None:
        # .procfixture/ だけあって config.toml が未作成でもよい
        project_path = project_root / PROJECT_DIR_NAME / CONFIG_FILE_NAME
        project_data = _read_toml(project_path)
        if project_data is not None:
            layers.append(_make_layer(project_path, project_data))

    return layers
