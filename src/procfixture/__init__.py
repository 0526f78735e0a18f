def main() -> None:
    """パッケージエントリポイント。cli.main() に委譲する。

    pyproject.toml の [project.scripts] は procfixture.cli:main を直接参照するため、
    この関数は python -m procfixture とプログラムからの呼び出し用。
    """
    from procfixture.cli import main as cli_main

    cli_main()
