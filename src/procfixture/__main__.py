"""python -m procfixture 用エントリポイント。"""

from procfixture import main

if __name__ == "__main__":
    main()
