# backend/postboard/logging_config.py

"""
標準 logging の初期化。

アプリ全体で 1 つの StreamHandler を root logger に付けるだけの最小構成。
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """
    root logger にハンドラとレベルを設定する。

    既にハンドラが付いている場合（uvicorn や pytest が設定済みの場合など）は
    レベルのみ更新し、ハンドラの二重登録は行わない。
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
