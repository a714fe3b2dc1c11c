"""
errors.py
入力ソース読み込み時の失敗を表す例外。
正規化処理そのものは失敗しないため、ここにあるのは読み込み側の例外のみ。
"""
from __future__ import annotations
from pathlib import Path


class LineReaderError(Exception):
    """line_reader が送出する例外の基底クラス"""


class SourceUnavailableError(LineReaderError):
    """ファイルが存在しない・権限がない・パスが不正などで開けなかった"""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot open {self.path}: {reason}")


class DecodeFailureError(LineReaderError):
    """バイト列を UTF-8 として解釈できなかった"""

    def __init__(self, path: str | Path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot decode {self.path} as UTF-8: {reason}")
