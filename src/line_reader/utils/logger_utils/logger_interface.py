"""
logger_interface.py
ロガー取得のインターフェース定義。
テスト時にはここを Moc 実装に差し替え可能。
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Protocol


class LoggerFactory(Protocol):
    def __call__(
        self,
        name: str,
        log_file: str | Path | None = None,
        level: int | str = logging.INFO,
    ) -> logging.Logger:
        """ロガーを生成して返す"""
