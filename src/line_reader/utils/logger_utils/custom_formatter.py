# custom_formatter.py
from __future__ import annotations
import logging, sys
from pathlib import Path
from typing import TextIO

from .constants import COLOR_RESET, COLORS, CONSOLE_FORMAT, DATE_FORMAT, FILE_FORMAT


class ColorFormatter(logging.Formatter):
    """色付き: レベル名だけ色付け。ファイル名/行番号付き"""
    def __init__(self) -> None:
        super().__init__(CONSOLE_FORMAT, DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        color = COLORS.get(record.levelno, COLOR_RESET)
        original = record.levelname
        record.levelname = f"{color}{original}{COLOR_RESET}"
        try:
            return super().format(record)
        finally:
            # 他のハンドラに色付きのレベル名が漏れないよう必ず戻す
            record.levelname = original


def build_stream_handler(level: int, stream: TextIO | None = None) -> logging.Handler:
    # 標準出力は一覧の出力先なので、ログは標準エラーへ流す
    h = logging.StreamHandler(stream if stream is not None else sys.stderr)
    h.setLevel(level)
    h.setFormatter(ColorFormatter())
    return h


def build_file_handler(log_file: str | Path, level: int) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.FileHandler(path, encoding="utf-8")
    h.setLevel(level)
    h.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return h
