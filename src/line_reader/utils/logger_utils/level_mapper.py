"""
utils/logger_utils/level_mapper.py
"DEBUG" / "info" / 10 などの表記を logging のレベル値に揃える。
"""
from __future__ import annotations
import logging

_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
}


def map_level(value: str | int | None, default: int = logging.INFO) -> int:
    """ログレベル表記を数値に変換する。解釈できない値は default にフォールバック。"""
    if value is None:
        return default
    if isinstance(value, int):
        return value
    text = value.strip().upper()
    if text.isdigit():
        return int(text)
    return _NAMES.get(text, default)
