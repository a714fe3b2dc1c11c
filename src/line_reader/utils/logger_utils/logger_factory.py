"""
logger_factory.py
ログユーティリティ実装: 標準エラー(色付き)とファイル出力をサポート。
Interface層(logger_interface.LoggerFactory)に従う。
"""
from __future__ import annotations
import logging
from pathlib import Path

from .custom_formatter import build_file_handler, build_stream_handler
from .level_mapper import map_level
from .logger_interface import LoggerFactory

_FILE_ATTR = "_line_reader_log_file"
_STREAM_ATTR = "_line_reader_stream"


def get_logger(
    name: str,
    log_file: str | Path | None = None,
    level: int | str = logging.INFO,
) -> logging.Logger:
    """
    LoggerFactory 実装。
    - name: ロガー名
    - log_file: ファイル出力先パス。None の場合はファイル出力なし
    - level: ログレベル (数値/文字列どちらも可、デフォルト INFO)

    同じ名前で何度呼んでもハンドラは増えない。2 回目以降はレベルだけ更新し、
    ファイル出力先が変わった場合のみファイルハンドラを差し替える。
    """
    numeric_level = map_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # ここで付けたハンドラだけを管理対象にし、他所で追加されたハンドラには触れない
    stream_handlers = [h for h in logger.handlers if getattr(h, _STREAM_ATTR, False)]
    file_handlers = [h for h in logger.handlers if getattr(h, _FILE_ATTR, None) is not None]

    if not stream_handlers:
        stream_handler = build_stream_handler(numeric_level)
        setattr(stream_handler, _STREAM_ATTR, True)
        logger.addHandler(stream_handler)
    for h in stream_handlers:
        h.setLevel(numeric_level)

    wanted = str(Path(log_file).resolve()) if log_file is not None else None
    for h in file_handlers:
        if getattr(h, _FILE_ATTR) == wanted:
            h.setLevel(numeric_level)
            continue
        logger.removeHandler(h)
        h.close()

    if wanted is not None and not any(getattr(h, _FILE_ATTR, None) == wanted for h in logger.handlers):
        file_handler = build_file_handler(wanted, numeric_level)
        setattr(file_handler, _FILE_ATTR, wanted)
        logger.addHandler(file_handler)

    return logger


# この実装を Interface 用のエイリアスとして提供
LoggerFactoryImpl: LoggerFactory = get_logger
