# line_reader/utils/logger_utils/logger_injector.py
from __future__ import annotations
import os, logging, functools, inspect
from typing import Callable

from .logger_factory import LoggerFactoryImpl
from .level_mapper import map_level  # "INFO"→logging.INFO など


def _resolve_logger(name: str, log_file: str | None, level: int | str) -> logging.Logger:
    """既存ロガー優先で Logger を解決し、なければファクトリで生成して返す。

    優先順位:
        1) logging.getLogger(name) に既にハンドラが付いていれば、それをそのまま返す
        2) そうでなければ LoggerFactoryImpl(name, log_file, level) で新規生成

    パラメータ:
        name:
            ロガー名。
        log_file:
            ファイル出力を追加したい場合のパス。None の場合はファイル出力なし。
        level:
            ログレベル。数値（logging.DEBUG 等）/文字列（"DEBUG" 等）いずれも可。

    注意:
        - 既存ロガーのハンドラ存在有無で“構成済み”かどうかを判断します。
    """
    existing = logging.getLogger(name)
    if existing.handlers:   # 既にどこかでハンドラ設定済み＝“既存のロガー”
        return existing
    return LoggerFactoryImpl(name, log_file=log_file, level=level)


def with_logger(
    name: str,
    env_log_path: str = "LOG_FILE_PATH",
    env_log_level: str = "LOG_LEVEL",
    default_level: str = "WARNING",
) -> Callable:
    """キーワード引数 `logger` を呼び出しごとに注入するデコレーター。

    動作:
        - 呼び出し側が `logger=` を渡していればそれをそのまま使う（テストでの差し替え用）
        - 渡していなければ、既存ロガーを優先して解決し kwargs["logger"] に入れて呼ぶ
          - ファイル出力先は環境変数 env_log_path（未設定ならファイル出力なし）
          - レベルは環境変数 env_log_level を map_level で解決（未設定なら default_level）

    モジュールグローバルへの書き込みは行わない。
    対象関数が `logger` 引数を受け取れない場合はデコレート時に TypeError。

    例::

        @with_logger(name="LINE-READER-APP")
        def f(x, *, logger):
            logger.debug("debug message")
            return x

        f(1)                    # 環境変数に応じたロガーが注入される
        f(1, logger=Fake())     # テストでは任意の fake logger を差し込める
    """
    def deco(func: Callable):
        if "logger" not in inspect.signature(func).parameters:
            raise TypeError(f"{func.__qualname__} must accept a 'logger' keyword argument")

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            if kwargs.get("logger") is None:
                level = map_level(os.getenv(env_log_level, default_level))
                kwargs["logger"] = _resolve_logger(name, os.getenv(env_log_path) or None, level)
            return func(*args, **kwargs)
        return wrapper
    return deco
