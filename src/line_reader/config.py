"""
config.py
コメント記号とログ設定の読み込み。
.env があれば読み込み、環境変数 → 既定値の順で解決する。
"""
from __future__ import annotations
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from line_reader.utils.text_utils.read_line import DEFAULT_COMMENT_TOKEN

ENV_COMMENT_TOKEN = "LINE_READER_COMMENT_TOKEN"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_LOG_FILE_PATH = "LOG_FILE_PATH"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    comment_token: str = DEFAULT_COMMENT_TOKEN
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: str | None = None


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        # 空文字も「コメント検出なし」として有効な値なので、未設定のときだけ既定値
        comment_token=os.getenv(ENV_COMMENT_TOKEN, DEFAULT_COMMENT_TOKEN),
        log_level=os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        log_file=os.getenv(ENV_LOG_FILE_PATH) or None,
    )
