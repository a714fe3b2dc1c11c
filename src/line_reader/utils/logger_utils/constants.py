"""
utils/logger_utils/constants.py
ログ出力で共有する定数。
"""
import logging

APP_LOGGER_NAME = "LINE-READER-APP"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_FORMAT = "%(name)s [%(levelname)s] (%(filename)s:%(lineno)d): %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

# ANSI カラーコード定義
COLOR_RESET = "\033[0m"
COLORS = {
    logging.DEBUG: "\033[36m",   # Cyan
    logging.INFO: "\033[32m",    # Green
    logging.WARNING: "\033[33m", # Yellow
    logging.ERROR: "\033[31m",   # Red
    logging.CRITICAL: "\033[41m" # Red background
}
