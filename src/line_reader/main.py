"""
main.py
コマンドラインから 1 つのテキストファイルを読み、コメントと空行を除いた行を出力する。

使い方:
    line-reader FILE [--comment TOKEN] [--compare] [--raw] [--log-level LEVEL] [--log-file PATH]

読み込みに失敗しても例外は外に出さず、「空か存在しない」旨を表示して終了する。
"""
from __future__ import annotations
import argparse
import logging
import sys
from typing import Sequence, TextIO

from line_reader.config import load_settings
from line_reader.errors import DecodeFailureError, SourceUnavailableError
from line_reader.utils.logger_utils.constants import APP_LOGGER_NAME
from line_reader.utils.logger_utils.logger_factory import get_logger
from line_reader.utils.logger_utils.logger_injector import with_logger
from line_reader.utils.text_utils.compare import compare_sources
from line_reader.utils.text_utils.line_source import read_all_text
from line_reader.utils.text_utils.read_line import SkipReason, clean_lines

USAGE_MESSAGE = "Please enter the name of the input file as a command line argument."
MATCH_MESSAGE = "\nreadAllLines and sequential read match!\n"
MISMATCH_MESSAGE = "\nreadAllLines and sequential read do not match!\n"


def empty_message(path: str) -> str:
    return f"The input file: {path}, was empty or did not exist."


def _skip_logger(logger: logging.Logger):
    def on_skip(lineno: int, reason: SkipReason) -> None:
        if reason is SkipReason.COMMENT_ONLY:
            logger.debug(f"コメントのみの行をスキップ: row {lineno}")
        else:
            logger.debug(f"空行をスキップ: row {lineno}")
    return on_skip


def read_significant_lines(path: str, comment_token: str, logger: logging.Logger) -> list[str]:
    """一括読み込み → 正規化。読めなかった場合はエラーを記録して空リストを返す。"""
    logger.debug(f"{path} を開きます（コメント記号: {comment_token!r}）")
    return clean_lines(
        path,
        comment_token,
        on_skip=_skip_logger(logger),
        on_error=lambda exc: logger.error(f"読み込みに失敗: {exc}"),
    )


@with_logger(APP_LOGGER_NAME)
def run(
    path: str,
    comment_token: str,
    *,
    compare: bool = False,
    raw: bool = False,
    out: TextIO | None = None,
    logger: logging.Logger,
) -> int:
    """1 ファイル分の処理を行い、終了ステータスを返す。

    Args:
        path: 入力ファイル
        comment_token: コメント記号（"//", "#" など）
        compare: 一括読み込みと逐次読み込みの結果が一致するかも表示する
        raw: ファイル全体をそのままの文字列でも表示する
        out: 出力先（既定は標準出力）
        logger: 注入されるロガー

    Returns:
        int: 0（正常）。raw 表示で UTF-8 として解釈できなかった場合のみ 1
    """
    out = out if out is not None else sys.stdout
    status = 0

    lines = read_significant_lines(path, comment_token, logger)
    if lines:
        for line in lines:
            print(line, file=out)
    else:
        message = empty_message(path)
        print(message, file=out)
        logger.error(message)

    if compare:
        try:
            comparison = compare_sources(path, comment_token)
            matches = comparison.matches
        except (SourceUnavailableError, DecodeFailureError) as exc:
            # どちらも空として扱う
            logger.error(f"比較用の読み込みに失敗: {exc}")
            matches = True
        print(MATCH_MESSAGE if matches else MISMATCH_MESSAGE, file=out)

    if raw:
        try:
            print(read_all_text(path), file=out)
        except SourceUnavailableError as exc:
            logger.error(f"ファイル全体の読み込みに失敗: {exc}")
        except DecodeFailureError as exc:
            logger.error(f"ファイル全体のデコードに失敗: {exc}")
            status = 1

    return status


def _build_parser(defaults) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="line-reader",
        description="Print the significant lines of a text file (comments and blank lines removed)",
    )
    p.add_argument("path", nargs="?", help="Text file to read")
    p.add_argument(
        "--comment",
        default=defaults.comment_token,
        metavar="TOKEN",
        help=f"Comment marker (default: {defaults.comment_token!r})",
    )
    p.add_argument(
        "--compare",
        action="store_true",
        help="Also check that bulk and sequential reads give the same lines",
    )
    p.add_argument(
        "--raw",
        action="store_true",
        help="Also print the whole file as read",
    )
    p.add_argument("--log-level", default=defaults.log_level, help="Log level (default: %(default)s)")
    p.add_argument("--log-file", default=defaults.log_file, metavar="PATH", help="Also write logs to PATH")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    settings = load_settings()
    args = _build_parser(settings).parse_args(argv)

    if not args.path:
        print(USAGE_MESSAGE)
        return 0

    try:
        logger = get_logger(APP_LOGGER_NAME, log_file=args.log_file, level=args.log_level)
    except OSError as exc:
        # ログファイルが作れなくても処理は続ける
        logger = get_logger(APP_LOGGER_NAME, level=args.log_level)
        logger.warning(f"ログファイル {args.log_file} を開けないため標準エラーのみに出力します: {exc}")
    return run(args.path, args.comment, compare=args.compare, raw=args.raw, logger=logger)


if __name__ == "__main__":
    sys.exit(main())
