"""
utils/text_utils/read_line.py
行の並びからコメント（コメント記号以降）と空行を取り除き、意味のある行だけを返す。

コメント記号は呼び出し側が毎回渡す（既定は "//"、"#" なども同様に扱う）。
正規化はメモリ上のデータに対する純粋関数で、I/O もログも行わない。
"""
from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Iterator

from line_reader.errors import DecodeFailureError, LineReaderError, SourceUnavailableError
from line_reader.utils.text_utils.line_source import RawLine, read_all_lines

DEFAULT_COMMENT_TOKEN = "//"


class SkipReason(str, Enum):
    COMMENT_ONLY = "comment_only"
    BLANK = "blank"


SkipHook = Callable[[int, SkipReason], None]


def _numbered(lines: Iterable[str | RawLine]) -> Iterator[RawLine]:
    for index, line in enumerate(lines, start=1):
        if isinstance(line, RawLine):
            yield line
        else:
            yield RawLine(line, index)


def iter_significant_lines(
    lines: Iterable[str | RawLine],
    comment_token: str,
    on_skip: SkipHook | None = None,
) -> Iterator[str]:
    """行を 1 つずつ正規化し、残った行だけを順に返すジェネレータ。

    1 行ごとの処理:
        1) コメント記号を含む行は、最初の出現位置より前だけを残して前後の空白を除去。
           何も残らなければコメントだけの行としてスキップ
        2) コメント記号を含まない行は、空行・空白だけの行ならスキップ、
           それ以外は前後の空白を除去して返す

    コメント記号が空文字の場合は「一致しない」として扱う。
    引用符の中にあるコメント記号も区別しない（単純な部分文字列検索）。

    Args:
        lines (Iterable[str | RawLine]): 改行を含まない行。str の場合は 1 から番号を振る
        comment_token (str): コメント開始を表す文字列
        on_skip (SkipHook | None): スキップした行の (行番号, 理由) を受け取るフック。診断用

    Yields:
        str: 意味のある行
    """
    for raw in _numbered(lines):
        line = raw.content
        if comment_token and comment_token in line:
            residual = line[: line.index(comment_token)].strip()
            reason = SkipReason.COMMENT_ONLY
        else:
            residual = line.strip()
            reason = SkipReason.BLANK

        if residual:
            yield residual
        elif on_skip is not None:
            on_skip(raw.lineno, reason)


def normalize_lines(
    lines: Iterable[str | RawLine],
    comment_token: str,
    on_skip: SkipHook | None = None,
) -> list[str]:
    """iter_significant_lines の結果をリストにして返す。空リストも正常な結果。"""
    return list(iter_significant_lines(lines, comment_token, on_skip))


def clean_lines(
    path_str: str | Path,
    comment_token: str = DEFAULT_COMMENT_TOKEN,
    on_skip: SkipHook | None = None,
    on_error: Callable[[LineReaderError], None] | None = None,
) -> list[str]:
    """
    テキストファイルを読み込み、コメントと空行を取り除いた行を返す。
    読み込めない場合（存在しない・権限がない・UTF-8 でない）は空リスト。

    Args:
        path_str (str | Path): ファイルパス
        comment_token (str): コメント記号
        on_skip (SkipHook | None): スキップした行の通知先
        on_error (Callable | None): 読み込みに失敗したときの例外の通知先

    Returns:
        list[str]: 整形済みの行リスト
    """
    try:
        raw_lines = read_all_lines(path_str)
    except (SourceUnavailableError, DecodeFailureError) as exc:
        if on_error is not None:
            on_error(exc)
        return []
    return normalize_lines(raw_lines, comment_token, on_skip)
