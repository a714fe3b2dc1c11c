"""
utils/text_utils/line_source.py
テキストファイルから生の行を取り出すアダプタ群。

- read_all_lines:        ファイル全体を読み込んでから行に分割する（一括）
- read_lines_sequential: ファイルを開いたまま 1 行ずつ読み進める（逐次）
- read_all_bytes:        生のバイト列をそのまま返す
- read_all_text:         ファイル全体を 1 つの文字列として返す

どちらの行アダプタも UTF-8 厳密デコード・ユニバーサル改行
（\\n, \\r\\n, \\r）で分割するため、同じファイルからは同じ行列が得られる。
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from line_reader.errors import DecodeFailureError, SourceUnavailableError

ENCODING = "utf-8"


@dataclass(frozen=True)
class RawLine:
    """改行を除いた 1 行分のテキストと、1 始まりの行番号"""
    content: str
    lineno: int


def _split_lines(text: str) -> list[str]:
    # ユニバーサル改行変換済みの文字列を前提とする。末尾改行で空行を増やさない
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def _strip_terminator(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def read_all_bytes(path: str | Path) -> bytes:
    """ファイルの中身をバイト列のまま返す。

    Raises:
        SourceUnavailableError: ファイルを開けなかった場合
    """
    try:
        return Path(path).read_bytes()
    except (OSError, ValueError) as exc:
        raise SourceUnavailableError(path, str(exc)) from exc


def read_all_text(path: str | Path) -> str:
    """ファイル全体を UTF-8 として 1 つの文字列で返す（改行は変換しない）。

    Raises:
        SourceUnavailableError: ファイルを開けなかった場合
        DecodeFailureError: UTF-8 として不正なバイト列を含む場合
    """
    raw = read_all_bytes(path)
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise DecodeFailureError(path, str(exc)) from exc


def read_all_lines(path: str | Path) -> list[RawLine]:
    """ファイル全体を読み込み、行番号付きの行リストにして返す。

    Args:
        path (str | Path): 読み込むファイル

    Returns:
        list[RawLine]: 改行を除いた行（空ファイルなら空リスト）

    Raises:
        SourceUnavailableError: ファイルを開けなかった場合
        DecodeFailureError: UTF-8 として不正なバイト列を含む場合
    """
    text_path = Path(path)
    try:
        text = text_path.read_text(encoding=ENCODING)
    except UnicodeDecodeError as exc:
        raise DecodeFailureError(path, str(exc)) from exc
    except (OSError, ValueError) as exc:
        raise SourceUnavailableError(path, str(exc)) from exc

    return [RawLine(content, lineno) for lineno, content in enumerate(_split_lines(text), start=1)]


def read_lines_sequential(path: str | Path) -> Iterator[RawLine]:
    """ファイルを 1 行ずつ読み、行番号付きで順に返すジェネレータ。

    ファイルを開くのは最初の next() の時点。
    イテレータを使い切るか close() した時点でファイルも閉じられる。

    Raises:
        SourceUnavailableError: ファイルを開けなかった・読み込み中に失敗した場合
        DecodeFailureError: UTF-8 として不正なバイト列を含む場合
    """
    try:
        handle = open(path, "r", encoding=ENCODING)
    except (OSError, ValueError) as exc:
        raise SourceUnavailableError(path, str(exc)) from exc

    with handle:
        lineno = 0
        try:
            for line in handle:
                lineno += 1
                yield RawLine(_strip_terminator(line), lineno)
        except UnicodeDecodeError as exc:
            raise DecodeFailureError(path, str(exc)) from exc
        except OSError as exc:
            raise SourceUnavailableError(path, str(exc)) from exc
