"""
utils/text_utils/compare.py
一括読み込みと逐次読み込み、2 つの行アダプタの結果が一致するかを確認する。
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from line_reader.utils.text_utils.line_source import read_all_lines, read_lines_sequential
from line_reader.utils.text_utils.read_line import normalize_lines


@dataclass(frozen=True)
class SourceComparison:
    bulk: list[str]
    sequential: list[str]

    @property
    def matches(self) -> bool:
        # 集合ではなく順序・件数まで含めた完全一致で判定する
        return self.bulk == self.sequential


def compare_sources(path: str | Path, comment_token: str) -> SourceComparison:
    """同じファイルを 2 通りの方法で読み、それぞれ正規化した結果を並べて返す。

    読み込みエラーはそのまま送出する（報告方法は呼び出し側が決める）。
    """
    bulk = normalize_lines(read_all_lines(path), comment_token)
    sequential = normalize_lines(read_lines_sequential(path), comment_token)
    return SourceComparison(bulk=bulk, sequential=sequential)
