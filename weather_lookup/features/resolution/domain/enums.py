"""地点解決機能のEnum定義"""
from enum import Enum


class ResolutionStatus(str, Enum):
    """地点解決の終了状態"""

    RESOLVED = "resolved"  # 地点が確定した
    EXHAUSTED = "exhausted"  # 全候補を試したが確定しなかった
    INVALID_INPUT = "invalid_input"  # 空入力のため解決を行わなかった


class Script(str, Enum):
    """入力文字列の文字体系"""

    ARABIC = "arabic"
    LATIN = "latin"
