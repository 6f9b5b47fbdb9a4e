"""都市名の正規化（アラビア文字対応）"""

import re
from typing import Any

from ....shared.utils.text import collapse_whitespace
from ..domain.enums import Script
from ..domain.rules import (
    ARABIC_CHAR_PATTERN,
    ARABIC_DIACRITICS_PATTERN,
    ARABIC_LETTER_FORMS,
)

_ARABIC_CHAR_RE = re.compile(ARABIC_CHAR_PATTERN)
_ARABIC_DIACRITICS_RE = re.compile(ARABIC_DIACRITICS_PATTERN)
_ARABIC_LETTER_TABLE = str.maketrans(ARABIC_LETTER_FORMS)


def contains_arabic(text: Any) -> bool:
    """アラビア文字を含むかどうか"""
    return isinstance(text, str) and bool(_ARABIC_CHAR_RE.search(text))


def detect_script(text: Any) -> Script:
    """文字体系を判定"""
    return Script.ARABIC if contains_arabic(text) else Script.LATIN


def strip_arabic_diacritics(text: str) -> str:
    """アラビア語の発音記号を除去"""
    return _ARABIC_DIACRITICS_RE.sub("", text)


def canonicalize_arabic_letters(text: str) -> str:
    """字形バリエーションを代表字形に統一"""
    return text.translate(_ARABIC_LETTER_TABLE)


def normalize(text: Any) -> str:
    """
    比較用に都市名を正規化

    - アラビア文字を含む場合: 発音記号の除去、字形の統一、空白の整理
    - それ以外: 空白の整理、小文字化

    正規化結果を再度正規化しても変化しない（冪等）。

    表示用ではなく比較専用。例外は送出せず、文字列以外は空文字列を返す。

    Args:
        text: 入力文字列

    Returns:
        str: 正規化された文字列
    """
    if not isinstance(text, str):
        return ""

    if not contains_arabic(text):
        return collapse_whitespace(text).lower()

    normalized = text.strip()
    normalized = strip_arabic_diacritics(normalized)
    normalized = canonicalize_arabic_letters(normalized)

    # アラビア文字に大小の区別はないため、混在するラテン文字だけが小文字になる
    return collapse_whitespace(normalized).lower()
