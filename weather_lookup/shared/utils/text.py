"""テキスト処理ユーティリティ"""

import re
from typing import Any

_WHITESPACE_RE = re.compile(r"\s+")


def collapse_whitespace(text: Any) -> str:
    """
    連続する空白を1つにまとめ、前後の空白を除去

    文字列以外が渡された場合は空文字列を返す
    """
    if not isinstance(text, str) or not text:
        return ""

    return _WHITESPACE_RE.sub(" ", text).strip()


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """
    テキストを指定長で切り詰め（ログ出力用）

    Args:
        text: 対象テキスト
        max_length: 最大文字数
        suffix: 切り詰め時の接尾辞

    Returns:
        切り詰められたテキスト
    """
    if not text or len(text) <= max_length:
        return text

    return text[: max_length - len(suffix)] + suffix
