"""日時関連ユーティリティ"""

from datetime import date, datetime, timezone
from typing import Optional

import pytz


def now_utc() -> datetime:
    """現在のUTC時間を取得"""
    return datetime.now(timezone.utc)


def today_in_timezone(tz_name: Optional[str], now: Optional[datetime] = None) -> date:
    """
    指定タイムゾーンでの今日の日付を取得

    Args:
        tz_name: IANAタイムゾーン名（例: "Asia/Amman"）。不明な場合はUTC
        now: 基準時刻（テスト用。Noneの場合は現在時刻）

    Returns:
        そのタイムゾーンでの日付
    """
    current = now or now_utc()
    if current.tzinfo is None:
        # タイムゾーン情報がない場合はUTCとして扱う
        current = current.replace(tzinfo=timezone.utc)

    try:
        tz = pytz.timezone(tz_name) if tz_name else pytz.utc
    except pytz.UnknownTimeZoneError:
        tz = pytz.utc

    return current.astimezone(tz).date()


def format_day_label(date_string: str, today: date) -> str:
    """
    予報日の表示ラベルを生成

    Args:
        date_string: ISO形式の日付（例: "2024-05-01"）
        today: 基準となる今日の日付

    Returns:
        "Today" / "Tomorrow" / 英語の曜日名
    """
    day = date.fromisoformat(date_string[:10])
    diff_days = (day - today).days

    if diff_days == 0:
        return "Today"
    if diff_days == 1:
        return "Tomorrow"

    return day.strftime("%A")
