"""天気レスポンスのTTL付きキャッシュ"""

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from ....shared.logging.config import get_logger
from ...resolution.services.normalizer import normalize
from ..domain.models import WeatherReport

logger = get_logger(__name__)


@dataclass
class _CacheEntry:
    report: WeatherReport
    stored_at: float


class WeatherCache:
    """
    天気レスポンスのメモリ内キャッシュ

    同じ都市への短時間の重複リクエストでAPIを呼ばないようにする。
    キーは正規化した都市名（"Amman" と "amman" は同じエントリ）。
    """

    def __init__(self, ttl_seconds: float = 600, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Args:
            ttl_seconds: エントリの有効期間（秒）
            clock: 現在時刻を返す関数（テスト用に差し替え可能）
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self.cache: dict[str, _CacheEntry] = {}
        self.hit_count = 0
        self.miss_count = 0
        self._lock = threading.Lock()

        logger.info(f"WeatherCache initialized: ttl={ttl_seconds}s")

    def get(self, city: str) -> Optional[WeatherReport]:
        """
        キャッシュから取得（期限切れのエントリは削除してNoneを返す）

        Args:
            city: ユーザーが入力した都市名

        Returns:
            Optional[WeatherReport]: キャッシュ済みのレポート
        """
        cache_key = normalize(city)
        if not cache_key:
            return None

        with self._lock:
            entry = self.cache.get(cache_key)

            if entry is not None and self._clock() - entry.stored_at > self.ttl_seconds:
                del self.cache[cache_key]
                entry = None

            if entry is None:
                self.miss_count += 1
                logger.debug(f"Cache miss for city: {city}")
                return None

            self.hit_count += 1
            logger.debug(f"Cache hit for city: {city}")
            return entry.report

    def set(self, city: str, report: WeatherReport) -> None:
        """キャッシュに保存"""
        cache_key = normalize(city)
        if not cache_key:
            return

        with self._lock:
            self.cache[cache_key] = _CacheEntry(report=report, stored_at=self._clock())

    def clear(self) -> None:
        """キャッシュをクリア"""
        with self._lock:
            cache_size = len(self.cache)
            self.cache.clear()
            self.hit_count = 0
            self.miss_count = 0
        logger.info(f"Cache cleared: {cache_size} entries removed")

    def get_cache_stats(self) -> dict[str, float]:
        """
        キャッシュ統計を取得

        Returns:
            dict[str, float]: キャッシュ統計（サイズ、ヒット数、ミス数、ヒット率）
        """
        total_requests = self.hit_count + self.miss_count
        hit_rate = (self.hit_count / total_requests * 100) if total_requests > 0 else 0.0

        return {
            "cache_size": len(self.cache),
            "hit_count": self.hit_count,
            "miss_count": self.miss_count,
            "total_requests": total_requests,
            "hit_rate_percent": round(hit_rate, 2),
        }
