"""ジオコーダーの基底クラス"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..domain.models import LocationCandidate, PlaceName


class AbstractGeocoder(ABC):
    """地名検索（フォワードジオコーディング）の抽象基底クラス"""

    @abstractmethod
    def search(
        self, name: str, count: int = 10, language: Optional[str] = None
    ) -> list[LocationCandidate]:
        """
        地名から地点候補を検索

        Args:
            name: 検索文字列
            count: 取得する最大件数
            language: 言語ヒント（"ar", "en" など）

        Returns:
            list[LocationCandidate]: 地点候補（見つからない場合は空リスト）

        Raises:
            GeocodingError: 通信失敗、または不正なレスポンスの場合
        """
        pass

    def close(self) -> None:
        """リソースをクリーンアップ"""
        pass

    def __enter__(self) -> "AbstractGeocoder":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


class AbstractReverseGeocoder(ABC):
    """座標から地名を得る（逆ジオコーディング）抽象基底クラス"""

    @abstractmethod
    def reverse_geocode(self, latitude: float, longitude: float) -> PlaceName:
        """
        座標から地名を取得

        失敗しても例外は送出せず、PlaceName.unknown() を返す

        Args:
            latitude: 緯度
            longitude: 経度

        Returns:
            PlaceName: 地名
        """
        pass

    def close(self) -> None:
        """リソースをクリーンアップ"""
        pass
