"""ジオコーディング機能のドメインモデル"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# 逆ジオコーディングに失敗した場合の代替名
UNKNOWN_PLACE = "Unknown"


class FeatureCode(str, Enum):
    """GeoNamesのfeature code（Open-Meteoが返すもののうち判定に使うもの）"""

    PPLC = "PPLC"  # 首都
    PPLA = "PPLA"  # 第一級行政区画の中心地
    PPLA2 = "PPLA2"  # 第二級行政区画の中心地
    PPLA3 = "PPLA3"
    PPLA4 = "PPLA4"
    PPL = "PPL"  # 一般的な居住地
    PPLX = "PPLX"  # 市街地の一部

    @property
    def is_national_capital(self) -> bool:
        """首都かどうか"""
        return self is FeatureCode.PPLC

    @property
    def is_capital(self) -> bool:
        """首都または地方の中心地かどうか"""
        return self in (FeatureCode.PPLC, FeatureCode.PPLA)

    @classmethod
    def parse(cls, code: Optional[str]) -> Optional["FeatureCode"]:
        """未知のコードはNoneとして扱う"""
        if not code:
            return None
        try:
            return cls(code.strip().upper())
        except ValueError:
            return None


@dataclass
class LocationCandidate:
    """ジオコーディングAPIが返した地点候補"""

    name: str
    country: str
    latitude: float  # 緯度
    longitude: float  # 経度
    country_code: Optional[str] = None  # ISO 3166-1 alpha-2
    population: Optional[int] = None  # 人口
    feature_code: Optional[str] = None  # GeoNames feature code

    @property
    def is_capital(self) -> bool:
        """首都または地方の中心地かどうか"""
        feature = FeatureCode.parse(self.feature_code)
        return feature is not None and feature.is_capital

    @property
    def is_national_capital(self) -> bool:
        """首都かどうか"""
        feature = FeatureCode.parse(self.feature_code)
        return feature is not None and feature.is_national_capital

    @property
    def population_or_zero(self) -> int:
        """人口（不明な場合は0）"""
        return self.population or 0

    @classmethod
    def from_api_dict(cls, data: dict[str, Any]) -> "LocationCandidate":
        """
        Open-Meteo Geocoding APIの1件分から生成

        Raises:
            KeyError: 必須フィールド（name, latitude, longitude）がない場合
            TypeError, ValueError: 数値に変換できない場合
        """
        population = data.get("population")
        return cls(
            name=data["name"],
            country=data.get("country") or "",
            latitude=float(data["latitude"]),
            longitude=float(data["longitude"]),
            country_code=data.get("country_code"),
            population=int(population) if population is not None else None,
            feature_code=data.get("feature_code"),
        )


@dataclass
class PlaceName:
    """逆ジオコーディングで得られる地名"""

    name: str  # 都市名
    country: str  # 国名

    @classmethod
    def unknown(cls) -> "PlaceName":
        return cls(name=UNKNOWN_PLACE, country=UNKNOWN_PLACE)
