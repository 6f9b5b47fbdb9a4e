"""地点解決機能のドメインモデル"""
from dataclasses import dataclass, field
from typing import Any, Optional

from ...geocoding.domain.models import LocationCandidate
from .enums import ResolutionStatus


@dataclass(frozen=True)
class CandidateQuery:
    """ジオコーディングAPIへの1回分の問い合わせ"""

    query_string: str  # 検索文字列
    language_hint: Optional[str] = None  # 言語ヒント（"ar", "en" など）

    def to_dict(self) -> dict[str, Any]:
        return {"query": self.query_string, "language": self.language_hint}


@dataclass(frozen=True)
class ResolvedLocation:
    """確定した地点（天気取得に渡される）"""

    name: str
    country: str
    latitude: float
    longitude: float

    @classmethod
    def from_candidate(cls, candidate: LocationCandidate) -> "ResolvedLocation":
        """ジオコーディング結果の候補から生成（地点を合成することはない）"""
        return cls(
            name=candidate.name,
            country=candidate.country,
            latitude=candidate.latitude,
            longitude=candidate.longitude,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
        }


@dataclass
class ResolutionResult:
    """地点解決の結果"""

    status: ResolutionStatus
    location: Optional[ResolvedLocation] = None
    attempts: list[CandidateQuery] = field(default_factory=list)  # 実際に発行した候補クエリ

    @property
    def is_resolved(self) -> bool:
        return self.status == ResolutionStatus.RESOLVED

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "location": self.location.to_dict() if self.location else None,
            "attempts": [attempt.to_dict() for attempt in self.attempts],
        }
