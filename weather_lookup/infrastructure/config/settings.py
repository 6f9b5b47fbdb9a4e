"""アプリケーション設定（Pydantic Settings）"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = Field(
        default="weather-lookup",
        description="プロジェクト名",
    )
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # Geocoding (Open-Meteo)
    geocoding_url: str = Field(
        default="https://geocoding-api.open-meteo.com/v1/search",
        description="Open-Meteo Geocoding APIのURL",
    )
    geocoding_result_count: int = Field(
        default=10,
        description="1回の候補クエリで取得する地点数",
    )
    geocoding_timeout: float = Field(
        default=10.0,
        description="ジオコーディングのタイムアウト（秒）",
    )
    geocoding_max_retries: int = Field(
        default=0,
        description="ジオコーディングのリトライ回数（失敗した候補は次の候補へ進むため通常0）",
    )

    # Reverse geocoding (Nominatim)
    reverse_geocoding_url: str = Field(
        default="https://nominatim.openstreetmap.org/reverse",
        description="Nominatim Reverse Geocoding APIのURL",
    )
    reverse_geocoding_rate_limit: float = Field(
        default=1.0,
        description="逆ジオコーディングのレート制限（リクエスト/秒）",
    )

    # Forecast (Open-Meteo)
    forecast_url: str = Field(
        default="https://api.open-meteo.com/v1/forecast",
        description="Open-Meteo Forecast APIのURL",
    )
    forecast_timeout: float = Field(
        default=10.0,
        description="天気予報取得のタイムアウト（秒）",
    )
    forecast_max_retries: int = Field(
        default=3,
        description="天気予報取得のリトライ回数",
    )
    forecast_days: int = Field(
        default=5,
        description="レスポンスに含める日別予報の日数",
    )

    # HTTP
    http_user_agent: str = Field(
        default="WeatherLookup/1.0",
        description="外部APIへのリクエストに付与するUser-Agent（Nominatimでは必須）",
    )

    # Cache
    weather_cache_enabled: bool = Field(
        default=True,
        description="天気レスポンスキャッシュを有効にするか",
    )
    weather_cache_ttl: int = Field(
        default=600,
        description="天気レスポンスキャッシュのTTL（秒）",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # HTTP server
    port: int = Field(
        default=8080,
        description="HTTPサーバーのポート番号",
    )

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.environment.lower() == "production"
