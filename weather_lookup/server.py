"""天気検索APIサーバー（FastAPI）"""
import math
from typing import Any, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .features.app.container import ServiceContainer
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ForecastError, LocationNotFoundError, ValidationError
from .shared.logging.config import get_logger, setup_logging

# 設定を読み込み
settings = Settings()

# ロギングを設定
setup_logging(level=settings.log_level)
logger = get_logger(__name__)

# FastAPIアプリケーションを作成
app = FastAPI(
    title="Weather Lookup Service",
    description="都市名（アラビア語を含む）または座標から現在の天気と5日間の予報を返すサービス",
    version="1.0.0",
    docs_url=None if settings.is_production else "/docs",
)

_container: Optional[ServiceContainer] = None


def get_container() -> ServiceContainer:
    """サービスコンテナを取得（初回呼び出し時に作成）"""
    global _container
    if _container is None:
        _container = ServiceContainer(settings)
    return _container


@app.on_event("startup")
async def startup_event() -> None:
    """起動時の処理"""
    logger.info("Application starting up")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Project: {settings.project_name}")


@app.on_event("shutdown")
async def shutdown_event() -> None:
    """シャットダウン時の処理"""
    global _container
    if _container is not None:
        _container.close()
        _container = None
    logger.info("Application shutting down")


@app.get("/")
async def root() -> dict[str, Any]:
    """ルートエンドポイント"""
    return {
        "service": settings.project_name,
        "version": "1.0.0",
        "status": "running",
        "environment": settings.environment,
    }


@app.get("/health")
async def health(container: ServiceContainer = Depends(get_container)) -> dict[str, Any]:
    """ヘルスチェックエンドポイント（キャッシュ有効時は統計を含む）"""
    response: dict[str, Any] = {"status": "healthy"}

    cache_stats = container.weather_service.get_cache_stats()
    if cache_stats is not None:
        response["cache"] = cache_stats

    return response


# 地点解決・天気取得は外部APIを同期的に呼ぶため、def で定義してスレッドプールで実行する
@app.get("/weather")
def weather_by_city(
    city: Optional[str] = None, container: ServiceContainer = Depends(get_container)
) -> dict[str, Any]:
    """
    都市名から天気を取得

    Args:
        city: 都市名（例: "Amman", "عمان، الأردن"）

    Returns:
        dict[str, Any]: 天気レポート
    """
    report = container.weather_service.get_weather_for_city(city or "")
    return report.to_dict()


@app.get("/weather/location")
def weather_by_location(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    container: ServiceContainer = Depends(get_container),
) -> dict[str, Any]:
    """
    座標から天気を取得

    Args:
        lat: 緯度
        lon: 経度

    Returns:
        dict[str, Any]: 天気レポート
    """
    if not lat or not lon:
        raise ValidationError("Latitude and longitude parameters are required")

    try:
        latitude = float(lat)
        longitude = float(lon)
    except ValueError as e:
        raise ValidationError("Invalid latitude or longitude") from e

    if math.isnan(latitude) or math.isnan(longitude):
        raise ValidationError("Invalid latitude or longitude")

    report = container.weather_service.get_weather_for_coordinates(latitude, longitude)
    return report.to_dict()


@app.get("/resolve")
def resolve_location(
    q: Optional[str] = None, container: ServiceContainer = Depends(get_container)
) -> dict[str, Any]:
    """
    地点解決のみを実行（天気は取得しない）

    Returns:
        dict[str, Any]: 解決結果（状態、地点、試行した候補クエリ）
    """
    result = container.resolver.resolve(q or "")
    return result.to_dict()


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """入力エラー"""
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(LocationNotFoundError)
async def not_found_handler(request: Request, exc: LocationNotFoundError) -> JSONResponse:
    """地点が見つからない"""
    logger.info(f"Location not found: {exc}")
    return JSONResponse(status_code=404, content={"error": "City not found"})


@app.exception_handler(ForecastError)
async def forecast_error_handler(request: Request, exc: ForecastError) -> JSONResponse:
    """天気予報APIのエラー"""
    logger.error(f"Forecast error: {exc}")
    return JSONResponse(
        status_code=502,
        content={"error": "Failed to fetch weather data. Please try again later."},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """グローバル例外ハンドラー"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error"},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
