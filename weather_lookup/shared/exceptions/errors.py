"""カスタム例外定義"""


class WeatherLookupError(Exception):
    """天気検索サービス基底例外"""

    pass


class HTTPError(WeatherLookupError):
    """HTTP関連のエラー"""

    pass


class GeocodingError(WeatherLookupError):
    """ジオコーディングエラー（通信失敗・不正なレスポンスを含む）"""

    pass


class LocationNotFoundError(GeocodingError):
    """全ての候補クエリを試しても地点が確定しなかった"""

    pass


class ForecastError(WeatherLookupError):
    """天気予報取得エラー"""

    pass


class ValidationError(WeatherLookupError):
    """バリデーションエラー"""

    pass
