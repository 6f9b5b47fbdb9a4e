"""CLIエントリーポイント"""
import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .features.app.container import ServiceContainer
from .features.resolution.domain.enums import ResolutionStatus
from .features.resolution.services.resolver import LocationResolver
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import WeatherLookupError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(description="都市名・座標から天気を検索するツール")

    parser.add_argument(
        "--city",
        type=str,
        help="検索する都市名（例: Amman, عمان）",
    )

    parser.add_argument("--lat", type=float, help="緯度（--lon と併用）")
    parser.add_argument("--lon", type=float, help="経度（--lat と併用）")

    parser.add_argument(
        "--resolve-only",
        action="store_true",
        help="地点解決のみを実行し、天気は取得しない",
    )

    parser.add_argument(
        "--cities-file",
        type=Path,
        help="1行1都市のファイルを読み込み、まとめて地点解決する",
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    return parser


def resolve_batch(
    resolver: LocationResolver, cities: list[str], show_progress: bool = True
) -> dict[str, int]:
    """
    複数の都市名をまとめて地点解決

    Args:
        resolver: 地点解決サービス
        cities: 都市名のリスト
        show_progress: プログレスバーを表示するか

    Returns:
        dict[str, int]: 結果の集計（解決数、未解決数、スキップ数）
    """
    resolved_count = 0
    exhausted_count = 0
    skipped_count = 0

    logger.info(f"Starting batch resolution: {len(cities)} cities")

    iterator = tqdm(cities, desc="Resolving") if show_progress else cities

    for city in iterator:
        result = resolver.resolve(city)

        if result.status == ResolutionStatus.RESOLVED:
            resolved_count += 1
            location = result.location
            print(f"{city}\t{location.name}, {location.country}\t{location.latitude},{location.longitude}")
        elif result.status == ResolutionStatus.EXHAUSTED:
            exhausted_count += 1
            print(f"{city}\tNOT FOUND")
        else:
            skipped_count += 1

    summary = {
        "resolved": resolved_count,
        "exhausted": exhausted_count,
        "skipped": skipped_count,
        "total": len(cities),
    }

    logger.info(
        f"Batch resolution completed: {resolved_count} resolved, "
        f"{exhausted_count} exhausted, {skipped_count} skipped"
    )

    return summary


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗）
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    has_coordinates = args.lat is not None and args.lon is not None
    if not (args.city or has_coordinates or args.cities_file):
        parser.error("--city, --lat/--lon, or --cities-file is required")

    try:
        # 設定を読み込み
        settings = Settings(_env_file=args.env_file)

        # ログレベルを上書き
        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(level=settings.log_level)

        with ServiceContainer(settings) as container:
            if args.cities_file:
                cities = [
                    line.strip()
                    for line in args.cities_file.read_text(encoding="utf-8").splitlines()
                ]
                summary = resolve_batch(container.resolver, cities)
                print(json.dumps(summary))
                return 0 if summary["exhausted"] == 0 else 1

            if args.resolve_only:
                result = container.resolver.resolve(args.city or "")
                print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
                return 0 if result.is_resolved else 1

            if args.city:
                report = container.weather_service.get_weather_for_city(args.city)
            else:
                report = container.weather_service.get_weather_for_coordinates(args.lat, args.lon)

            print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
            return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except WeatherLookupError as e:
        logger.error(f"Lookup failed: {e}")
        return 1
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
