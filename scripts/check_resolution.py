#!/usr/bin/env python3
"""ローカル開発用の地点解決確認スクリプト（実際のAPIを呼び出す）"""
import argparse
import sys
from pathlib import Path

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from weather_lookup.features.app.container import ServiceContainer
from weather_lookup.infrastructure.config.settings import Settings
from weather_lookup.shared.logging.config import get_logger, setup_logging

# 衝突ガード・アラビア語正規化の確認に使う都市名
DEFAULT_CITIES = [
    "Amman",
    "عمان",
    "عمّان",
    "عمان، الأردن",
    "سلطنة عمان",
    "في القاهرة",
    "Paris, France",
    "Tokyo",
]


def main():
    """メイン関数"""
    parser = argparse.ArgumentParser(description="地点解決の確認ツール（ローカル開発用）")
    parser.add_argument(
        "cities",
        nargs="*",
        help="確認する都市名（省略時は代表的な都市名）",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="デバッグモードで実行",
    )

    args = parser.parse_args()

    settings = Settings()

    log_level = "DEBUG" if args.debug else settings.log_level
    setup_logging(level=log_level)
    logger = get_logger(__name__)

    cities = args.cities or DEFAULT_CITIES

    logger.info("=" * 80)
    logger.info("地点解決の確認（ローカル開発用）")
    logger.info("=" * 80)
    logger.info(f"Geocoding API: {settings.geocoding_url}")
    logger.info(f"Cities: {len(cities)}")
    logger.info("=" * 80)

    with ServiceContainer(settings) as container:
        for city in cities:
            result = container.resolver.resolve(city)
            location = result.location
            resolved = f"{location.name}, {location.country}" if location else "-"
            logger.info(
                f"{city!r}: {result.status.value} -> {resolved} ({len(result.attempts)} attempts)"
            )

    return 0


if __name__ == "__main__":
    sys.exit(main())
