"""Command-line entry point for the KisanMitra services."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from kisanmitra.config import AssistantConfig
from kisanmitra.services import mock_api
from kisanmitra.services.chat import ChatService
from kisanmitra.services.vision import VisionDiagnosisService
from kisanmitra.utils.language import SUPPORTED_LANGUAGES, detect_language


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(description="Talk to the KisanMitra farming assistant.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    chat = subparsers.add_parser("chat", help="Ask the assistant a question.")
    chat.add_argument("message", help="Question for the assistant.")
    chat.add_argument(
        "--lang",
        default=None,
        help="UI language for suggestions (en, hi, te). Detected from the message when omitted.",
    )

    diagnose = subparsers.add_parser("diagnose", help="Diagnose a cotton plant photo.")
    diagnose.add_argument("image_path", help="Path to the plant photo.")
    diagnose.add_argument("--lang", default="en", choices=SUPPORTED_LANGUAGES, help="Answer language.")
    diagnose.add_argument("--mime-type", default=None, help="Override the detected image MIME type.")
    diagnose.add_argument("--full", action="store_true", help="Print the full analysis text.")

    detect = subparsers.add_parser("detect-language", help="Classify text as en, hi or te.")
    detect.add_argument("text")

    news = subparsers.add_parser("news", help="Print the mock news feed.")
    news.add_argument("--lang", default=None, help="Show titles and summaries in one language (en, hi, te).")

    weather = subparsers.add_parser("weather", help="Print the mock weather snapshot.")
    weather.add_argument("lat", type=float)
    weather.add_argument("lon", type=float)

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point used by ``python run.py``."""
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "detect-language":
        print(detect_language(args.text))
        return 0
    if args.command == "news":
        if args.lang:
            items = mock_api.get_localized_news(args.lang)
        else:
            items = [item.as_dict() for item in mock_api.get_news()]
        print(json.dumps(items, indent=2, ensure_ascii=False))
        return 0
    if args.command == "weather":
        print(json.dumps(mock_api.fetch_weather(args.lat, args.lon).as_dict(), indent=2))
        return 0

    config = AssistantConfig.from_env()
    if args.command == "chat":
        language = args.lang or detect_language(args.message)
        result = ChatService(config).send_message(args.message, language)
        print(result.reply)
        if result.suggestions:
            print()
            print(" | ".join(result.suggestions))
        return 0 if result.suggestions else 1

    with VisionDiagnosisService(config) as service:
        diagnosis = service.analyze_image(args.image_path, language=args.lang, mime_type=args.mime_type)
    print(f"Disease: {diagnosis.disease or 'Unknown'}")
    print(f"Healthy: {'yes' if diagnosis.is_healthy else 'no'}")
    print(f"Confidence: {diagnosis.confidence:.0%}")
    if args.full:
        print()
        print(diagnosis.full_analysis)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
