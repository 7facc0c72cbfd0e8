#!/usr/bin/env python3
"""Run live connectivity checks against the Gemini chat and vision services."""

from __future__ import annotations

import argparse
import logging
import sys
import textwrap
from dataclasses import replace
from typing import Iterable

from kisanmitra.config import AssistantConfig
from kisanmitra.services.chat import ChatService
from kisanmitra.services.vision import VisionDiagnosisService


def run_vision_probe(config: AssistantConfig) -> bool:
    with VisionDiagnosisService(config) as service:
        return service.check_connection()


def run_chat_test(config: AssistantConfig, message: str, language: str) -> str:
    result = ChatService(config).send_message(message, language)
    if not result.suggestions:
        raise RuntimeError(result.reply)
    return result.reply


def run_vision_test(config: AssistantConfig, image_path: str, language: str) -> str:
    with VisionDiagnosisService(config) as service:
        diagnosis = service.analyze_image(image_path, language=language)
    return f"{diagnosis.disease or 'Unknown'} (healthy={diagnosis.is_healthy}, confidence={diagnosis.confidence:.2f})"


def parse_args(argv: Iterable[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=textwrap.dedent(
            """\
            Smoke-test connectivity for the Gemini chat and vision services.
            The key is read from GEMINI_API_KEY (or .env) unless --gemini-key is supplied.
            The vision diagnosis only runs when --image is supplied; otherwise it is skipped.
            """
        ),
    )
    parser.add_argument("--gemini-key", help="Gemini API key overriding the environment.")
    parser.add_argument("--model", help="Gemini model name overriding the environment.")
    parser.add_argument("--message", default="How do I prepare soil for cotton?", help="Chat test message.")
    parser.add_argument("--lang", default="en", help="Language tag used for both tests.")
    parser.add_argument("--image", help="Cotton plant photo for the vision diagnosis test.")
    return parser.parse_args(list(argv))


def main(argv: Iterable[str]) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    config = AssistantConfig.from_env()
    if args.gemini_key:
        config = replace(config, gemini_api_key=args.gemini_key)
    if args.model:
        config = replace(config, gemini_model=args.model)

    results: list[tuple[str, bool, str]] = []
    if not config.is_gemini_configured:
        print("[Gemini] FAIL: API key not configured (set GEMINI_API_KEY or pass --gemini-key)")
        return 1

    ok = run_vision_probe(config)
    results.append(("Vision probe", ok, "Endpoint reachable" if ok else "Endpoint rejected the probe"))

    try:
        reply = run_chat_test(config, args.message, args.lang)
        results.append(("Chat", True, reply))
    except Exception as exc:  # noqa: BLE001 - surface connectivity failures
        results.append(("Chat", False, repr(exc)))

    if args.image:
        try:
            results.append(("Vision", True, run_vision_test(config, args.image, args.lang)))
        except Exception as exc:  # noqa: BLE001
            results.append(("Vision", False, repr(exc)))
    else:
        results.append(("Vision", False, "Skipped (no --image provided)"))

    any_failure = False
    for name, ok, detail in results:
        status = "SUCCESS" if ok else "FAIL"
        print(f"[{name}] {status}: {detail}")
        if not ok and "Skipped" not in detail:
            any_failure = True

    return 0 if not any_failure else 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
