"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .batch import translate_many
from .client import translate
from .config import get_settings
from .errors import TranslateError


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="webtranslate",
        description="Translate text with the public Google translate endpoint",
    )
    parser.add_argument("texts", nargs="*", help="Texts to translate; read from stdin when omitted")
    parser.add_argument("--from", dest="source", default="auto", help="Source language code")
    parser.add_argument("--to", dest="target", default="vi", help="Target language code")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads for batches")
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.workers is not None and args.workers < 1:
        print(f"Error: workers must be at least 1, got {args.workers}", file=sys.stderr)
        return 2

    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)

    texts = list(args.texts)
    if not texts:
        texts = [line.strip() for line in sys.stdin if line.strip()]
    if not texts:
        print("Error: nothing to translate", file=sys.stderr)
        return 2

    if len(texts) == 1:
        try:
            print(translate(texts[0], args.source, args.target, settings=settings))
        except TranslateError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return 0

    items = translate_many(
        texts, args.source, args.target, workers=args.workers, settings=settings
    )

    for item in items:
        if item.ok:
            print(f"{item.text} → {item.translation}")
        else:
            print(f"{item.text} → ERROR: {item.error}")
    return 0 if all(item.ok for item in items) else 1


if __name__ == "__main__":
    sys.exit(main())
