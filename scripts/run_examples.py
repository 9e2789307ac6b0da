"""Translate a single phrase and a small batch against the live endpoint."""

from __future__ import annotations

import argparse

from src.webtranslate.batch import translate_many
from src.webtranslate.client import translate
from src.webtranslate.errors import TranslateError


def run_examples(target: str, workers: int) -> None:
    print("--- Single Example ---")
    try:
        print("Translated:", translate("Python is fast", "auto", target))
    except TranslateError as exc:
        print("Error:", exc)

    print("\n--- Batch Example ---")
    inputs = ["Good morning", "Good night", "Have fun!"]
    for item in translate_many(inputs, "auto", target, workers=workers):
        if item.ok:
            print(f"{item.text} → {item.translation}")
        else:
            print(f"{item.text} → ERROR: {item.error}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the single and batch translation examples")
    parser.add_argument("--to", dest="target", default="vi", help="Target language code")
    parser.add_argument("--workers", type=int, default=4, help="Worker threads for the batch")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    run_examples(args.target, args.workers)


if __name__ == "__main__":
    main()
