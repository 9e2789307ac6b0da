"""Parallel translation of many independent strings."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional

import httpx

from .client import AsyncTranslator, Translator
from .config import Settings, get_settings
from .errors import TranslateError


logger = logging.getLogger("webtranslate.batch")


@dataclass(slots=True)
class BatchItem:
    """Outcome of translating one input of a batch."""

    text: str
    translation: Optional[str] = None
    error: Optional[TranslateError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        """Return the translation or raise the stored error."""

        if self.error is not None:
            raise self.error
        return self.translation or ""


def _resolve_workers(workers: Optional[int], settings: Settings) -> int:
    if workers is None:
        return settings.default_workers
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    return workers


def translate_many(
    texts: Iterable[str],
    source: str,
    target: str,
    *,
    workers: Optional[int] = None,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> List[BatchItem]:
    """Translate every string on a fixed-size thread pool.

    Results come back in input order. A failing input is recorded on its
    own ``BatchItem`` and does not affect the others.
    """

    settings = settings or get_settings()
    pool_size = _resolve_workers(workers, settings)
    values = list(texts)
    if not values:
        return []

    translator = Translator(settings, transport=transport)

    def run(text: str) -> BatchItem:
        try:
            return BatchItem(text=text, translation=translator.translate(text, source, target))
        except TranslateError as exc:
            return BatchItem(text=text, error=exc)

    logger.info(
        "Translating %d texts %s -> %s on %d workers", len(values), source, target, pool_size
    )
    with ThreadPoolExecutor(max_workers=pool_size, thread_name_prefix="webtranslate") as executor:
        items = list(executor.map(run, values))

    failures = sum(1 for item in items if not item.ok)
    if failures:
        logger.info("%d of %d translations failed", failures, len(items))
    return items


async def translate_many_async(
    texts: Iterable[str],
    source: str,
    target: str,
    *,
    workers: Optional[int] = None,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[BatchItem]:
    """Translate every string with at most ``workers`` requests in flight."""

    settings = settings or get_settings()
    limit = _resolve_workers(workers, settings)
    values = list(texts)
    if not values:
        return []

    translator = AsyncTranslator(settings, transport=transport)
    semaphore = asyncio.Semaphore(limit)

    async def run(text: str) -> BatchItem:
        async with semaphore:
            try:
                translation = await translator.translate(text, source, target)
            except TranslateError as exc:
                return BatchItem(text=text, error=exc)
        return BatchItem(text=text, translation=translation)

    logger.info(
        "Translating %d texts %s -> %s with %d concurrent requests",
        len(values),
        source,
        target,
        limit,
    )
    tasks = [asyncio.ensure_future(run(text)) for text in values]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise
